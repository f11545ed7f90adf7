"""Errors raised by the contract and student stores."""


class StoreError(Exception):
    """Base class for store errors."""


class NotFoundError(StoreError, LookupError):
    """Raised when a lookup yields no record."""


class ContratNotFoundError(NotFoundError):
    """Raised when no contract has the requested id.

    Attributes:
        contrat_id (int): The id that was looked up.
    """

    def __init__(self, contrat_id: int) -> None:
        super().__init__(f"Contrat ({contrat_id}) not found")
        self.contrat_id = contrat_id


class EtudiantNotFoundError(NotFoundError):
    """Raised when no student matches the requested name pair.

    Attributes:
        last_name (str): The last name that was looked up.
        first_name (str): The first name that was looked up.
    """

    def __init__(self, last_name: str, first_name: str) -> None:
        super().__init__(f"Etudiant ({last_name} {first_name}) not found")
        self.last_name = last_name
        self.first_name = first_name


class UnsavedEtudiantError(StoreError):
    """Raised when a contract is saved while assigned to a student without an id.

    Attributes:
        full_name (str): Name of the unsaved student.
    """

    def __init__(self, full_name: str) -> None:
        super().__init__(f"Etudiant ({full_name}) must be saved before its contrats")
        self.full_name = full_name
