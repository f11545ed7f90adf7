"""Contract tests for `EtudiantStore` implementations."""


class TestFindByName:
    """find_by_name()"""

    @staticmethod
    def test_missing(etudiant_store):
        """An unknown name pair yields None."""
        assert etudiant_store.find_by_name("Test", "Student") is None

    @staticmethod
    def test_exact_match_only(etudiant_store, make_etudiant):
        """Both names must match exactly."""
        etudiant_store.save(make_etudiant())
        assert etudiant_store.find_by_name("Test", "Other") is None
        assert etudiant_store.find_by_name("Student", "Test") is None
        assert etudiant_store.find_by_name("Test", "Student").etudiant_id == 1

    @staticmethod
    def test_duplicates_return_lowest_id(etudiant_store, make_etudiant):
        """With homonyms, the first stored student is returned."""
        etudiant_store.save(make_etudiant())
        etudiant_store.save(make_etudiant())
        assert etudiant_store.find_by_name("Test", "Student").etudiant_id == 1

    @staticmethod
    def test_loads_contracts(etudiant_store, contrat_store, make_etudiant, make_contrat):
        """The student's contracts are listed, pointing back to the student."""
        etudiant = etudiant_store.save(make_etudiant())
        contrat_store.save(make_contrat())
        contrat_store.save(make_contrat(etudiant=etudiant))
        contrat_store.save(make_contrat(etudiant=etudiant))

        found = etudiant_store.find_by_name("Test", "Student")

        assert [c.contrat_id for c in found.contrats] == [2, 3]
        assert all(c.etudiant is found for c in found.contrats)


class TestSaveAndFindById:
    """save() / find_by_id()"""

    @staticmethod
    def test_assigns_id(etudiant_store, make_etudiant):
        """A new student gets an id set on the given object."""
        etudiant = make_etudiant()
        assert etudiant_store.save(etudiant) is etudiant
        assert etudiant.etudiant_id == 1
        assert etudiant_store.find_by_id(1) == etudiant

    @staticmethod
    def test_rename(etudiant_store, make_etudiant):
        """Saving a stored student updates its names."""
        etudiant = etudiant_store.save(make_etudiant())
        etudiant.first_name = "Renamed"
        etudiant_store.save(etudiant)
        assert etudiant_store.find_by_id(1).first_name == "Renamed"
        assert etudiant_store.find_by_name("Test", "Student") is None

    @staticmethod
    def test_missing_id(etudiant_store):
        """An unknown id yields None."""
        assert etudiant_store.find_by_id(5) is None
