"""Domain layer for KADDEM.

Contains business rules: the `Contrat` and `Etudiant` entities, the
`Specialite` enumeration, and domain errors. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `kaddem.adapters` or `kaddem.entrypoints`.
"""

from .entities import Contrat, Etudiant, Specialite

__all__ = ["Contrat", "Etudiant", "Specialite"]
