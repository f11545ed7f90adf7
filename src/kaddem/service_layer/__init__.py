"""Service layer for KADDEM.

Implements application use-cases and transaction boundaries. Calls domain
objects and the stores exposed by the unit of work.

Dependency rule: may import `kaddem.domain` and `kaddem.interfaces`, but not
`kaddem.adapters` or `kaddem.entrypoints`.
"""

from .contrat_service import ContratService

__all__ = ["ContratService"]
