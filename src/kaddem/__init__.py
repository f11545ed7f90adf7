"""KADDEM

Contract management core of a student-management application.
It records student contracts, their validity periods and specialties,
and links each contract to the student who holds it.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
