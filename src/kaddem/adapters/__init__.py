"""Adapters (infrastructure) for KADDEM.

Provide concrete implementations of the store interfaces (in-memory and
SQLAlchemy), plus persistence mapping and related wiring (engines, metadata,
migrations, unit of work).

Dependency rule: may import `kaddem.domain` and `kaddem.interfaces`; the domain
must not import this package.
"""
