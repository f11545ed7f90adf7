"""Packaged Alembic migration scripts for KADDEM."""
