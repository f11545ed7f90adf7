"""Database wiring: engine factory, table metadata and schema, migrations."""
