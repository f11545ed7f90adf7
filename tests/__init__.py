"""KADDEM test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : One behaviour suite run against every store implementation.
- integration/  : Real interactions with a SQLite database and Alembic.
- e2e/          : Command-line invocations through click's CliRunner.
- functional/   : User stories told through the CLI, start to finish.
- fixtures/     : Shared fixtures, registered via `pytest_plugins` (no tests here).

General guidance
- Service tests use recording in-memory stores instead of mocks.
- Contract tests parametrize the store backend, not the test body.
- Property-based tests (hypothesis) live with the layer they exercise.
"""
