"""Entrypoints (inbound adapters) for KADDEM.

Expose the application to the outside world through the `kaddem` CLI. Parse
and validate inputs, call the contract service, and present results.

Dependency rule: obtain services through `kaddem.bootstrap`; avoid importing
the store adapters directly.
"""
