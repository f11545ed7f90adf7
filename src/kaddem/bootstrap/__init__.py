"""Bootstrap (composition root) for KADDEM.

Assembles the application at runtime: wires the concrete SQLAlchemy unit of
work into the contract service and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `kaddem.adapters`, `kaddem.service_layer`,
  `kaddem.interfaces`, `kaddem.domain`, and `kaddem.config`.
- Inner layers must not import `kaddem.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
