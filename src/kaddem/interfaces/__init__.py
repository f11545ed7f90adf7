"""Interfaces (application boundary) for KADDEM.

Defines framework-free application contracts: the store ABCs consumed by the
service layer, the unit of work, and store errors. Business rules stay out of
this package.

Dependency rule: may import `kaddem.domain` only. It may be imported by
`kaddem.service_layer`, `kaddem.adapters`, and `kaddem.bootstrap`.
"""
