"""Infrastructure Layer — persistence, locking and cross-cutting concerns.

Invariants:
    - Infrastructure imports only core contracts (errors, domain types, protocols),
      never core decision logic
    - All SQLAlchemy failures mapped to core errors before leaving this layer

Design Decisions:
    - Repositories implement core/repository_protocols.py structurally (no inheritance)
"""
