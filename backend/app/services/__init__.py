"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services depend on repository protocols, never on SQLAlchemy directly
    - Every multi-step write runs inside a repository guard

Design Decisions:
    - One service per aggregate (portfolios, personal information)
"""
