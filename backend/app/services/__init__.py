"""Services Layer — the imperative shell around core/ planners.

Invariants:
    - Services flush, routes commit (via infrastructure.database.atomic)
    - Ordering writes for segments and titles go through OrderManager only

Design Decisions:
    - One service module per aggregate (segments, titles, assignments, catalog)
"""
