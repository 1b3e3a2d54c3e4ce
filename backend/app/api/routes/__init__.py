"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes own lookups and the transaction boundary; ordering and skill rules live in services

Design Decisions:
    - Explicit registration in main.py over auto-discovery (ADR: one place to see the whole API surface)
"""
