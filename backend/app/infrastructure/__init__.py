"""Infrastructure Layer — database sessions and logging.

Invariants:
    - Infrastructure never imports from core/ domain logic except errors
    - Driver errors are mapped to KorfbalStreamError subclasses before leaving this layer

Design Decisions:
    - Thin wrappers over SQLAlchemy and stdlib logging (ADR: single responsibility)
"""
