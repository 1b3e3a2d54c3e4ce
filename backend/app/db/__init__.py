"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - All sessions are async (AsyncSession), created by infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
    - aiosqlite for tests: same async API, in-memory
"""
