"""Infrastructure Layer — database sessions, token verification, and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver and library exceptions mapped to core/errors.py types at this boundary

Design Decisions:
    - Thin wrappers over SQLAlchemy and PyJWT
"""
