"""Blog API Package — HTTP API for creating, listing, sharing, and deleting blog posts.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
