"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is owned by the authentication service; this API only reads it

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from blog_api.models.user import User  # noqa: F401
from blog_api.models.blog_post import BlogPost  # noqa: F401
