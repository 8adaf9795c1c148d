"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from chirp.models.author import Author  # noqa: F401
from chirp.models.cheep import Cheep  # noqa: F401
from chirp.models.follow import Follow  # noqa: F401
