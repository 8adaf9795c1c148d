"""Database Package — declarative Base shared by all ORM models.

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite for local runs and tests
"""
