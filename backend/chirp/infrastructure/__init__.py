"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from repositories/ or api/
    - All store failures mapped to DatabaseError
"""
