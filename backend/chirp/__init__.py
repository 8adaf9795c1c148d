"""Chirp Application Package — minimal microblogging over a relational store.

Invariants:
    - Package root holds only the version string (no import side-effects)

Design Decisions:
    - No re-exports: callers import from the defining module
"""

__version__ = "1.0.0"
