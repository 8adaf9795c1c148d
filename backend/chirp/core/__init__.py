"""Core Layer — pure domain rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from repositories/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
