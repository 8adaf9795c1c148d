"""Command-Line Client — `read` and `cheep` over a CSV file.

Invariants:
    - Never touches the relational store
"""
