"""Pydantic Schemas — request/response validation for API endpoints.

Design Decisions:
    - Separate from models and view models: schemas are API contracts
"""
