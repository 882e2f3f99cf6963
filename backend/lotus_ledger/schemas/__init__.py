"""Pydantic Schemas: request/response validation for API endpoints.

Design Decisions:
    - Separate from the store documents: schemas are API contracts,
      documents are persistence
"""
