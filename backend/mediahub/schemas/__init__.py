"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; services never see untrimmed
      strings, malformed URLs, non-positive ids or unparseable dates
    - Response schemas read ORM objects (from_attributes)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
