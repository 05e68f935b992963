"""Pydantic Schemas — request/response shapes for the REST API.

Invariants:
    - Request schemas coerce wire types only; domain rules live in core/enforce_*.py
    - Response schemas are the projections returned by the domain services

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
