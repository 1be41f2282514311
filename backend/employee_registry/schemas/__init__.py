"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary; the service never sees an invalid payload
    - Wire names are camelCase (firstName), Python names are snake_case
"""
