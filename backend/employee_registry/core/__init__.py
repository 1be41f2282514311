"""Core Layer - domain types, typed failures and boundary contracts.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Nothing here performs IO
"""
