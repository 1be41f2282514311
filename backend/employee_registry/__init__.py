"""Employee Registry Package - CRUD REST service for employee records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
