"""Services Layer - business rules over the Record Store.

Invariants:
    - Services raise typed domain errors (core/errors.py) and never catch them
    - Services see only validated payloads and Protocol-typed collaborators
"""
