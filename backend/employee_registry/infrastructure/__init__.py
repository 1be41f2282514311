"""Infrastructure Layer - database access, hashing, and cross-cutting concerns.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - SQLAlchemy errors never leave this layer unmapped
"""
