"""Services Layer: challenge, user and post operations.

Invariants:
    - Services depend on repository Protocols, never on SQLAlchemy directly
    - Every state-changing operation logs at INFO with entity ids in `extra`
"""
