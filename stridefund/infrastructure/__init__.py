"""Infrastructure Layer: database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain logic beyond core/errors.py
    - All SQLAlchemy failures mapped to the StrideFundError hierarchy
"""
