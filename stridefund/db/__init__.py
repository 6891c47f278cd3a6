"""Database Declarations: SQLAlchemy Base and the shared id/timestamp mixin.

Invariants:
    - One declarative Base for every table (alembic reads Base.metadata)
"""
