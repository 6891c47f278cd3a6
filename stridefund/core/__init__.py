"""Core Layer: pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or models/
    - All functions are pure and deterministic (id generation aside)
    - Async appears only in repository Protocol signatures

Design Decisions:
    - Functional core separated from imperative shell
"""
