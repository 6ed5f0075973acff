"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Fixed datasets are immutable; callers receive fresh copies

Design Decisions:
    - Functional core separated from imperative shell
"""
