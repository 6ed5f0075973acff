"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas describe the JSON contract at the system boundary
    - Field order matches the serialized key order
"""
