"""Services Layer — analytics backends behind the AnalyticsBackend protocol.

Invariants:
    - Every backend operation is async, even when it completes immediately
    - Controllers depend on the protocol, never on a concrete backend

Design Decisions:
    - Mock backend returns constant data until a real data/AI backend exists
"""
