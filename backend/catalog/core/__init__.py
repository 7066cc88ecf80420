"""Core Layer: pure catalog logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Store operations are synchronous and in-memory

Design Decisions:
    - Functional core separated from the FastAPI shell (routes only orchestrate)
"""
