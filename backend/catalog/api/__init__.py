"""API Layer: FastAPI routes, auth gate, request validation and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses carry a top-level "message" key
"""
