"""Pydantic Schemas: request/response contracts for the product endpoints.

Invariants:
    - Schemas validate at the system boundary (request payloads, responses)
    - JSON uses camelCase "inStock"; Python uses snake_case "in_stock"
"""
