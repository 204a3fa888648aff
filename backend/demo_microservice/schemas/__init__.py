"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Field names are the wire contract; changing one is a breaking change
"""
