"""Demo Microservice Package — stateless REST demo service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
