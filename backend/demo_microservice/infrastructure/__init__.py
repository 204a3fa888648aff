"""Infrastructure Layer — host introspection and logging setup.

Invariants:
    - Infrastructure never imports from api/
"""
