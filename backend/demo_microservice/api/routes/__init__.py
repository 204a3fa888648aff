"""Route Modules — one file per route group.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never build payloads themselves (delegate to core builders)
"""
