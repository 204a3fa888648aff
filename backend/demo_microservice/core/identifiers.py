"""Request Identifiers — resolve caller-supplied or generated request/correlation IDs.

Invariants:
    - A supplied header value is echoed verbatim, even when empty
    - Only an absent value (None) triggers generation
    - Generated IDs are random UUID4 strings; collisions are not handled
"""

from uuid import uuid4


def new_identifier() -> str:
    return str(uuid4())


def resolve_identifier(supplied: str | None) -> str:
    """Return the supplied ID, or a fresh UUID4 when none was sent."""
    if supplied is None:
        return new_identifier()
    return supplied
