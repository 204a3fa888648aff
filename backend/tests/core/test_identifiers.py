"""Request Identifiers — echo-or-generate semantics."""

from uuid import UUID

from demo_microservice.core.identifiers import new_identifier, resolve_identifier


def test_supplied_identifier_is_echoed():
    assert resolve_identifier("abc123") == "abc123"


def test_empty_identifier_is_echoed_not_replaced():
    assert resolve_identifier("") == ""


def test_missing_identifier_becomes_uuid4():
    generated = resolve_identifier(None)
    assert UUID(generated).version == 4


def test_generated_identifiers_are_distinct():
    assert len({new_identifier() for _ in range(50)}) == 50
