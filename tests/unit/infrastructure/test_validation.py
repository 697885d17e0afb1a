"""Tests for the default validation rule provider."""

from repocache.domain.models import Asset
from repocache.domain.models.base import Entity
from repocache.infrastructure.validation import SchemaRuleProvider


class _Note(Entity):
    id: int = 0
    body: str = ""


class _Required(Entity):
    id: int
    body: str = ""


def test_explicit_rules_are_returned():
    assert SchemaRuleProvider().rules_for(Asset()) == Asset.validation_rules


def test_explicit_rules_are_copied():
    rules = SchemaRuleProvider().rules_for(Asset())
    rules["extra"] = ["required"]
    assert "extra" not in Asset.validation_rules


def test_schema_fallback_lists_properties():
    rules = SchemaRuleProvider().rules_for(_Note())
    assert set(rules["properties"]) == {"id", "body"}
    assert rules["properties"]["id"]["type"] == "integer"
    assert rules["required"] == []


def test_schema_fallback_lists_required_fields():
    rules = SchemaRuleProvider().rules_for(_Required(id=1))
    assert rules["required"] == ["id"]
