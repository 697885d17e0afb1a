"""Validation rule providers.

Rule lookup is an external concern: repositories delegate to a provider and
treat the returned descriptor as opaque.
"""

from __future__ import annotations

from typing import Any, Protocol

from repocache.domain.models.base import Entity


class ValidationRuleProvider(Protocol):
    def rules_for(self, entity: Entity) -> dict[str, Any]:
        """Return the rule descriptor for the entity (type or instance)."""
        ...


class SchemaRuleProvider:
    """Default provider.

    Uses the entity's explicit ``validation_rules`` when declared, otherwise
    derives a descriptor from the Pydantic JSON schema: the field property
    schemas and the list of required fields.
    """

    def rules_for(self, entity: Entity) -> dict[str, Any]:
        if entity.validation_rules is not None:
            return dict(entity.validation_rules)
        schema = type(entity).model_json_schema()
        return {
            "properties": schema.get("properties", {}),
            "required": schema.get("required", []),
        }
