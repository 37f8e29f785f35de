"""
Block Type Registry.

The emptiness classifier needs one thing from a block type: what its
attributes look like once prepared for rendering, both for the submitted
attributes and for an empty attribute set (the type's defaults). This module
implements that contract:

- `BlockType.prepare_attributes_for_render(attrs)`:
    1. Drop supplied attributes that fail their schema (`type` / `enum`).
    2. Fill schema attributes the caller did not supply with their `default`.
    3. Leave attributes the schema does not know about untouched.
- `BlockTypeRegistry`: a name -> `BlockType` lookup. Read-only from the
  validators' point of view.

Type checks are strict JSON types: ``True`` is a boolean, not an integer, and
``"5"`` is a string, not a number.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pattern_validation.core.settings import get_logger

logger = get_logger(__name__)

AttributeSchema = Mapping[str, Any]


def _matches_type(value: Any, type_name: str) -> bool:
    if type_name == "string":
        return isinstance(value, str)
    if type_name == "boolean":
        return isinstance(value, bool)
    if type_name == "integer":
        return isinstance(value, int) and not isinstance(value, bool)
    if type_name == "number":
        return isinstance(value, int | float) and not isinstance(value, bool)
    if type_name == "object":
        return isinstance(value, dict)
    if type_name == "array":
        return isinstance(value, list)
    if type_name == "null":
        return value is None
    # Unknown schema types do not constrain the value.
    return True


def is_valid_for_schema(value: Any, schema: AttributeSchema) -> bool:
    """Return True if ``value`` satisfies the attribute ``schema``.

    Only `type` (a name or a list of names) and `enum` are enforced.
    """
    declared = schema.get("type")
    if declared is not None:
        names = [declared] if isinstance(declared, str) else list(declared)
        if not any(_matches_type(value, name) for name in names):
            return False
    allowed = schema.get("enum")
    if allowed is not None and value not in allowed:
        return False
    return True


@dataclass(frozen=True)
class BlockType:
    """A registered block type and its attribute schema."""

    name: str
    attributes: Mapping[str, AttributeSchema] = field(default_factory=dict)

    def prepare_attributes_for_render(self, attrs: Mapping[str, Any]) -> dict[str, Any]:
        """Validate ``attrs`` against the schema and fill in declared defaults.

        Returns a new dict; ``attrs`` is not modified.
        """
        prepared: dict[str, Any] = {}
        for name, value in attrs.items():
            schema = self.attributes.get(name)
            if schema is not None and not is_valid_for_schema(value, schema):
                logger.debug("Dropping invalid attribute %s=%r on %s", name, value, self.name)
                continue
            prepared[name] = value

        for name, schema in self.attributes.items():
            if name not in prepared and "default" in schema:
                prepared[name] = schema["default"]
        return prepared

    def default_attributes(self) -> dict[str, Any]:
        """Return the attributes this type renders with when none are set."""
        return self.prepare_attributes_for_render({})


class BlockTypeRegistry:
    """
    A dictionary-backed registry of block types keyed by namespaced name.
    """

    def __init__(self, block_types: Iterable[BlockType] = ()) -> None:
        self._types: dict[str, BlockType] = {}
        for block_type in block_types:
            self.register(block_type)

    def register(self, block_type: BlockType) -> BlockType:
        """Register ``block_type``; raise ``ValueError`` if the name is taken."""
        if block_type.name in self._types:
            raise ValueError(f'Block type "{block_type.name}" is already registered.')
        self._types[block_type.name] = block_type
        return block_type

    def unregister(self, name: str) -> BlockType:
        """Remove and return the block type called ``name``; raise ``KeyError`` if absent."""
        try:
            return self._types.pop(name)
        except KeyError:
            raise KeyError(f'Block type "{name}" is not registered.') from None

    def get_registered(self, name: str | None) -> BlockType | None:
        """Look up a block type; ``None`` for unknown names (or a ``None`` name)."""
        if name is None:
            return None
        return self._types.get(name)

    def is_registered(self, name: str | None) -> bool:
        """Return True if ``name`` is a registered block type."""
        return self.get_registered(name) is not None

    def names(self) -> list[str]:
        """Return all registered block type names, sorted."""
        return sorted(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._types


def default_registry() -> BlockTypeRegistry:
    """Return a fresh registry preloaded with the bundled core block types."""
    from pattern_validation.core.registry.core_blocks import CORE_BLOCK_TYPES

    return BlockTypeRegistry(CORE_BLOCK_TYPES)


__all__ = [
    "BlockType",
    "BlockTypeRegistry",
    "default_registry",
    "is_valid_for_schema",
]
