"""Block emptiness classifier.

Decides whether a parsed block holds something the author typed or
configured, or is a placeholder left exactly as inserted. The decision is a
walk of the block tree with per-type special cases; the first rule that fires wins:

1. Text-required types (paragraphs): empty once normalized -> EMPTY. Changed
   attributes or children never rescue an empty paragraph.
2. Always-allowed types (server-rendered widgets, spacers, separators)
   -> NOT EMPTY. They have no authored markup by nature.
3. Attributes, prepared for render, differ from the type's defaults
   -> NOT EMPTY.
4. Any child block is NOT EMPTY -> NOT EMPTY. Otherwise keep going.
5. Normalized inner markup is non-empty -> NOT EMPTY, else EMPTY.

The registry is passed in explicitly and only read, so classifying the same
node twice always gives the same answer. The type lists are data held by an
`EmptinessPolicy`, built from settings or supplied by the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pattern_validation.core.contracts.block import BlockNode
from pattern_validation.core.registry.block_types import BlockTypeRegistry
from pattern_validation.core.settings import (
    DEFAULT_ALLOWED_EMPTY_BLOCKS,
    DEFAULT_TEXT_REQUIRED_BLOCKS,
    Settings,
    get_logger,
)
from pattern_validation.core.validation.markup import normalize_markup

logger = get_logger(__name__)


@dataclass(frozen=True)
class EmptinessPolicy:
    """Lookup tables of block types with special emptiness rules.

    Attributes
    ----------
    text_required : frozenset[str]
        Types that are empty unless their normalized markup has content.
    always_allowed : frozenset[str]
        Types that are never empty.
    """

    text_required: frozenset[str] = frozenset(DEFAULT_TEXT_REQUIRED_BLOCKS)
    always_allowed: frozenset[str] = frozenset(DEFAULT_ALLOWED_EMPTY_BLOCKS)

    @classmethod
    def from_settings(cls, settings: Settings) -> EmptinessPolicy:
        """Build a policy from the configured block type lists."""
        return cls(
            text_required=frozenset(settings.text_required_blocks),
            always_allowed=frozenset(settings.allowed_empty_blocks),
        )


DEFAULT_POLICY = EmptinessPolicy()


def attributes_equal(left: Any, right: Any) -> bool:
    """Strict structural equality for JSON-like attribute values.

    Mappings compare by key set and per-key value, regardless of key order.
    Sequences compare element-wise. Booleans only equal booleans, and strings
    never equal numbers, so ``True != 1`` and ``"1" != 1``. Integers and
    floats compare by value (``2 == 2.0``), as JSON does not tell them apart.
    """
    pending: list[tuple[Any, Any]] = [(left, right)]
    while pending:
        a, b = pending.pop()
        if isinstance(a, Mapping) and isinstance(b, Mapping):
            if a.keys() != b.keys():
                return False
            pending.extend((a[key], b[key]) for key in a)
            continue
        if isinstance(a, list | tuple) and isinstance(b, list | tuple):
            if len(a) != len(b):
                return False
            pending.extend(zip(a, b, strict=True))
            continue
        if not _scalars_equal(a, b):
            return False
    return True


def _scalars_equal(left: Any, right: Any) -> bool:
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if isinstance(left, int | float) and isinstance(right, int | float):
        return left == right
    if type(left) is not type(right):
        return False
    return bool(left == right)


def has_changed_attributes(block: BlockNode, registry: BlockTypeRegistry) -> bool:
    """Return True if ``block``'s prepared attributes differ from its type's defaults.

    Blocks whose type is not registered have no defaults to compare against
    and report False.
    """
    block_type = registry.get_registered(block.block_name)
    if block_type is None:
        return False
    prepared = block_type.prepare_attributes_for_render(block.attrs)
    defaults = block_type.default_attributes()
    return not attributes_equal(prepared, defaults)


def is_not_empty_block(
    block: BlockNode,
    registry: BlockTypeRegistry,
    policy: EmptinessPolicy = DEFAULT_POLICY,
) -> bool:
    """Return True if ``block`` carries authored content or configuration.

    The tree is walked depth-first with an explicit stack, so nesting depth is
    bounded by memory only. A block is NOT EMPTY as soon as any node reachable
    through non-pruned ancestors is, which lets a node's own markup be checked
    before its children without changing the answer.
    """
    pending = [block]
    while pending:
        node = pending.pop()
        name = node.block_name
        has_markup = bool(normalize_markup(node.inner_html))

        if name in policy.text_required and not has_markup:
            # Prunes the whole subtree.
            logger.debug("%s: empty text-required block", name)
            continue

        if name in policy.always_allowed:
            return True

        if has_changed_attributes(node, registry):
            logger.debug("%s: attributes differ from defaults", name)
            return True

        if has_markup:
            return True

        pending.extend(reversed(node.inner_blocks))

    return False


def filter_non_empty_blocks(
    blocks: Iterable[BlockNode],
    registry: BlockTypeRegistry,
    policy: EmptinessPolicy = DEFAULT_POLICY,
) -> list[BlockNode]:
    """Return the blocks from ``blocks`` that classify as NOT EMPTY, in order."""
    return [block for block in blocks if is_not_empty_block(block, registry, policy)]


__all__ = [
    "DEFAULT_POLICY",
    "EmptinessPolicy",
    "attributes_equal",
    "filter_non_empty_blocks",
    "has_changed_attributes",
    "is_not_empty_block",
]
