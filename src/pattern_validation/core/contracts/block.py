"""
Block Contract

A `BlockNode` is one element of the tree produced by the block parser from
raw pattern content. It mirrors the shape of a parsed block on the host
side (``blockName`` / ``attrs`` / ``innerHTML`` / ``innerBlocks``), so
payloads coming from the host can be validated directly with
``BlockNode.model_validate(...)``.

Nodes are frozen: the validators only read them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BlockNode(BaseModel):
    """A parsed block with its attributes, inner markup and child blocks."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    block_name: str | None = Field(
        default=None,
        alias="blockName",
        description="Namespaced block type (e.g. 'core/paragraph'); None for freeform text.",
    )
    attrs: dict[str, Any] = Field(
        default_factory=dict, description="Attributes from the block delimiter comment."
    )
    inner_html: str = Field(
        default="",
        alias="innerHTML",
        description="Markup between the block delimiters, excluding child blocks.",
    )
    inner_blocks: list[BlockNode] = Field(
        default_factory=list, alias="innerBlocks", description="Nested child blocks in order."
    )

    @property
    def is_freeform(self) -> bool:
        """Return True for text that sits outside any block delimiter."""
        return self.block_name is None
