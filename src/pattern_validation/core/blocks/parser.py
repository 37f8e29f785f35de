"""Block parser: turn serialized pattern content into a tree of `BlockNode`.

Blocks are delimited by HTML comments:

    <!-- wp:paragraph {"dropCap":true} --><p>Hi</p><!-- /wp:paragraph -->
    <!-- wp:spacer /-->
    <!-- wp:my-plugin/card -->...<!-- /wp:my-plugin/card -->

Rules
-----
- Names without a namespace belong to ``core/``.
- The optional JSON object after the name becomes ``attrs``; malformed JSON,
  or JSON nested too deeply to decode, gives an empty mapping.
- Text at the top level, outside any delimiter, becomes a freeform block
  (``block_name=None``). That includes bare whitespace between blocks, which
  is why callers collapse blank lines before parsing.
- Text inside an open block is appended to its ``inner_html``; nested
  delimiters become ``inner_blocks``.
- A closer with no open block is kept as freeform text; blocks still open at
  the end of the document are closed there.

The validators take the parser as a parameter, so a host can substitute its
own implementation of the same contract.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from pattern_validation.core.contracts.block import BlockNode
from pattern_validation.core.settings import get_logger

logger = get_logger(__name__)

BlockParser = Callable[[str], list[BlockNode]]

_HEAD = re.compile(
    r"<!--\s+(?P<closer>/)?wp:(?P<namespace>[a-z][a-z0-9_-]*/)?(?P<name>[a-z][a-z0-9_-]*)(?=\s)"
)
_END = "-->"


@dataclass(frozen=True)
class _Delimiter:
    start: int
    end: int
    name: str
    attrs: str | None
    closer: bool
    void: bool


def _delimiters(document: str) -> Iterator[_Delimiter]:
    """Yield the block delimiters of ``document`` in order.

    A delimiter runs from a ``<!-- wp:name`` head to the first ``-->`` after
    it, and what lies between must be whitespace, optionally a JSON object
    followed by whitespace, and optionally a ``/``. The ``-->`` position and
    the trimmed end of the text before it are computed once and shared by
    every head in front of it, so each character is scanned a bounded number
    of times however many heads fail to close.
    """
    pos = 0
    end = inner = tail = -1
    while True:
        head = _HEAD.search(document, pos)
        if head is None:
            return
        pos = head.end()

        if end < pos:
            end = document.find(_END, pos)
            if end == -1:
                return
            inner = end - 1 if document[end - 1] == "/" else end
            tail = inner
            while tail > pos and document[tail - 1].isspace():
                tail -= 1

        first = pos
        while first < inner and document[first].isspace():
            first += 1

        if first == inner:
            attrs = None
        elif document[first] == "{" and tail < inner and document[tail - 1] == "}":
            attrs = document[first:tail]
        else:
            continue

        yield _Delimiter(
            start=head.start(),
            end=end + len(_END),
            name=(head["namespace"] or "core/") + head["name"],
            attrs=attrs,
            closer=head["closer"] is not None,
            void=inner < end,
        )
        pos = end + len(_END)


@dataclass
class _OpenBlock:
    """A block whose closing delimiter has not been seen yet."""

    name: str
    attrs: dict[str, Any]
    html: list[str] = field(default_factory=list)
    children: list[BlockNode] = field(default_factory=list)

    def close(self) -> BlockNode:
        return BlockNode(
            block_name=self.name,
            attrs=self.attrs,
            inner_html="".join(self.html),
            inner_blocks=self.children,
        )


def _decode_attrs(raw: str | None, name: str) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        decoded = json.loads(raw)
    except (json.JSONDecodeError, RecursionError):
        logger.debug("Ignoring malformed attributes on %s: %r", name, raw)
        return {}
    return decoded if isinstance(decoded, dict) else {}


def _freeform(html: str) -> BlockNode:
    return BlockNode(block_name=None, inner_html=html)


def parse_blocks(document: str) -> list[BlockNode]:
    """Parse ``document`` into its top-level blocks.

    Parameters
    ----------
    document : str
        Serialized block content.

    Returns
    -------
    list[BlockNode]
        Top-level blocks in document order. Non-empty input always yields at
        least one block.
    """
    output: list[BlockNode] = []
    stack: list[_OpenBlock] = []

    def add_text(text: str) -> None:
        if not text:
            return
        if stack:
            stack[-1].html.append(text)
        else:
            output.append(_freeform(text))

    def add_block(block: BlockNode) -> None:
        if stack:
            stack[-1].children.append(block)
        else:
            output.append(block)

    offset = 0
    for delimiter in _delimiters(document):
        add_text(document[offset : delimiter.start])
        offset = delimiter.end

        if delimiter.closer:
            if not stack:
                add_text(document[delimiter.start : delimiter.end])
                continue
            add_block(stack.pop().close())
            continue

        attrs = _decode_attrs(delimiter.attrs, delimiter.name)
        if delimiter.void:
            add_block(BlockNode(block_name=delimiter.name, attrs=attrs))
        else:
            stack.append(_OpenBlock(name=delimiter.name, attrs=attrs))

    add_text(document[offset:])
    while stack:
        add_block(stack.pop().close())

    return output


__all__ = ["BlockParser", "parse_blocks"]
