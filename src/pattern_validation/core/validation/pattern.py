"""
Pre-insert validators for pattern posts.

Two checks run on the REST write path before a pattern is persisted, in a
fixed order:

1. `validate_content` (priority 10): the content parses into registered
   blocks and at least one of them is not an untouched placeholder.
2. `validate_title` (priority 11): published patterns have a title.

Both take and return a `Result[PreparedPost, ValidationFailure]`. An incoming
`Err` is returned unchanged, so a payload rejected by an earlier check is not
evaluated again. An accepted post is always passed through unmodified.

Rejections are values, never exceptions; the host maps them to HTTP 400.
"""

from __future__ import annotations

from collections.abc import Collection

from pattern_validation.core.blocks.parser import BlockParser, parse_blocks
from pattern_validation.core.contracts.failure import FailureCode, ValidationFailure
from pattern_validation.core.contracts.post import PreparedPost, WriteRequest
from pattern_validation.core.registry.block_types import BlockTypeRegistry
from pattern_validation.core.result import Result, err, ok
from pattern_validation.core.settings import DEFAULT_DRAFT_STATUSES, get_logger
from pattern_validation.core.store.posts import PostStore
from pattern_validation.core.validation.emptiness import (
    DEFAULT_POLICY,
    EmptinessPolicy,
    filter_non_empty_blocks,
)

logger = get_logger(__name__)

Outcome = Result[PreparedPost, ValidationFailure]

# The editor separates blocks with blank lines; the parser would turn them
# into freeform pseudo-blocks.
_BLOCK_SEPARATOR = "\n\n"


def _reject(code: FailureCode, post: PreparedPost) -> Outcome:
    logger.info("Rejected pattern write (post=%s): %s", post.id, code.value)
    return err(ValidationFailure.from_code(code))


def check_content(
    post: PreparedPost,
    *,
    registry: BlockTypeRegistry,
    parser: BlockParser = parse_blocks,
    policy: EmptinessPolicy = DEFAULT_POLICY,
) -> Outcome:
    """Content check on an accepted post. See `validate_content`."""
    if post.post_content is None:
        return ok(post)

    content = post.post_content
    if not content.strip():
        return _reject(FailureCode.EMPTY_CONTENT, post)

    blocks = parser(content.replace(_BLOCK_SEPARATOR, ""))

    invalid = [block for block in blocks if not registry.is_registered(block.block_name)]
    if invalid:
        logger.debug("Invalid top-level blocks: %s", [b.block_name for b in invalid])
        return _reject(FailureCode.INVALID_BLOCKS, post)

    if not filter_non_empty_blocks(blocks, registry, policy):
        return _reject(FailureCode.EMPTY_BLOCKS, post)

    return ok(post)


def check_title(
    post: PreparedPost,
    request: WriteRequest,
    *,
    store: PostStore,
    draft_statuses: Collection[str] = DEFAULT_DRAFT_STATUSES,
) -> Outcome:
    """Title check on an accepted post. See `validate_title`."""
    status = request.status if request.status is not None else store.get_status(post.id)
    if status in draft_statuses:
        return ok(post)

    if request.title is not None:
        if not request.title.strip():
            return _reject(FailureCode.EMPTY_TITLE, post)
        return ok(post)

    if not store.get_title(post.id):
        return _reject(FailureCode.EMPTY_TITLE, post)

    return ok(post)


def validate_content(
    prepared: Outcome,
    request: WriteRequest | None = None,
    *,
    registry: BlockTypeRegistry,
    parser: BlockParser = parse_blocks,
    policy: EmptinessPolicy = DEFAULT_POLICY,
) -> Outcome:
    """Reject empty content, unknown blocks, or content made only of placeholders.

    Parameters
    ----------
    prepared : Result[PreparedPost, ValidationFailure]
        Output of the previous filter; an `Err` passes straight through.
    request : WriteRequest, optional
        Unused by this check; accepted so both filters share one signature.
    registry : BlockTypeRegistry
        Read-only lookup of registered block types.
    parser : BlockParser
        Turns serialized content into top-level blocks.
    policy : EmptinessPolicy
        Block types with special emptiness rules.

    Returns
    -------
    Result[PreparedPost, ValidationFailure]
        `Ok` with the unmodified post, or `Err` with one of
        ``rest_pattern_empty``, ``rest_pattern_invalid_blocks``,
        ``rest_pattern_empty_blocks``.
    """
    return prepared.flat_map(
        lambda post: check_content(post, registry=registry, parser=parser, policy=policy)
    )


def validate_title(
    prepared: Outcome,
    request: WriteRequest,
    *,
    store: PostStore,
    draft_statuses: Collection[str] = DEFAULT_DRAFT_STATUSES,
) -> Outcome:
    """Require a title on non-draft patterns.

    The status comes from the request, or from the store when the request
    does not set one. Drafts skip the check. Otherwise an explicitly supplied
    title must not be blank, and when none is supplied the stored title must
    not be empty. Rejections carry ``rest_pattern_empty_title``.
    """
    return prepared.flat_map(
        lambda post: check_title(post, request, store=store, draft_statuses=draft_statuses)
    )


def apply_pre_insert_filters(
    post: PreparedPost | Outcome,
    request: WriteRequest,
    *,
    registry: BlockTypeRegistry,
    store: PostStore,
    parser: BlockParser = parse_blocks,
    policy: EmptinessPolicy = DEFAULT_POLICY,
    draft_statuses: Collection[str] = DEFAULT_DRAFT_STATUSES,
) -> Outcome:
    """Run the content check, then the title check, threading the outcome."""
    outcome: Outcome = post if isinstance(post, Result) else ok(post)
    outcome = validate_content(outcome, request, registry=registry, parser=parser, policy=policy)
    return validate_title(outcome, request, store=store, draft_statuses=draft_statuses)


__all__ = [
    "Outcome",
    "apply_pre_insert_filters",
    "check_content",
    "check_title",
    "validate_content",
    "validate_title",
]
