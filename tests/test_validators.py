"""
Tests for the pre-insert pattern validators.

Scenarios
---------
1. **Content**: empty content, invalid blocks, placeholder-only content,
   partial updates, and pass-through of earlier failures.
2. **Title**: draft bypass, explicit blank titles, missing titles on new and
   existing posts.
3. **Filter chain**: content runs first and a content rejection skips the
   title check.
"""

from __future__ import annotations

import pytest

from pattern_validation.core.contracts.block import BlockNode
from pattern_validation.core.contracts.failure import FailureCode, ValidationFailure
from pattern_validation.core.contracts.post import PreparedPost, WriteRequest
from pattern_validation.core.registry.block_types import BlockTypeRegistry, default_registry
from pattern_validation.core.result import Err, Result, err, ok
from pattern_validation.core.store.posts import InMemoryPostStore
from pattern_validation.core.validation.pattern import (
    apply_pre_insert_filters,
    validate_content,
    validate_title,
)

PARAGRAPH = "<!-- wp:paragraph --><p>Hello world</p><!-- /wp:paragraph -->"
EMPTY_PARAGRAPH = "<!-- wp:paragraph --><p></p><!-- /wp:paragraph -->"
EMPTY_IMAGE = (
    '<!-- wp:image --><figure class="wp-block-image"><img alt=""/></figure><!-- /wp:image -->'
)


@pytest.fixture  # type: ignore[misc]
def registry() -> BlockTypeRegistry:
    return default_registry()


@pytest.fixture  # type: ignore[misc]
def store() -> InMemoryPostStore:
    return InMemoryPostStore()


class _UntouchableStore:
    """A post store that fails the test if it is consulted."""

    def get_title(self, post_id: int | None) -> str:
        raise AssertionError("title lookup should not happen")

    def get_status(self, post_id: int | None) -> str:
        raise AssertionError("status lookup should not happen")


def _content(text: str | None, registry: BlockTypeRegistry) -> Result[PreparedPost, ValidationFailure]:
    return validate_content(ok(PreparedPost(post_content=text)), registry=registry)


def _code(outcome: Result[PreparedPost, ValidationFailure]) -> FailureCode:
    return outcome.unwrap_err().code


# --------------------------------------------------------------------------- #
# Content
# --------------------------------------------------------------------------- #


def test_missing_content_field_passes_through(registry: BlockTypeRegistry) -> None:
    post = PreparedPost(id=3, post_title="Only the title changed")
    outcome = validate_content(ok(post), registry=registry)
    assert outcome.is_ok()
    assert outcome.unwrap() is post


@pytest.mark.parametrize("text", ["", "   ", "\n\n"])  # type: ignore[misc]
def test_blank_content_is_rejected(registry: BlockTypeRegistry, text: str) -> None:
    outcome = _content(text, registry)
    assert _code(outcome) is FailureCode.EMPTY_CONTENT
    failure = outcome.unwrap_err()
    assert failure.status == 400
    assert failure.message == "Pattern content cannot be empty."


def test_unregistered_block_is_invalid(registry: BlockTypeRegistry) -> None:
    outcome = _content("<!-- wp:acme/unknown /-->", registry)
    assert _code(outcome) is FailureCode.INVALID_BLOCKS


def test_content_without_block_delimiters_is_invalid(registry: BlockTypeRegistry) -> None:
    assert _code(_content("<p>Just some HTML</p>", registry)) is FailureCode.INVALID_BLOCKS


def test_invalid_block_beats_valid_siblings(registry: BlockTypeRegistry) -> None:
    outcome = _content(PARAGRAPH + "<!-- wp:acme/unknown /-->", registry)
    assert _code(outcome) is FailureCode.INVALID_BLOCKS


def test_blank_lines_between_blocks_are_collapsed(registry: BlockTypeRegistry) -> None:
    outcome = _content(PARAGRAPH + "\n\n" + PARAGRAPH, registry)
    assert outcome.is_ok()


def test_single_newline_between_blocks_is_a_freeform_block(registry: BlockTypeRegistry) -> None:
    outcome = _content(PARAGRAPH + "\n" + PARAGRAPH, registry)
    assert _code(outcome) is FailureCode.INVALID_BLOCKS


def test_only_placeholder_blocks_are_rejected(registry: BlockTypeRegistry) -> None:
    outcome = _content(EMPTY_PARAGRAPH + "\n\n" + EMPTY_IMAGE, registry)
    assert _code(outcome) is FailureCode.EMPTY_BLOCKS
    assert outcome.unwrap_err().message == "Pattern content contains only empty blocks."


def test_one_real_block_is_enough(registry: BlockTypeRegistry) -> None:
    post = PreparedPost(post_content=EMPTY_PARAGRAPH + "\n\n" + PARAGRAPH)
    outcome = validate_content(ok(post), registry=registry)
    assert outcome.unwrap() is post


def test_dynamic_block_alone_is_accepted(registry: BlockTypeRegistry) -> None:
    assert _content("<!-- wp:latest-posts /-->", registry).is_ok()


def test_nested_content_counts(registry: BlockTypeRegistry) -> None:
    content = (
        '<!-- wp:group --><div class="wp-block-group">'
        + EMPTY_PARAGRAPH
        + PARAGRAPH
        + "</div><!-- /wp:group -->"
    )
    assert _content(content, registry).is_ok()


def test_content_parser_is_injectable(registry: BlockTypeRegistry) -> None:
    seen: list[str] = []

    def parser(text: str) -> list[BlockNode]:
        seen.append(text)
        return [BlockNode(block_name="core/spacer")]

    outcome = validate_content(
        ok(PreparedPost(post_content="a\n\nb")), registry=registry, parser=parser
    )
    assert outcome.is_ok()
    assert seen == ["ab"]


def test_earlier_failure_passes_through_content_check(registry: BlockTypeRegistry) -> None:
    upstream: Result[PreparedPost, ValidationFailure] = err(
        ValidationFailure.from_code(FailureCode.EMPTY_TITLE)
    )
    assert validate_content(upstream, registry=registry) is upstream


# --------------------------------------------------------------------------- #
# Title
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize("status", ["draft", "auto-draft"])  # type: ignore[misc]
def test_drafts_skip_title_check(store: InMemoryPostStore, status: str) -> None:
    post = PreparedPost(post_content=PARAGRAPH)
    outcome = validate_title(ok(post), WriteRequest(title="", status=status), store=store)
    assert outcome.unwrap() is post


def test_stored_draft_status_is_used_when_request_has_none(store: InMemoryPostStore) -> None:
    stored = store.insert(PreparedPost(post_status="draft"))
    outcome = validate_title(ok(PreparedPost(id=stored.id)), WriteRequest(title=" "), store=store)
    assert outcome.is_ok()


def test_request_status_overrides_stored_status(store: InMemoryPostStore) -> None:
    stored = store.insert(PreparedPost(post_status="draft"))
    request = WriteRequest(title=" ", status="publish")
    outcome = validate_title(ok(PreparedPost(id=stored.id)), request, store=store)
    assert _code(outcome) is FailureCode.EMPTY_TITLE


def test_blank_explicit_title_is_rejected(store: InMemoryPostStore) -> None:
    request = WriteRequest(title="   ", status="publish")
    outcome = validate_title(ok(PreparedPost()), request, store=store)
    assert _code(outcome) is FailureCode.EMPTY_TITLE
    assert outcome.unwrap_err().message == "A pattern title is required."


def test_missing_title_with_empty_stored_title_is_rejected(store: InMemoryPostStore) -> None:
    outcome = validate_title(ok(PreparedPost()), WriteRequest(status="publish"), store=store)
    assert _code(outcome) is FailureCode.EMPTY_TITLE


def test_missing_title_with_stored_title_passes(store: InMemoryPostStore) -> None:
    stored = store.insert(PreparedPost(post_title="Hero", post_status="publish"))
    outcome = validate_title(ok(PreparedPost(id=stored.id)), WriteRequest(), store=store)
    assert outcome.is_ok()


def test_explicit_title_wins_over_empty_stored_title(store: InMemoryPostStore) -> None:
    stored = store.insert(PreparedPost(post_status="publish"))
    request = WriteRequest(title="Hero")
    assert validate_title(ok(PreparedPost(id=stored.id)), request, store=store).is_ok()


def test_earlier_failure_passes_through_title_check() -> None:
    upstream: Result[PreparedPost, ValidationFailure] = err(
        ValidationFailure.from_code(FailureCode.EMPTY_BLOCKS)
    )
    out = validate_title(upstream, WriteRequest(), store=_UntouchableStore())
    assert out is upstream


def test_custom_draft_statuses(store: InMemoryPostStore) -> None:
    request = WriteRequest(title="", status="pending")
    outcome = validate_title(
        ok(PreparedPost()), request, store=store, draft_statuses={"pending"}
    )
    assert outcome.is_ok()


# --------------------------------------------------------------------------- #
# Filter chain
# --------------------------------------------------------------------------- #


def test_chain_accepts_valid_pattern(registry: BlockTypeRegistry, store: InMemoryPostStore) -> None:
    request = WriteRequest(title="Hero", status="publish", content=PARAGRAPH)
    post = request.to_prepared_post()
    outcome = apply_pre_insert_filters(post, request, registry=registry, store=store)
    assert outcome.unwrap() is post


def test_chain_stops_at_content_failure(registry: BlockTypeRegistry) -> None:
    request = WriteRequest(title="", status="publish", content=EMPTY_PARAGRAPH)
    outcome = apply_pre_insert_filters(
        request.to_prepared_post(), request, registry=registry, store=_UntouchableStore()
    )
    assert isinstance(outcome, Err)
    assert outcome.error.code is FailureCode.EMPTY_BLOCKS


def test_chain_reports_title_failure_after_content_passes(
    registry: BlockTypeRegistry, store: InMemoryPostStore
) -> None:
    request = WriteRequest(status="publish", content=PARAGRAPH)
    outcome = apply_pre_insert_filters(
        request.to_prepared_post(), request, registry=registry, store=store
    )
    assert _code(outcome) is FailureCode.EMPTY_TITLE


def test_failure_renders_as_rest_error() -> None:
    failure = ValidationFailure.from_code(FailureCode.INVALID_BLOCKS)
    assert failure.to_rest_error() == {
        "code": "rest_pattern_invalid_blocks",
        "message": "Pattern content contains invalid blocks.",
        "data": {"status": 400},
    }
