"""
API Routes for Pattern Writes.

Endpoints
---------
- `POST /patterns`: Create a pattern.
- `POST /patterns/{post_id}`: Update an existing pattern (partial).
- `GET /patterns/{post_id}`: Fetch a stored pattern.
- `POST /patterns/validate`: Run the pre-insert checks without saving.

Every write goes through `apply_pre_insert_filters` before it touches the
store. A rejection becomes HTTP 400 with ``{"code", "message", "data"}``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from pattern_validation.api.schemas import ValidationReport
from pattern_validation.core.contracts.post import PreparedPost, StoredPattern, WriteRequest
from pattern_validation.core.registry.block_types import BlockTypeRegistry, default_registry
from pattern_validation.core.settings import load_settings
from pattern_validation.core.store.posts import InMemoryPostStore, get_post_store
from pattern_validation.core.validation.emptiness import EmptinessPolicy
from pattern_validation.core.validation.pattern import Outcome, apply_pre_insert_filters

router = APIRouter(prefix="/patterns", tags=["Patterns"])

_REGISTRY = default_registry()


def get_registry() -> BlockTypeRegistry:
    """Dependency: the block type registry used for validation."""
    return _REGISTRY


def _run_filters(
    post: PreparedPost,
    request: WriteRequest,
    registry: BlockTypeRegistry,
    store: InMemoryPostStore,
) -> Outcome:
    config = load_settings()
    return apply_pre_insert_filters(
        post,
        request,
        registry=registry,
        store=store,
        policy=EmptinessPolicy.from_settings(config),
        draft_statuses=config.draft_statuses,
    )


def _rejection(outcome: Outcome) -> JSONResponse:
    failure = outcome.unwrap_err()
    return JSONResponse(status_code=failure.status, content=failure.to_rest_error())


@router.post(
    "/validate",
    response_model=ValidationReport,
    summary="Check a pattern write without saving it",
)
async def validate_pattern(
    request: WriteRequest,
    post_id: int | None = None,
    registry: BlockTypeRegistry = Depends(get_registry),
    store: InMemoryPostStore = Depends(get_post_store),
) -> ValidationReport:
    """Run the pre-insert checks and report the outcome."""
    outcome = _run_filters(request.to_prepared_post(post_id), request, registry, store)
    if outcome.is_ok():
        return ValidationReport(valid=True)
    return ValidationReport.model_validate(
        {"valid": False, "error": outcome.unwrap_err().to_rest_error()}
    )


@router.post(
    "",
    response_model=StoredPattern,
    status_code=status.HTTP_201_CREATED,
    summary="Create a pattern",
    responses={400: {"description": "Pattern rejected by validation"}},
)
async def create_pattern(
    request: WriteRequest,
    registry: BlockTypeRegistry = Depends(get_registry),
    store: InMemoryPostStore = Depends(get_post_store),
) -> StoredPattern | JSONResponse:
    """Validate and store a new pattern."""
    outcome = _run_filters(request.to_prepared_post(), request, registry, store)
    if outcome.is_err():
        return _rejection(outcome)
    return store.insert(outcome.unwrap())


@router.post(
    "/{post_id}",
    response_model=StoredPattern,
    summary="Update a pattern",
    responses={400: {"description": "Pattern rejected by validation"}},
)
async def update_pattern(
    post_id: int,
    request: WriteRequest,
    registry: BlockTypeRegistry = Depends(get_registry),
    store: InMemoryPostStore = Depends(get_post_store),
) -> StoredPattern | JSONResponse:
    """Validate and apply a partial update to an existing pattern."""
    if store.get(post_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pattern {post_id} not found",
        )
    outcome = _run_filters(request.to_prepared_post(post_id), request, registry, store)
    if outcome.is_err():
        return _rejection(outcome)
    return store.update(post_id, outcome.unwrap())


@router.get(
    "/{post_id}",
    response_model=StoredPattern,
    summary="Get a stored pattern",
)
async def get_pattern(
    post_id: int,
    store: InMemoryPostStore = Depends(get_post_store),
) -> StoredPattern:
    """Retrieve a stored pattern by id."""
    pattern = store.get(post_id)
    if pattern is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pattern {post_id} not found",
        )
    return pattern


__all__ = ["get_registry", "router"]
