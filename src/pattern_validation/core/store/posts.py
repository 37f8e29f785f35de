"""
Pattern Post Store.

The title check needs two read-only lookups from the host's post storage:
the stored title and the stored status of a post. `PostStore` is that
contract. `InMemoryPostStore` implements it for the bundled API and CLI and
adds the writes they need.

Note on Persistence
-------------------
This is a volatile memory store. Restarting the process loses every pattern.
A host plugs in its own storage by implementing `PostStore`.
"""

from __future__ import annotations

import itertools
from datetime import UTC, datetime
from typing import ClassVar, Protocol

from pattern_validation.core.contracts.post import PreparedPost, StoredPattern


class PostStore(Protocol):
    """Read-only post lookups consulted during validation."""

    def get_title(self, post_id: int | None) -> str: ...

    def get_status(self, post_id: int | None) -> str: ...


class InMemoryPostStore:
    """
    A dictionary-backed store for `StoredPattern` objects.
    """

    _instance: ClassVar[InMemoryPostStore | None] = None

    def __init__(self) -> None:
        self._posts: dict[int, StoredPattern] = {}
        self._ids = itertools.count(1)

    @classmethod
    def get_instance(cls) -> InMemoryPostStore:
        """Accessor for the global singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    # ----- PostStore ---------------------------------------------------------
    def get_title(self, post_id: int | None) -> str:
        """Return the stored title, or ``""`` for unknown or new posts."""
        post = self.get(post_id)
        return post.title if post else ""

    def get_status(self, post_id: int | None) -> str:
        """Return the stored status, or ``""`` for unknown or new posts."""
        post = self.get(post_id)
        return post.status if post else ""

    # ----- Reads & writes ----------------------------------------------------
    def get(self, post_id: int | None) -> StoredPattern | None:
        """Retrieve a stored pattern, or None if not found."""
        if post_id is None:
            return None
        return self._posts.get(post_id)

    def insert(self, post: PreparedPost) -> StoredPattern:
        """Persist a new pattern and assign it an id."""
        stored = StoredPattern(
            id=next(self._ids),
            title=post.post_title or "",
            content=post.post_content or "",
            status=post.post_status or "draft",
            modified_at=datetime.now(UTC),
        )
        self._posts[stored.id] = stored
        return stored

    def update(self, post_id: int, post: PreparedPost) -> StoredPattern:
        """Apply the fields set on ``post`` to an existing pattern.

        Raises
        ------
        KeyError
            If no pattern with ``post_id`` exists.
        """
        current = self._posts[post_id]
        changes: dict[str, object] = {"modified_at": datetime.now(UTC)}
        if post.post_title is not None:
            changes["title"] = post.post_title
        if post.post_content is not None:
            changes["content"] = post.post_content
        if post.post_status is not None:
            changes["status"] = post.post_status
        updated = current.model_copy(update=changes)
        self._posts[post_id] = updated
        return updated

    def clear(self) -> None:
        """Drop every stored pattern and restart id assignment."""
        self._posts.clear()
        self._ids = itertools.count(1)


def get_post_store() -> InMemoryPostStore:
    return InMemoryPostStore.get_instance()


__all__ = ["InMemoryPostStore", "PostStore", "get_post_store"]
