"""
Post & Request Contracts

- `PreparedPost`: the post object the host builds from a REST write request,
  just before it is persisted. ``post_content is None`` means the request did
  not touch the content (a partial update).
- `WriteRequest`: the raw request fields the title check consults. ``None``
  means "not supplied", which is distinct from an explicit empty string.
- `StoredPattern`: what the in-memory post store keeps once a write passes.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class PreparedPost(BaseModel):
    """A pattern post prepared for insertion or update."""

    id: int | None = Field(default=None, description="Existing post id; None for new posts.")
    post_content: str | None = Field(default=None, description="Serialized block markup.")
    post_title: str | None = None
    post_status: str | None = None


class WriteRequest(BaseModel):
    """Fields supplied on the incoming REST write request."""

    title: str | None = None
    status: str | None = None
    content: str | None = None

    def to_prepared_post(self, post_id: int | None = None) -> PreparedPost:
        """Map request fields onto a `PreparedPost`, the way the host's REST controller does."""
        return PreparedPost(
            id=post_id,
            post_content=self.content,
            post_title=self.title,
            post_status=self.status,
        )


class StoredPattern(BaseModel):
    """A persisted pattern post."""

    id: int
    title: str = ""
    content: str = ""
    status: str = "draft"
    modified_at: datetime
