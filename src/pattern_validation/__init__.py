"""Pattern Validation package bootstrap.

Pre-save validators for block-based "pattern" content: a markup normalizer,
a recursive block-emptiness classifier, and the content/title checks that run
on the REST write path before a pattern is persisted.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"
