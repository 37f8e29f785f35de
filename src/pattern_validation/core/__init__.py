"""Core package initializer for Pattern Validation.

Downstream code imports from the concrete submodules, e.g.:
    from pattern_validation.core.settings import settings, get_logger
    from pattern_validation.core.validation.pattern import validate_content
"""

from __future__ import annotations

__all__ = ["__doc__"]
