# scripts/smoke.py
"""
Smoke Test Script for the pattern validators.

Usage
-----
1. Run the built-in sample patterns:
    $ python scripts/smoke.py

2. Check a local pattern file as a new published pattern:
    $ python scripts/smoke.py --file pattern.html --title "Hero"
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from pattern_validation.core.contracts.post import WriteRequest
from pattern_validation.core.registry.block_types import default_registry
from pattern_validation.core.store.posts import InMemoryPostStore
from pattern_validation.core.validation.pattern import apply_pre_insert_filters

load_dotenv(Path(".env"))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
SAMPLES: dict[str, str] = {
    "authored paragraph": "<!-- wp:paragraph --><p>Welcome to the pattern.</p><!-- /wp:paragraph -->",
    "placeholder image": (
        '<!-- wp:image --><figure class="wp-block-image"><img alt=""/></figure><!-- /wp:image -->'
    ),
    "spacer only": "<!-- wp:spacer /-->",
    "raw html": "<p>No block delimiters</p>",
    "empty": "",
}


def main() -> None:
    """Run each sample (or the given file) through the pre-insert filters."""
    parser = argparse.ArgumentParser(description="Run the pattern validation smoke test")
    parser.add_argument("--file", "-f", type=str, help="Path to a pattern markup file")
    parser.add_argument("--title", "-t", type=str, default="Smoke test", help="Pattern title")
    args = parser.parse_args()

    samples = SAMPLES
    if args.file:
        path = Path(args.file)
        if not path.exists():
            print(f"File not found: {path}")
            sys.exit(2)
        samples = {path.name: path.read_text(encoding="utf-8")}

    registry = default_registry()
    store = InMemoryPostStore()
    rejected = 0
    for name, content in samples.items():
        request = WriteRequest(title=args.title, status="publish", content=content)
        outcome = apply_pre_insert_filters(
            request.to_prepared_post(), request, registry=registry, store=store
        )
        if outcome.is_ok():
            print(f"  accepted  {name}")
        else:
            rejected += 1
            print(f"  rejected  {name}: {outcome.unwrap_err().code.value}")

    print(f"\n{len(samples) - rejected} accepted, {rejected} rejected")


if __name__ == "__main__":
    main()
