"""
ASGI Entry Point for the Pattern Validation API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads environment variables from `.env` before the application factory runs,
so settings read at import time see them.

Usage
-----
    $ python -m pattern_validation.api.server
    $ uvicorn pattern_validation.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(".env"))

from pattern_validation.api.app import create_app  # noqa: E402
from pattern_validation.core.settings import load_settings  # noqa: E402

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    config = load_settings()
    uvicorn.run(
        "pattern_validation.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=config.is_dev,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
