"""
ASGI Entry Point for the blockstyle API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads environment variables from `.env` first so that settings read at
import time (log level, default options file) see them.

Usage
-----
Run via the module entry point:
    $ python -m blockstyle.api.server

Or via uvicorn directly:
    $ uvicorn blockstyle.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(".env"))

from blockstyle.api.app import create_app  # noqa: E402
from blockstyle.core.settings import load_settings  # noqa: E402

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    settings = load_settings()
    uvicorn.run(
        "blockstyle.api.server:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.is_dev,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
