"""ASGI entry point."""

import os

import uvicorn

from .core.app import create_app
from .logging import configure_logging

configure_logging()
app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
