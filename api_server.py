"""ASGI entrypoint for the FastAPI backend (keeps command short and PYTHONPATH configured)."""

from __future__ import annotations

import pathlib
import sys


ROOT = pathlib.Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from guiderbooks.api.app import create_app
from guiderbooks.configuration import settings

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api_server:app", host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())
