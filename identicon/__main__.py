"""Run the identicon server: `python -m identicon`."""

from __future__ import annotations

import logging

import uvicorn

from identicon.config import settings
from identicon.main import app

logger = logging.getLogger("identicon")


def main() -> None:
    logger.info("Listening on port %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.identicon_log_level.lower())


if __name__ == "__main__":
    main()
