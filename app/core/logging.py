"""Application-wide logging utilities.

Planner modules log through the `uvicorn.error` logger so capacity and
storage messages show up next to the request log in the server output.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("uvicorn.error")


def configure_logging(debug: bool = False) -> None:
    """Lower the shared logger to DEBUG when the app runs in debug mode.

    When the app runs outside uvicorn (tests, scripts) no handler is
    attached yet; a plain stream handler is added so messages are not lost.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
