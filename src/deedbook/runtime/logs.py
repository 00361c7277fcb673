from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "info") -> logging.Logger:
    """Attach a single stream handler to the `deedbook` logger (idempotent)."""

    logger = logging.getLogger("deedbook")
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logger.setLevel(numeric)

    if not any(getattr(h, "_deedbook", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._deedbook = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
