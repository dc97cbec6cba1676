from __future__ import annotations

"""Centralized logging utilities for envmerge.

Every module asks for its logger here so handlers are attached once and the
format stays consistent. Nothing is written to disk unless a log directory is
configured.
"""

import logging
import logging.handlers
import os
import pathlib
from typing import Optional

# Cache created loggers so repeated calls don't duplicate handlers
_LOGGER_CACHE = {}


def get_logger(
    name: str = "envmerge",
    log_dir: Optional[str] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """Return a configured :class:`logging.Logger`.

    Parameters
    ----------
    name:
        Logger name (also used in log filename: ``{name}.log``).
    log_dir:
        Directory for a rotating log file. Created if missing. ``None`` means
        console only.
    level:
        Level name, e.g. ``"DEBUG"``. ``None`` keeps the current level
        (``INFO`` for a new logger).

    Behavior
    --------
    * Console handler with a bare message format.
    * Rotating file handler (5MB x5 backups) when ``log_dir`` is given.
    * Reuses cached logger on subsequent calls; a later call still applies
      its ``level`` and adds a file handler if the logger has none yet.
    """
    logger = _LOGGER_CACHE.get(name)
    if logger is None:
        logger = logging.getLogger(name)

        # Guard against double-adding handlers if the interpreter reloads modules
        if not logger.handlers:
            # Console ------------------------------------------------------
            ch = logging.StreamHandler()
            ch.setFormatter(logging.Formatter("%(message)s"))
            logger.addHandler(ch)

        logger.setLevel(logging.INFO)
        _LOGGER_CACHE[name] = logger

    if level is not None:
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Rotating file --------------------------------------------------------
    if log_dir is not None and not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        pathlib.Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_path = os.path.join(log_dir, f"{name}.log")
        fh = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=5_000_000, backupCount=5, encoding="utf-8"
        )
        fh.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        logger.addHandler(fh)

    return logger
