from __future__ import annotations

"""Logging configuration for applications embedding wildconf.

The library itself only creates module loggers. Call :func:`setup_logging`
at application start-up (the command-line front end does) to install
handlers.
"""

import logging
import logging.config
import os
from typing import Any, Dict, Optional

from wildconf.config import ConfigManager

__all__ = ["setup_logging"]


def setup_logging(level: Optional[int] = None) -> None:
    """Configure logging from the ``logging`` section of the library config.

    Args:
        level: Optional level forced onto the ``wildconf`` logger after the
            configuration is applied (the CLI passes DEBUG for ``-v``)
    """
    log_dir = os.environ.get("WILDCONF_LOG_DIR", "logs")

    try:
        logging_config = ConfigManager().get_logging_config()

        if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
            handlers = logging_config.get("handlers", {})
            if "file" in handlers:
                os.makedirs(log_dir, exist_ok=True)
                filename = os.path.basename(handlers["file"].get("filename") or "wildconf.log")
                handlers["file"] = dict(handlers["file"], filename=os.path.join(log_dir, filename))

            logging.config.dictConfig(logging_config)
            logging.getLogger("wildconf").debug("Logging initialised from config files")
        else:
            _setup_minimal_logging()
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        _setup_minimal_logging()
        logging.getLogger("wildconf").warning("Logging config rejected, using console only: %s", exc)

    if level is not None:
        logging.getLogger("wildconf").setLevel(level)

    _apply_debug_overrides()


def _minimal_config() -> Dict[str, Any]:
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'DEBUG',
            },
        },
        'loggers': {
            'wildconf': {
                'handlers': ['console'],
                'level': 'WARNING',
                'propagate': False,
            }
        },
    }


def _setup_minimal_logging() -> None:
    """Set up console-only logging when the configured one is unusable."""
    logging.config.dictConfig(_minimal_config())


def _apply_debug_overrides() -> None:
    """Switch loggers listed in ``WILDCONF_DEBUG_MODULES`` to DEBUG.

    The variable holds comma separated logger names, for example
    ``wildconf.core.loader,wildconf.core.parser``.
    """
    extra_modules = os.environ.get('WILDCONF_DEBUG_MODULES', '').strip()
    targets = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
