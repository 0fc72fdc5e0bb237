"""PageLenz: offline comparison of page replacement policies."""

__version__ = "0.1.0"

import logging

# Package-wide logger; run.py reconfigures it from the YAML settings.
# Evictions are logged at DEBUG, run summaries at INFO.
logger = logging.getLogger("pagelenz")
logger.setLevel(logging.INFO)

# Re-imports (e.g. notebooks) must not stack handlers
if not logger.hasHandlers():
    _handler = logging.StreamHandler()
    _handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(_handler)
