"""Logging configuration for the ppsample package.

To use this logging configuration, set the environment variable
PPSAMPLE_LOG_CFG to the path of the logging configuration file.
The repo has a sample configuration file in the root directory.

"""

import logging
import logging.config
import os
from pathlib import Path

import tomli

from ppsample.parameter import LOG_CFG_ENV, LOG_CFG_FILE


def setup_logging(cfg_path=None):
    cfg_path = (
        cfg_path
        or os.getenv(LOG_CFG_ENV)
        or Path(__file__).parent.parent / LOG_CFG_FILE
    )

    cfg_path = Path(cfg_path)

    if not cfg_path.exists():
        ppsample_logger = logging.getLogger("ppsample")
        for handler in ppsample_logger.handlers[:]:
            ppsample_logger.removeHandler(handler)
        ppsample_logger.addHandler(logging.NullHandler())
        return

    if not cfg_path.is_file():
        raise FileNotFoundError(f"Logging config not found at {cfg_path}")

    with cfg_path.open("rb") as f:
        cfg = tomli.load(f)

    logging.config.dictConfig(cfg)
