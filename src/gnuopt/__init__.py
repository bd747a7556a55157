from __future__ import annotations

from loguru import logger

from gnuopt import parser
from gnuopt.parser import *  # noqa: F403


__all__ = parser.__all__

__version__ = "1.0.0"

logger.disable("gnuopt")
