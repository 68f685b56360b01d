"""Tree-walking evaluator for the PLC teaching language."""

from loguru import logger

# library code stays quiet until a driver opts in
logger.disable("plc_ref")

__version__ = "0.1.0"
