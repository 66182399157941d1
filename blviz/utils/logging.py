"""
loguru sink setup shared by the streamlit page and the scripts.

Library modules only import ``logger``. Entry points call ``setup_logging``,
which removes any existing sink first, so calling it again never duplicates
output.
"""

import sys
from loguru import logger

def setup_logging(level="INFO", show_time=True):
    """Configure loguru for the viewer.
    
    Parameters
    ----------
    level : str
        Logging level (DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL)
    show_time : bool
        Whether to show timestamps in the output.
    """
    logger.remove()
    
    if show_time:
        log_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        log_format = (
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
        
    logger.add(sys.stderr, format=log_format, level=level.upper(), colorize=True)
    
    return logger
