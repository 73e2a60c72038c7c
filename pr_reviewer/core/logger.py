# =============================================================================
# pr_reviewer/core/logger.py
# =============================================================================
import logging
import os
from pr_reviewer.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def get_module_logger(module_name: str, log_file: str):
    """
    Module logger writing to its own file under settings.LOG_DIR and to the console.

    ``log_file`` is a bare file name, e.g. "pull_request_service.log".
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(settings.LOG_LEVEL.upper())

    # Prevent adding multiple handlers if logger is called multiple times
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(settings.LOG_DIR, log_file))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
