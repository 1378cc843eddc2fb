"""
config.py
~~~~~~~~~

Environment-driven settings and logging setup.

Environment variables:
    LOG_LEVEL               Logging level name (default INFO)
    FEEDFORWARD_ENV         Set to 'production' to quiet third-party logs
    FEEDFORWARD_MODEL_DIR   Default directory for the model database
"""

import os
import logging

DEFAULT_MODEL_DIR = 'models'


def is_production() -> bool:
    return os.getenv('FEEDFORWARD_ENV') == 'production'


def get_model_dir() -> str:
    """Return the directory where saved networks live by default."""
    return os.getenv('FEEDFORWARD_MODEL_DIR') or DEFAULT_MODEL_DIR


def configure_logging() -> None:
    """
    Set up logging based on environment.

    - In production: silence noisy third-party logs but keep ours at INFO
    - Otherwise: use LOG_LEVEL for everything
    """
    log_level_str = os.getenv('LOG_LEVEL', 'INFO').upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if is_production():
        for logger_name in ['matplotlib', 'matplotlib.font_manager', 'PIL']:
            logging.getLogger(logger_name).setLevel(logging.WARNING)
        logging.getLogger('feedforward').setLevel(logging.INFO)
        logging.getLogger('feedforward.network').setLevel(logging.INFO)
        logging.getLogger('feedforward.model_persistence').setLevel(logging.INFO)
