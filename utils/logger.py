# utils/logger.py

import logging
import logging.config

def configure_logging(app_config) -> logging.Logger:
    """Apply the dictConfig mapping produced by AppConfig.get_logging_config()"""
    app_config.ensure_directories()
    logging.config.dictConfig(app_config.get_logging_config())
    return logging.getLogger()
