#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DailyCheck Habits v1.0 - Configuration
Centralized environment-driven configuration with validation

Author: AI Assistant
Version: 1.0.0
Date: 2025-06-20
"""

import os
import sys
from pathlib import Path
from typing import Dict, Any
from dataclasses import dataclass
from enum import Enum

import pytz
from dotenv import load_dotenv

load_dotenv()

class Environment(Enum):
    """Runtime environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

class LogLevel(Enum):
    """Logging levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class StorageConfig:
    """Persistent store configuration"""
    path: Path
    persist_enabled: bool = True

@dataclass
class TrackerConfig:
    """Habit tracker configuration"""
    timezone: str = "UTC"
    default_time_preference: str = "anytime"
    max_name_length: int = 100

class AppConfig:
    """Main configuration class"""

    def __init__(self):
        self.environment = Environment(os.getenv('ENVIRONMENT', 'development'))
        self._load_config()
        self._validate_config()

    def _load_config(self):
        """Load configuration from environment variables"""

        # Directories
        self.data_dir = Path(os.getenv('DATA_DIR', 'data'))
        self.log_dir = Path(os.getenv('LOG_DIR', 'logs'))

        # Storage
        self.storage = StorageConfig(
            path=self.data_dir / os.getenv('DATA_FILE', 'habits.json'),
            persist_enabled=os.getenv('PERSIST_ENABLED', 'true').lower() == 'true'
        )

        # Tracker
        self.tracker = TrackerConfig(
            timezone=os.getenv('TIMEZONE', 'UTC'),
            default_time_preference=os.getenv('DEFAULT_TIME_PREFERENCE', 'anytime'),
            max_name_length=int(os.getenv('MAX_NAME_LENGTH', 100))
        )

        # Logging
        self.log_level = LogLevel(os.getenv('LOG_LEVEL', 'INFO').upper())
        self.log_to_file = os.getenv('LOG_TO_FILE', 'false').lower() == 'true'
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        )

    def _validate_config(self):
        """Validate configuration"""
        errors = []

        if self.tracker.timezone not in pytz.all_timezones_set:
            errors.append(f"TIMEZONE '{self.tracker.timezone}' is not a known timezone")

        if self.tracker.default_time_preference not in ('morning', 'evening', 'anytime'):
            errors.append(
                f"DEFAULT_TIME_PREFERENCE '{self.tracker.default_time_preference}' "
                "must be one of: morning, evening, anytime"
            )

        if self.tracker.max_name_length <= 0:
            errors.append("MAX_NAME_LENGTH must be a positive number")

        if errors:
            raise ValueError("Configuration errors:\n" + "\n".join(f"• {error}" for error in errors))

    def ensure_directories(self):
        """Create required directories"""
        directories = [self.data_dir]
        if self.log_to_file:
            directories.append(self.log_dir)

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    def get_logging_config(self) -> Dict[str, Any]:
        """Build a logging.config.dictConfig mapping"""
        handlers = ['console']
        if self.log_to_file:
            handlers.append('file')

        logging_config = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.log_format,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'level': self.log_level.value,
                    'formatter': 'default',
                    'stream': sys.stderr
                }
            },
            'loggers': {
                '': {
                    'level': self.log_level.value,
                    'handlers': handlers,
                    'propagate': False
                }
            }
        }

        if self.log_to_file:
            logging_config['handlers']['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.log_level.value,
                'formatter': 'default',
                'filename': str(self.log_dir / f"habits_{self.environment.value}.log"),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5,
                'encoding': 'utf-8'
            }

        return logging_config

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to a dict"""
        return {
            'environment': self.environment.value,
            'storage_path': str(self.storage.path),
            'persist_enabled': self.storage.persist_enabled,
            'timezone': self.tracker.timezone,
            'default_time_preference': self.tracker.default_time_preference,
            'log_level': self.log_level.value,
            'log_to_file': self.log_to_file
        }

# Global configuration instance
config = AppConfig()

__all__ = [
    'config',
    'AppConfig',
    'Environment',
    'LogLevel',
    'StorageConfig',
    'TrackerConfig'
]
