#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DailyCheck Habits v1.0 - Models Package
Data models and enums for habit tracking

Author: AI Assistant
Version: 1.0.0
Date: 2025-06-20
"""

from .enums import (
    TimePreference,
    StorageKeys
)

from .validation import (
    ValidationError,
    validate_text,
    validate_enum_value,
    validate_date
)

from .habit import (
    Habit,
    HabitCompletion,
    HabitStatus,
    DayStats,
    WeekData,
    generate_id
)

from .user import User

__all__ = [
    # Enums
    'TimePreference',
    'StorageKeys',

    # Validation
    'ValidationError',
    'validate_text',
    'validate_enum_value',
    'validate_date',

    # Habit models
    'Habit',
    'HabitCompletion',
    'HabitStatus',
    'DayStats',
    'WeekData',
    'generate_id',

    # User models
    'User'
]
