#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DailyCheck Habits v1.0 - Command line entry point
Local front end over the habit tracker

Author: AI Assistant
Version: 1.0.0
Date: 2025-06-20
"""

import argparse
import logging
import secrets
import sys
from pathlib import Path
from typing import List, Optional

from config import config
from models.user import User
from models.validation import ValidationError
from services.habit_service import create_app_store, create_habit_tracker
from services.session import load_current_user, save_session
from utils.datetime_utils import formatted_date, day_name
from utils.logger import configure_logging

logger = logging.getLogger(__name__)

LOCAL_USER_ID = "local"

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Daily habit tracker')
    parser.add_argument('--data-file', type=Path, default=None, help='Store file (default from DATA_DIR)')
    parser.add_argument('--dev', action='store_true', help='Development mode (debug logging)')

    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('list', help='Habits with today\'s status and streaks')

    add = commands.add_parser('add', help='Add a habit')
    add.add_argument('name')
    add.add_argument('--time', dest='time_preference', default=config.tracker.default_time_preference,
                     choices=['morning', 'evening', 'anytime'])

    rename = commands.add_parser('update', help='Rename a habit or change its time preference')
    rename.add_argument('habit_id')
    rename.add_argument('--name', default=None)
    rename.add_argument('--time', dest='time_preference', default=None,
                        choices=['morning', 'evening', 'anytime'])

    toggle = commands.add_parser('toggle', help='Toggle today\'s completion')
    toggle.add_argument('habit_id')

    delete = commands.add_parser('delete', help='Delete a habit and its history')
    delete.add_argument('habit_id')

    stats = commands.add_parser('stats', help='Completion stats for a day')
    stats.add_argument('--date', default=None, help='YYYY-MM-DD (default today)')

    commands.add_parser('week', help='Completion stats for the last seven days')

    return parser

def _session_user(store) -> User:
    user = load_current_user(store)
    if user is None:
        user = User(id=LOCAL_USER_ID, email="local@localhost", name="Local user")
        save_session(store, user, secrets.token_urlsafe(16))
    return user

def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(config)
    if args.dev:
        logging.getLogger().setLevel(logging.DEBUG)

    store = create_app_store(config, args.data_file)
    tracker = create_habit_tracker(config, user=_session_user(store), store=store)

    try:
        if args.command == 'list':
            habits = tracker.list_habits_with_status()
            if not habits:
                print("No habits yet.")
            for status in habits:
                mark = "x" if status.is_completed else " "
                print(f"[{mark}] {status.id}  {status.name} ({status.time_preference.value}) "
                      f"streak {status.streak}")

        elif args.command == 'add':
            habit = tracker.add_habit(args.name, args.time_preference)
            print(f"Added {habit.name}: {habit.id}")

        elif args.command == 'update':
            habit = tracker.update_habit(args.habit_id, name=args.name, time_preference=args.time_preference)
            if habit is None:
                print(f"No habit {args.habit_id}")
                return 1
            print(f"Updated {habit.name} ({habit.time_preference.value})")

        elif args.command == 'toggle':
            completion = tracker.toggle_completion(args.habit_id)
            if completion is None:
                print(f"No habit {args.habit_id}")
                return 1
            state = "done" if completion.completed else "not done"
            print(f"{completion.date}: {state}, streak {tracker.habit_streak(args.habit_id)}")

        elif args.command == 'delete':
            if not tracker.delete_habit(args.habit_id):
                print(f"No habit {args.habit_id}")
                return 1
            print(f"Deleted {args.habit_id}")

        elif args.command == 'stats':
            stats = tracker.day_stats(args.date or tracker.today())
            print(f"{formatted_date(stats.date)}: {stats.completed}/{stats.total} "
                  f"({stats.completion_rate}%)")

        elif args.command == 'week':
            for day in tracker.week_stats().days:
                print(f"{day_name(day.date)} {day.date}: {day.completed}/{day.total} ({day.completion_rate}%)")

    except ValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    return 0

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
