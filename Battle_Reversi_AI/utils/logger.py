"""Lightweight logging utilities for games and debugging."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def silent(message):
    """Logger that drops every event (used with --quiet)."""
