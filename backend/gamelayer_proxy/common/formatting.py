"""
Display Formatting Helpers

Time, number, progress and experience-curve helpers shared by the dashboard panels.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from gamelayer_proxy.common.time import TimeValue, parse_timestamp, utc_now

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR


# === TIME ===

def format_time_remaining(end_time: TimeValue, now: Optional[datetime] = None) -> str:
    """
    Countdown label for a deadline

    Example:
        >>> format_time_remaining("2030-01-02T03:00:00Z", now=datetime(2030, 1, 1, tzinfo=timezone.utc))
        '1d 3h'
    """
    end = parse_timestamp(end_time)
    if end is None:
        return "No time limit"

    remaining = (end - (now or utc_now())).total_seconds()
    if remaining <= 0:
        return "Expired"

    days = int(remaining // SECONDS_PER_DAY)
    hours = int((remaining % SECONDS_PER_DAY) // SECONDS_PER_HOUR)
    minutes = int((remaining % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE)

    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m"
    return "Less than 1m"


def format_date(value: TimeValue, now: Optional[datetime] = None) -> str:
    """Relative date within the last week, "Mar 5, 2024" beyond that"""
    date = parse_timestamp(value)
    if date is None:
        return "Unknown"

    days = ((now or utc_now()) - date) // timedelta(days=1)
    if days <= 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    return f"{date:%b} {date.day}, {date.year}"


def days_remaining(end_time: TimeValue, now: Optional[datetime] = None) -> int:
    """Whole days until end_time, rounded up; 0 when there is no deadline"""
    end = parse_timestamp(end_time)
    if end is None:
        return 0
    remaining = (end - (now or utc_now())).total_seconds()
    return -int(-remaining // SECONDS_PER_DAY)


# === NUMBERS ===

def format_number(num: float) -> str:
    """Compact number: 1500 -> "1.5K", 2000000 -> "2.0M" """
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(int(num)) if float(num).is_integer() else str(num)


def format_points(points: int) -> str:
    return f"{points} {'point' if points == 1 else 'points'}"


def format_credits(credits: int) -> str:
    return f"{credits} {'credit' if credits == 1 else 'credits'}"


# === PROGRESS ===

def calculate_progress(current: float, total: float) -> float:
    """Percentage of current over total, clamped to [0, 100]; 0 when total is 0"""
    if not total:
        return 0
    return min(max(current / total * 100, 0), 100)


def progress_ratio_percent(current: float, total: float) -> int:
    """Rounded percentage capped at 100, as shown on step progress bars"""
    if total <= 0:
        return 0
    return min(round(current / total * 100), 100)


# === EXPERIENCE CURVE ===

def calculate_level(experience: float, base_exp: int = 100, multiplier: float = 1.5) -> int:
    """
    Level reached on a geometric experience curve

    Level n -> n+1 costs floor(base_exp * multiplier ** (n - 1)).
    """
    if experience < base_exp:
        return 1

    level = 1
    exp_needed = base_exp
    remaining = experience
    while remaining >= exp_needed:
        remaining -= exp_needed
        level += 1
        exp_needed = int(base_exp * multiplier ** (level - 1))
    return level


def get_experience_for_level(level: int, base_exp: int = 100, multiplier: float = 1.5) -> int:
    """Total experience needed to reach a level on the same curve"""
    if level <= 1:
        return 0
    return sum(int(base_exp * multiplier ** (i - 1)) for i in range(1, level))
