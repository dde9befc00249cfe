# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Date-titled report tab helpers.

Daily report tabs are titled with their date, e.g. ``Oct 18, 2026``. These
helpers select the tabs belonging to a summary period, order them by date and
name the summary tabs.
"""

import datetime
import logging
import re
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

TAB_TITLE_PATTERN = re.compile(r"^([A-Z][a-z]{2}) (\d{1,2}), (\d{4})$")


def _today(today: Optional[datetime.date]) -> datetime.date:
    return today if today is not None else datetime.date.today()


def format_tab_date(day: datetime.date) -> str:
    """Format a date as a report tab title, e.g. ``Oct 8, 2026``."""
    return f"{MONTHS[day.month - 1]} {day.day}, {day.year}"


def parse_tab_date(title: str) -> Optional[datetime.date]:
    """
    Parse the date of a report tab title.

    Returns:
        The date, or None when the title is not a valid date title
    """
    if not isinstance(title, str):
        raise TypeError("Tab title must be a string.")

    match = TAB_TITLE_PATTERN.match(title)
    if not match or match.group(1) not in MONTHS:
        return None
    try:
        return datetime.date(int(match.group(3)), MONTHS.index(match.group(1)) + 1, int(match.group(2)))
    except ValueError:
        return None


def is_report_tab_title(title: str) -> bool:
    return parse_tab_date(title) is not None


def sort_tab_titles(titles: Sequence[str]) -> List[str]:
    """Order date-titled tabs by date, dropping titles that are not dates."""
    dated = [(parse_tab_date(title), title) for title in titles]
    return [title for day, title in sorted((item for item in dated if item[0] is not None), key=lambda item: item[0])]


def report_tab_title(today: Optional[datetime.date] = None, suffix: str = "") -> str:
    """
    Title for today's daily report tab.

    A suffix such as the current time is appended with an underscore when a
    duplicate tab is requested.
    """
    title = format_tab_date(_today(today))
    return f"{title}_{suffix}" if suffix else title


def previous_month(today: Optional[datetime.date] = None) -> Tuple[int, int]:
    """Return ``(year, month)`` of the month before today's."""
    day = _today(today)
    if day.month == 1:
        return day.year - 1, 12
    return day.year, day.month - 1


def previous_month_window(today: Optional[datetime.date] = None) -> Tuple[datetime.date, datetime.date]:
    """Return the first and last day of the month before today's."""
    year, month = previous_month(today)
    start = datetime.date(year, month, 1)
    end = _today(today).replace(day=1) - datetime.timedelta(days=1)
    return start, end


def last_month_tab_titles(titles: Sequence[str], today: Optional[datetime.date] = None) -> List[str]:
    """
    Select the daily report tabs of the previous month, ordered by date.

    Raises:
        TypeError: If titles is not a list of strings
    """
    if not isinstance(titles, (list, tuple)):
        raise TypeError("Invalid input: Expected a list of strings.")

    year, month = previous_month(today)
    selected = []
    for title in sort_tab_titles(titles):
        day = parse_tab_date(title)
        if day.year == year and day.month == month:
            selected.append(title)

    logger.debug(f"Found {len(selected)} report tabs for {MONTHS[month - 1]} {year}")
    return selected


def week_window(week_start: str = "monday", today: Optional[datetime.date] = None) -> Tuple[datetime.date, datetime.date]:
    """
    Return the first and last day of the week containing today.

    Args:
        week_start: Day name the week starts on, case-insensitive
        today: Reference date, defaults to the current date
    """
    day_names = [name.lower() for name in DAYS]
    if not isinstance(week_start, str) or week_start.lower() not in day_names:
        raise ValueError(f"Unknown week start day '{week_start}'")

    day = _today(today)
    offset = (day.weekday() - day_names.index(week_start.lower())) % 7
    start = day - datetime.timedelta(days=offset)
    return start, start + datetime.timedelta(days=6)


def week_tab_titles(
    titles: Sequence[str], week_start: str = "monday", today: Optional[datetime.date] = None
) -> List[str]:
    """Select the daily report tabs of the current week, ordered by date."""
    start, end = week_window(week_start, today)
    return [title for title in sort_tab_titles(titles) if start <= parse_tab_date(title) <= end]


def monthly_summary_title(today: Optional[datetime.date] = None) -> str:
    """Title of the summary tab for the previous month, e.g. ``Summary Sep 2026``."""
    year, month = previous_month(today)
    return f"Summary {MONTHS[month - 1]} {year}"


def weekly_summary_title(week_start: str = "monday", today: Optional[datetime.date] = None) -> str:
    """Title of the summary tab for the current week, e.g. ``Weekly Summary Monday Oct 12-18 2026``."""
    start, end = week_window(week_start, today)
    return f"Weekly Summary {DAYS[start.weekday()]} {MONTHS[start.month - 1]} {start.day}-{end.day} {start.year}"


def is_summary_required(titles: Sequence[str], summary_title: str) -> bool:
    """A summary is required when no tab with its title exists yet."""
    return summary_title not in titles
