"""
Filter Operations for Reportes de Salidas.

Date window selection of material exits.
Pure functions - no I/O, no side effects.
"""

import logging
from datetime import date, timedelta
from typing import List, Optional

from config.constants import DEFAULT_WINDOW_DAYS
from domain.models import DateWindow, FilterResult, MaterialExitRecord
from domain.rules import is_within_window, parse_exit_date

logger = logging.getLogger(__name__)


def filter_exits_by_date(
    records: List[MaterialExitRecord],
    window: DateWindow,
) -> FilterResult:
    """
    Select exits whose exit date falls inside the window.

    Both bounds are inclusive; a missing bound leaves that side open.
    Input order is preserved. Records whose exit date cannot be parsed
    are left out and their ids reported in FilterResult.malformed_ids.

    Args:
        records: Exits to filter
        window: Date window (may be unbounded or inverted)

    Returns:
        FilterResult with selected records and malformed ids

    Example:
        >>> result = filter_exits_by_date(exits, DateWindow("2024-01-01", "2024-01-31"))
        >>> print(f"{result.count} salidas")
    """
    start = window.start
    end = window.end

    if window.is_inverted:
        logger.info(f"Date window {window.date_from} > {window.date_to}: nothing selected")

    result = FilterResult()
    for record in records:
        exit_date = parse_exit_date(record.exit_date)
        if exit_date is None:
            result.malformed_ids.append(record.id)
            logger.debug(f"Exit {record.id}: unparseable exit date {record.exit_date!r}")
            continue

        if is_within_window(exit_date, start, end):
            result.records.append(record)

    if result.malformed_ids:
        logger.warning(
            f"Excluded {result.malformed_count} exits with invalid exit date: "
            f"{result.malformed_ids}"
        )

    logger.info(
        f"Filtered {len(records)} exits to {result.count} "
        f"(window {window.date_from or '*'} .. {window.date_to or '*'})"
    )
    return result


def default_date_window(
    today: Optional[date] = None,
    days: int = DEFAULT_WINDOW_DAYS,
) -> DateWindow:
    """
    Window offered when the report is opened: the last `days` days.

    Args:
        today: Reference date (defaults to date.today())
        days: Window length in days

    Returns:
        DateWindow from today - days to today
    """
    today = today or date.today()
    return DateWindow(
        date_from=(today - timedelta(days=days)).isoformat(),
        date_to=today.isoformat(),
    )
