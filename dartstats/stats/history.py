"""
Month grouping of saved games for the history view.
"""
from datetime import datetime, timezone, tzinfo
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

from dartstats.core import GameRecord, MonthGroup

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "en": ("January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"),
    "ru": ("Январь", "Февраль", "Март", "Апрель", "Май", "Июнь", "Июль",
           "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь"),
}


def resolve_timezone(name: Optional[str]) -> tzinfo:
    """Timezone from a config name ("UTC" or an IANA zone)."""
    if not name or name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def month_key(timestamp: float, tz: tzinfo = timezone.utc) -> Tuple[int, int]:
    """(year, zero-based month) of a unix timestamp."""
    moment = datetime.fromtimestamp(timestamp, tz=tz)
    return moment.year, moment.month - 1


def group_by_month(
        games: Iterable[GameRecord],
        month_names: Optional[Sequence[str]] = None,
        tz: tzinfo = timezone.utc
) -> List[MonthGroup]:
    """
    Partition games by calendar month, newest month first.

    Games without timestamp cannot be dated and are left out. Within a
    month the input order is kept.

    Args:
        games: Saved games, usually newest first
        month_names: Twelve month labels (default: English)
        tz: Timezone the calendar month is taken in

    Returns:
        List of MonthGroup sorted by month, descending
    """
    names = month_names or MONTH_NAMES["en"]
    if len(names) != 12:
        raise ValueError(f"Expected 12 month names, got {len(names)}")

    buckets: Dict[Tuple[int, int], List[GameRecord]] = {}
    for game in games:
        if game.timestamp is None:
            continue
        buckets.setdefault(month_key(game.timestamp, tz), []).append(game)

    groups = []
    for (year, month) in sorted(buckets, reverse=True):
        groups.append(MonthGroup(
            label=f"{names[month]} {year}",
            sort_key=f"{year}-{month:02d}",
            games=buckets[(year, month)],
        ))
    return groups


def most_recent_month_key(groups: Sequence[MonthGroup]) -> Optional[str]:
    """Sort key of the newest month (the one a history view opens first)."""
    return groups[0].sort_key if groups else None
