# backend/services/aggregator.py

"""
Pure aggregation helpers over a snapshot of songs.

Every function takes the records it works on as an explicit argument and
keeps no state between calls. Records may be `Song` models or plain dicts
keyed by Title/Artist/Album/Genre.

Frequency tables are plain dicts, so their key order is the order in which
each value was first seen. `top_n` relies on that order to break ties.
"""

from typing import Any, Dict, Iterable, List, Tuple

from models.song_models import SONG_FIELDS

EMPTY_MARKER = "-"
OTHER_LABEL = "Other"


def check_field(field: str) -> str:
    if field not in SONG_FIELDS:
        raise ValueError(
            f"Unknown field '{field}'. Expected one of: {', '.join(SONG_FIELDS)}"
        )
    return field


def field_value(record: Any, field: str) -> str:
    if isinstance(record, dict):
        return record[field]
    return getattr(record, field)


def frequency_by_field(records: Iterable[Any], field: str) -> Dict[str, int]:
    """
    Count how many records hold each distinct value of `field`.
    The counts always add up to the number of records.
    """
    check_field(field)
    table: Dict[str, int] = {}
    for record in records:
        value = field_value(record, field)
        table[value] = table.get(value, 0) + 1
    return table


def unique_count(records: Iterable[Any], field: str) -> int:
    return len(frequency_by_field(records, field))


def top_n(table: Dict[str, int], n: int) -> List[Tuple[str, int]]:
    """
    Entries of a frequency table by descending count, at most `n` of them.
    `sorted` is stable, so equal counts keep the table's insertion order.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0 or not table:
        return []
    ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)
    return ranked[:n]


def most_common(table: Dict[str, int]) -> str:
    ranked = top_n(table, 1)
    if not ranked:
        return EMPTY_MARKER
    return ranked[0][0]


def share_breakdown(
    table: Dict[str, int], total: int, n: int
) -> List[Tuple[str, int, float]]:
    """
    Top-N entries with their share of `total`, plus an "Other" bucket
    holding whatever the shown entries do not cover.

    A zero total has no meaningful breakdown and yields an empty list.
    """
    if total <= 0:
        return []

    shown = top_n(table, n)
    breakdown = [(value, count, count / total) for value, count in shown]

    remainder = total - sum(count for _, count in shown)
    if remainder > 0:
        breakdown.append((OTHER_LABEL, remainder, remainder / total))

    return breakdown


def group_cardinality(
    records: Iterable[Any], group_field: str, member_field: str
) -> Dict[str, int]:
    """
    For each distinct `group_field` value, count the distinct
    `member_field` values seen alongside it (e.g. albums per artist).
    """
    check_field(group_field)
    check_field(member_field)

    members: Dict[str, set] = {}
    for record in records:
        group = field_value(record, group_field)
        members.setdefault(group, set()).add(field_value(record, member_field))

    return {group: len(values) for group, values in members.items()}
