"""Catalog filtering for the artist listing page.

Each dimension (category, location, fee range) is an independent set of
checkbox selections. Within a dimension any selected value matches; across
dimensions every non-empty selection must match. An empty selection does
not constrain its dimension.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, TypeVar

from ..utils.fields import read_field

T = TypeVar("T")


def _values(source: Any, key: str) -> set[str]:
    raw = read_field(source, key)
    if raw is None:
        return set()
    if isinstance(raw, str):
        return {raw}
    return set(raw)


def _matches(source: Any, key: str, selected: frozenset[str]) -> bool:
    if not selected:
        return True
    return not _values(source, key).isdisjoint(selected)


def filter_artists(
    artists: Iterable[T],
    categories: Iterable[str] = (),
    locations: Iterable[str] = (),
    fee_ranges: Iterable[str] = (),
) -> list[T]:
    """Return the artists passing every active selection, in input order."""
    selected = (
        ("category", frozenset(categories)),
        ("location", frozenset(locations)),
        ("fee_range", frozenset(fee_ranges)),
    )
    return [
        artist
        for artist in artists
        if all(_matches(artist, key, values) for key, values in selected)
    ]


def toggle_selection(selection: Sequence[str], value: str) -> list[str]:
    """Flip ``value`` in a checkbox selection, keeping the others in order."""
    if value in selection:
        return [item for item in selection if item != value]
    return [*selection, value]


def has_active_filters(*selections: Iterable[str]) -> bool:
    return any(tuple(selection) for selection in selections)
