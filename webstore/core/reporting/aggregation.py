"""Generic grouping and aggregation helpers shared by all reports.

Reports are expressed as compositions of these helpers over plain record
sequences. Grouping always uses a hashable key (an entity id), never the
entity object itself, and every helper preserves the input order so results
are deterministic.
"""

from collections.abc import Callable, Hashable, Iterable, Mapping
from decimal import Decimal
from typing import Any, TypeVar

from webstore.core.reporting.exceptions import ReferentialIntegrityException

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
A = TypeVar("A")

ZERO = Decimal("0")


def index_by(records: Iterable[T], key: Callable[[T], K]) -> dict[K, T]:
    """Map each key to its record. The first record wins on duplicate keys."""
    index: dict[K, T] = {}
    for record in records:
        index.setdefault(key(record), record)
    return index


def group_by(records: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group records by key, groups ordered by first appearance.

    Only keys that occur in ``records`` get a group, so there are no empty
    groups.
    """
    groups: dict[K, list[T]] = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return groups


def aggregate(
    records: Iterable[T],
    key: Callable[[T], K],
    accumulate: Callable[[A, T], A],
    initial: Callable[[], A],
) -> dict[K, A]:
    """Fold records into one accumulator per key.

    Args:
        records: Records to aggregate
        key: Key extractor
        accumulate: Function combining the running value with the next record
        initial: Factory for a group's starting value

    Returns:
        Dictionary of key to accumulated value, ordered by first appearance
    """
    totals: dict[K, A] = {}
    for record in records:
        group_key = key(record)
        current = totals[group_key] if group_key in totals else initial()
        totals[group_key] = accumulate(current, record)
    return totals


def sum_by(
    records: Iterable[T], key: Callable[[T], K], value: Callable[[T], Any]
) -> dict[K, Any]:
    """Sum ``value`` per key."""
    return aggregate(records, key, lambda total, r: total + value(r), lambda: 0)


def count_by(records: Iterable[T], key: Callable[[T], K]) -> dict[K, int]:
    """Count records per key."""
    return aggregate(records, key, lambda count, _: count + 1, lambda: 0)


def rank(
    records: Iterable[T], score: Callable[[T], Any], limit: int | None = None
) -> list[T]:
    """Sort descending by score, keeping input order for ties.

    Args:
        records: Records to rank
        score: Sort key
        limit: Keep only the first ``limit`` records (None keeps all)
    """
    ranked = sorted(records, key=score, reverse=True)
    return ranked if limit is None else ranked[:limit]


def distinct(values: Iterable[T]) -> list[T]:
    """Drop repeated values, keeping first occurrences in order."""
    return list(dict.fromkeys(values))


def resolve(
    index: Mapping[K, T], key: K, entity: str, referenced_by: str | None = None
) -> T:
    """Look up a referenced entity, failing loudly when it does not exist.

    Raises:
        ReferentialIntegrityException: If ``key`` is not in ``index``
    """
    try:
        return index[key]
    except KeyError:
        raise ReferentialIntegrityException(entity, key, referenced_by) from None


def _money(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps float inputs at their written value (10.1, not 10.0999...)
    return Decimal(str(value))


def line_total(item: Any) -> Decimal:
    """Compute ``unit_price * quantity - discount`` for an order line.

    Negative results are returned as-is.
    """
    return _money(item.unit_price) * item.quantity - _money(item.discount)


def sum_line_totals(items: Iterable[Any]) -> Decimal:
    return sum((line_total(item) for item in items), ZERO)
