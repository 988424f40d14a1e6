"""Calendar granularity used to bucket dates.

A granularity is a set of :class:`DateComponent` members. Normalizing a date
keeps the selected components and resets every other one to its earliest
valid value.
"""

from collections.abc import Iterable
from datetime import date
from datetime import datetime
from enum import Enum
from typing import Final


class DateComponent(Enum):
    """A calendar field that can be kept when normalizing a date."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MICROSECOND = "microsecond"


DAY_PRECISION: Final[frozenset[DateComponent]] = frozenset(
    {DateComponent.YEAR, DateComponent.MONTH, DateComponent.DAY}
)

# Value used for every component that is not kept.
_EARLIEST: Final[dict[DateComponent, int]] = {
    DateComponent.YEAR: 1,
    DateComponent.MONTH: 1,
    DateComponent.DAY: 1,
    DateComponent.HOUR: 0,
    DateComponent.MINUTE: 0,
    DateComponent.SECOND: 0,
    DateComponent.MICROSECOND: 0,
}


def normalize_date(value: date, components: Iterable[DateComponent]) -> datetime:
    """Truncate ``value`` to the given calendar components.

    Plain :class:`~datetime.date` values are treated as midnight. The
    ``tzinfo`` of an aware datetime is carried over unchanged.

    :param date value: Date or datetime to normalize.
    :param Iterable[DateComponent] components: Components to keep.
    :return: A datetime built from the kept components.
    :rtype: datetime
    :raises ValueError: If the kept components do not form a valid date,
        e.g. February 29th without its year.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())
    kept = frozenset(components)
    fields = {
        component.value: (
            getattr(value, component.value)
            if component in kept
            else _EARLIEST[component]
        )
        for component in DateComponent
    }
    try:
        return datetime(**fields, tzinfo=value.tzinfo)
    except ValueError as e:
        names = sorted(c.value for c in kept)
        msg = f"Cannot normalize {value!r} to components {names}"
        raise ValueError(msg) from e
