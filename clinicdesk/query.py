"""Filtering, finding, updating and deleting items held in lists."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar, Union

T = TypeVar("T")

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


class ComparisonOperator(enum.Enum):
    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="


class FilterMode(enum.Enum):
    AND = "and"
    OR = "or"


_OPERATIONS = {
    ComparisonOperator.EQ: operator.eq,
    ComparisonOperator.NE: operator.ne,
    ComparisonOperator.GT: operator.gt,
    ComparisonOperator.LT: operator.lt,
    ComparisonOperator.GTE: operator.ge,
    ComparisonOperator.LTE: operator.le,
}


@dataclass(frozen=True)
class FilterCriteria:
    """A value to compare against and how to compare."""

    value: Any
    op: ComparisonOperator = ComparisonOperator.EQ


@dataclass(frozen=True)
class Filter:
    """A criteria paired with the getter that extracts the compared value."""

    criteria: FilterCriteria
    getter: Getter


def compare(value: Any, criteria: FilterCriteria) -> bool:
    """Compare ``value`` with the criteria; values of another type never match."""
    if type(value) is not type(criteria.value):
        return False
    return bool(_OPERATIONS[criteria.op](value, criteria.value))


def _evaluate(item: Any, flt: Filter) -> bool:
    value = flt.getter(item)
    if type(value) is not type(flt.criteria.value):
        raise TypeError("Type mismatch in filter")
    return compare(value, flt.criteria)


def matches(
    item: Any, filters: Iterable[Filter], mode: FilterMode = FilterMode.AND
) -> bool:
    """Whether ``item`` passes the filters; no filters means it always does."""
    filters = list(filters)
    if not filters:
        return True
    results = (_evaluate(item, flt) for flt in filters)
    return any(results) if mode is FilterMode.OR else all(results)


def _as_getter(getter: Union[Getter, str]) -> Getter:
    if isinstance(getter, str):
        name = getter
        return lambda item: getattr(item, name)
    return getter


def _as_setter(setter: Union[Setter, str]) -> Setter:
    if isinstance(setter, str):
        name = setter
        return lambda item, value: setattr(item, name, value)
    return setter


class QueryBuilder(Generic[T]):
    """Chained filters over a list that is read and changed in place.

    Getters and setters may be callables or attribute names.
    """

    def __init__(self, collection: list[T], mode: FilterMode = FilterMode.AND) -> None:
        self._collection = collection
        self._filters: list[Filter] = []
        self._mode = mode

    @property
    def filters(self) -> list[Filter]:
        return list(self._filters)

    def _matches(self, item: T) -> bool:
        return matches(item, self._filters, self._mode)

    def where(
        self,
        getter: Union[Getter, str],
        value: Any,
        op: ComparisonOperator = ComparisonOperator.EQ,
    ) -> QueryBuilder[T]:
        self._filters.append(Filter(FilterCriteria(value, op), _as_getter(getter)))
        return self

    def find(self) -> list[T]:
        return [item for item in self._collection if self._matches(item)]

    def find_one(self) -> Optional[T]:
        return next((item for item in self._collection if self._matches(item)), None)

    def delete_many(self) -> None:
        self._collection[:] = [
            item for item in self._collection if not self._matches(item)
        ]

    def delete_one(self) -> None:
        for position, item in enumerate(self._collection):
            if self._matches(item):
                del self._collection[position]
                return

    def update_many(self, setter: Union[Setter, str], value: Any) -> None:
        apply = _as_setter(setter)
        for item in self.find():
            apply(item, value)

    def update_one(self, setter: Union[Setter, str], value: Any) -> None:
        item = self.find_one()
        if item is not None:
            _as_setter(setter)(item, value)


def query(collection: list[T], mode: FilterMode = FilterMode.AND) -> QueryBuilder[T]:
    """Start a query over ``collection``."""
    return QueryBuilder(collection, mode)