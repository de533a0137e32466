"""Collections of entities kept in text files and saved on every change."""

from __future__ import annotations

import copy
import os
from typing import Any, ClassVar, Generic, Iterable, Optional, TypeVar, Union

from clinicdesk.entities import RoomExamination, TestService
from clinicdesk.query import FilterMode, query
from clinicdesk.storage import load_entities, save_entities

T = TypeVar("T")

PathLike = Union[str, "os.PathLike[str]"]


class NotFoundError(LookupError):
    """No stored entity has the identifier that was asked for."""


class TextRepository(Generic[T]):
    """Entities loaded from a delimited text file and written back after each change."""

    default_path: ClassVar[str] = ""
    entity_name: ClassVar[str] = "Entity"
    missing_is_error: ClassVar[bool] = True

    def __init__(self, file_path: Optional[PathLike] = None, delim: str = "|") -> None:
        if file_path is None:
            if not self.default_path:
                raise ValueError("a file path is required")
            file_path = self.default_path
        self.file_path = os.fspath(file_path)
        self.delim = delim
        self._items: list[T] = []
        self.load()

    def load(self) -> None:
        """Replace the held entities with those in the file."""
        self._items.clear()
        self._items.extend(load_entities(self.file_path, self.delim))

    def save(self) -> None:
        save_entities(self._items, self.file_path, self.delim)

    def add(self, entity: T) -> None:
        self._items.append(entity)
        self.save()

    def remove_by_id(self, entity_id: str) -> None:
        """Remove the first entity with ``entity_id``, if any."""
        query(self._items).where("id", entity_id).delete_one()
        self.save()

    def remove_by_ids(self, ids: Iterable[str]) -> None:
        """Remove every entity whose identifier is among ``ids``."""
        ids = list(ids)
        if ids:
            builder = query(self._items, FilterMode.OR)
            for entity_id in ids:
                builder.where("id", entity_id)
            builder.delete_many()
        self.save()

    def _check_replacement(self, current: Any, entity: Any) -> None:
        """Hook for refusing to replace ``current`` with ``entity``."""

    def update(self, entity: T) -> None:
        """Replace the stored entity that has the same identifier."""
        for position, current in enumerate(self._items):
            if current.id == entity.id:
                self._check_replacement(current, entity)
                self._items[position] = copy.deepcopy(entity)
                break
        else:
            if self.missing_is_error:
                raise NotFoundError(f"{self.entity_name} not found")
        self.save()

    def data(self) -> list[T]:
        """The held entities, in file order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class EmployeeRepository(TextRepository[Any]):
    """Employees of every kind; updating an unknown employee changes nothing."""

    default_path = "employees.txt"
    entity_name = "Employee"
    missing_is_error = False

    def _check_replacement(self, current: Any, entity: Any) -> None:
        if type(current) is not type(entity):
            raise TypeError(
                f"cannot replace {type(current).__name__} with {type(entity).__name__}"
            )


class RoomExaminationRepository(TextRepository[RoomExamination]):
    default_path = "rooms.txt"
    entity_name = "RoomExamination"


class TestServiceRepository(TextRepository[TestService]):
    __test__ = False

    default_path = "tests.txt"
    entity_name = "TestService"