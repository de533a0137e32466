"""Rendering entities as delimited text lines."""

from __future__ import annotations

from typing import Any, Callable

from clinicdesk.entities import Receptionist, RoomExamination, TestService


def _money(value: float) -> str:
    return "%.2f" % value


class TextWriter:
    """Writes entities as lines of fields joined by a delimiter."""

    def __init__(self, delim: str = "|") -> None:
        self.delim = delim
        self._renderers: list[tuple[type, Callable[[Any], list[str]]]] = [
            (Receptionist, self._receptionist),
            (TestService, self._test_service),
            (RoomExamination, self._room),
        ]

    def write(self, entity: Any) -> str:
        """The text line for ``entity``, without a line ending."""
        for kind, render in self._renderers:
            if isinstance(entity, kind):
                return self.delim.join(render(entity))
        raise TypeError(f"cannot write {type(entity).__name__}")

    @staticmethod
    def _receptionist(item: Receptionist) -> list[str]:
        return [
            item.id,
            item.name,
            item.gender,
            item.address,
            item.phone,
            str(item.dob),
            item.education,
            _money(item.base_salary),
            _money(item.subsidies),
            str(item.working_days),
        ]

    @staticmethod
    def _test_service(item: TestService) -> list[str]:
        return [item.id, item.name, _money(item.cost)]

    @staticmethod
    def _room(item: RoomExamination) -> list[str]:
        return [
            item.id,
            item.name,
            item.department_id,
            str(item.waiting_count),
            _money(item.examination_fee),
        ]