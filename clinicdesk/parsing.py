"""Parsers that build entities from delimited text lines."""

from __future__ import annotations

import abc
import re
from typing import Any, Optional

from clinicdesk.date import Date
from clinicdesk.entities import Receptionist, RoomExamination, TestService
from clinicdesk.ids import id_prefix

_INT = re.compile(r"\s*[+-]?\d+")
_FLOAT = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _to_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows."""
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group())


def _to_float(text: str) -> float:
    """Read the number at the start of ``text``, ignoring what follows."""
    match = _FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group())


class Parser(abc.ABC):
    """Builds one kind of entity from a line of delimited fields."""

    def __init__(self, delim: str = "|") -> None:
        self.delim = delim

    def _fields(self, line: str, count: int, rest_in_last: bool = False) -> list[str]:
        if rest_in_last:
            parts = line.split(self.delim, count - 1)
        else:
            parts = line.split(self.delim)[:count]
        if len(parts) < count:
            raise ValueError(f"expected {count} fields in {line!r}")
        return parts

    @abc.abstractmethod
    def parse(self, line: str) -> Any:
        ...


class ReceptionistParser(Parser):
    def __init__(self, delim: str = "|") -> None:
        super().__init__(delim)

    def parse(self, line: str) -> Receptionist:
        (ident, name, gender, address, phone, dob, education,
         base_salary, subsidies, working_days) = self._fields(line, 10, rest_in_last=True)
        return Receptionist(
            id=ident,
            name=name,
            gender=gender,
            address=address,
            phone=phone,
            dob=Date.parse(dob),
            education=education,
            base_salary=_to_float(base_salary),
            subsidies=_to_float(subsidies),
            working_days=_to_int(working_days),
        )


class RoomExaminationParser(Parser):
    def __init__(self, delim: str = "|") -> None:
        super().__init__(delim)

    def parse(self, line: str) -> RoomExamination:
        ident, name, department_id, waiting, fee = self._fields(line, 5)
        return RoomExamination(
            id=ident,
            name=name,
            department_id=department_id,
            waiting_count=_to_int(waiting),
            examination_fee=_to_float(fee),
        )


class TestServiceParser(Parser):
    __test__ = False

    def __init__(self, delim: str = "|") -> None:
        super().__init__(delim)

    def parse(self, line: str) -> TestService:
        ident, name, cost = self._fields(line, 3)
        return TestService(id=ident, name=name, cost=_to_float(cost))


class ParserFactory:
    """Picks the parser for a line by the identifier prefix it starts with."""

    def __init__(self, delim: str = "|") -> None:
        self._prototypes: dict[str, Parser] = {
            id_prefix(Receptionist): ReceptionistParser(delim),
            id_prefix(TestService): TestServiceParser(delim),
            id_prefix(RoomExamination): RoomExaminationParser(delim),
        }

    def get_parser(self, prefix: str) -> Optional[Parser]:
        return self._prototypes.get(prefix)