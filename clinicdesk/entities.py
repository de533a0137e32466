"""Records for test services, examination rooms and receptionists."""

from __future__ import annotations

from dataclasses import dataclass, field

from clinicdesk.date import Date


@dataclass
class TestService:
    """A paraclinical test that can be ordered, with its cost."""

    __test__ = False

    id: str = ""
    name: str = ""
    cost: float = 0.0


@dataclass
class RoomExamination:
    """An examination room in a department, with its waiting queue size and fee."""

    id: str = ""
    name: str = ""
    department_id: str = ""
    waiting_count: int = 0
    examination_fee: float = 0.0

    def add_to_waiting_list(self) -> None:
        self.waiting_count += 1

    def remove_from_waiting_list(self) -> None:
        self.waiting_count -= 1


@dataclass
class Receptionist:
    """A receptionist employee, paid a base salary plus subsidies."""

    id: str = ""
    name: str = ""
    gender: str = ""
    address: str = ""
    phone: str = ""
    dob: Date = field(default_factory=Date)
    education: str = ""
    base_salary: float = 0.0
    subsidies: float = 0.0
    working_days: int = 0