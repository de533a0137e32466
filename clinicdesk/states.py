"""States an examination passes through and what each state permits."""

from __future__ import annotations

import abc
import enum


class StateName(enum.IntEnum):
    WAITING = 0
    EXAMINING = 1
    TEST_PENDING = 2
    COMPLETED = 3
    PAID = 4


class ExaminationState(abc.ABC):
    """What may be done with a medical record in a given state."""

    @abc.abstractmethod
    def state_name(self) -> StateName:
        ...

    @abc.abstractmethod
    def can_prescribe_medicine(self) -> bool:
        ...

    @abc.abstractmethod
    def can_order_clinical_test(self) -> bool:
        ...

    @abc.abstractmethod
    def can_complete(self) -> bool:
        ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExaminationState):
            return NotImplemented
        return self.state_name() == other.state_name()

    def __hash__(self) -> int:
        return hash(self.state_name())

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class WaitingState(ExaminationState):
    """The patient is queued; nothing may be prescribed or ordered yet."""

    def state_name(self) -> StateName:
        return StateName.WAITING

    def can_prescribe_medicine(self) -> bool:
        return False

    def can_order_clinical_test(self) -> bool:
        return False

    def can_complete(self) -> bool:
        return False


class TestPendingState(ExaminationState):
    """Clinical tests are outstanding; the examination cannot complete yet."""

    __test__ = False

    def state_name(self) -> StateName:
        return StateName.TEST_PENDING

    def can_prescribe_medicine(self) -> bool:
        return True

    def can_order_clinical_test(self) -> bool:
        return True

    def can_complete(self) -> bool:
        return False