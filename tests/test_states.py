import pytest

from clinicdesk import states


def test_waiting_state_permits_nothing():
    state = states.WaitingState()
    assert state.state_name() is states.StateName.WAITING
    assert state.can_prescribe_medicine() is False
    assert state.can_order_clinical_test() is False
    assert state.can_complete() is False


def test_test_pending_state_permissions():
    state = states.TestPendingState()
    assert state.state_name() is states.StateName.TEST_PENDING
    assert state.can_prescribe_medicine() is True
    assert state.can_order_clinical_test() is True
    assert state.can_complete() is False


def test_state_name_order_matches_lifecycle():
    assert int(states.WaitingState().state_name()) == 0
    assert int(states.TestPendingState().state_name()) == 2
    assert states.WaitingState().state_name().name == "WAITING"
    assert states.TestPendingState().state_name().name == "TEST_PENDING"


def test_states_compare_by_name():
    assert states.WaitingState() == states.WaitingState()
    assert not states.WaitingState() == states.TestPendingState()
    assert len({states.WaitingState(), states.WaitingState()}) == 1


def test_base_state_is_abstract():
    with pytest.raises(TypeError):
        states.ExaminationState()