import pytest

from clinicdesk import entities, parsing
from clinicdesk.date import Date
from clinicdesk.writing import TextWriter


def test_test_service_line():
    line = TextWriter().write(entities.TestService("CLS-001", "Blood", 150000))
    assert line == "CLS-001|Blood|150000.00"


def test_room_line():
    room = entities.RoomExamination("PHG-001", "Room", "DEPT-001", 3, 50)
    assert TextWriter().write(room) == "PHG-001|Room|DEPT-001|3|50.00"


def test_receptionist_round_trip():
    person = entities.Receptionist(
        "TT-001", "Lan", "Nu", "Ha Noi", "0000", Date(5, 6, 1995),
        "Dai hoc", 1000.5, 200.25, 22,
    )
    line = TextWriter().write(person)
    assert parsing.ReceptionistParser().parse(line) == person


def test_room_round_trip_custom_delim():
    room = entities.RoomExamination("PHG-007", "Room 7", "DEPT-002", 5, 12.75)
    line = TextWriter(";").write(room)
    assert parsing.RoomExaminationParser(";").parse(line) == room


def test_date_written_zero_padded():
    person = entities.Receptionist(id="TT-002", dob=Date(3, 4, 2001))
    fields = TextWriter().write(person).split("|")
    assert fields[5] == str(Date(3, 4, 2001))
    assert Date.parse(fields[5]) == Date(3, 4, 2001)


def test_unsupported_entity_raises():
    with pytest.raises(TypeError):
        TextWriter().write(object())