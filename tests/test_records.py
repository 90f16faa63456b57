import dataclasses

import pytest

from classplanner.records import (
    Class,
    ClassFaculty,
    ClassScheduleRoom,
    Faculty,
    Feature,
    Preference,
    Report,
    Room,
    RoomFeature,
    Schedule,
    User,
)

password = "password"


def _class():
    return Class(
        id=1,
        name="Calculus",
        description="Limits",
        capacity=30,
        code="MATH101",
        class_type="lecture",
        section="A",
        term="fall",
    )


def test_class_fields_kept():
    record = _class()
    assert record.code == "MATH101"
    assert record.capacity == 30
    assert record.class_type == "lecture"


def test_asdict_round_trip():
    record = _class()
    assert Class(**dataclasses.asdict(record)) == record


def test_positional_order_matches_table():
    record = Schedule(3, 9, 0, 10, 15, "MWF")
    assert record.id == 3
    assert record.start_hour == 9
    assert record.start_minute == 0
    assert record.end_hour == 10
    assert record.end_minute == 15
    assert record.days == "MWF"


@pytest.mark.parametrize(
    "record",
    [
        User(id=1, username="amy", password=password, role="admin"),
        Faculty(id=2, name="Ada", email="ada@example.com", department="Math"),
        Schedule(id=3, start_hour=9, start_minute=0, end_hour=10, end_minute=15, days="MWF"),
        Room(id=4, room_number="B12", capacity=40, room_type="lab"),
        Feature(id=5, name="Projector", description="Ceiling mounted"),
        RoomFeature(id=6, room_id=4, feature_id=5),
        Preference(id=7, faculty_id=2, preference_type="time", value="morning"),
        ClassScheduleRoom(id=8, class_id=1, schedule_id=3, room_id=4),
        ClassFaculty(id=9, class_id=1, faculty_id=2),
        Report(id=10, report_type="conflict", description="Overlap"),
    ],
)
def test_round_trip_for_every_record(record):
    assert type(record)(**dataclasses.asdict(record)) == record


def test_replace_leaves_original_unchanged():
    record = _class()
    changed = dataclasses.replace(record, capacity=10)
    assert changed.capacity == 10
    assert record.capacity == 30


def test_equal_records_collapse_in_a_set():
    changed = dataclasses.replace(_class(), section="B")
    records = {_class(), _class(), changed}
    assert len(records) == 2
    assert _class() in records
    assert changed in records


def test_records_differing_in_one_field_are_unequal():
    assert _class() == _class()
    assert (dataclasses.replace(_class(), term="spring") == _class()) is False


@pytest.mark.parametrize("capacity", ["30", None, True, 3.5])
def test_wrong_integer_type_rejected(capacity):
    with pytest.raises(TypeError):
        Room(id=1, room_number="B12", capacity=capacity, room_type="lab")


def test_wrong_string_type_rejected():
    with pytest.raises(TypeError):
        Feature(id=1, name=None, description="x")


def test_missing_field_rejected():
    with pytest.raises(TypeError):
        ClassFaculty(id=1, class_id=2)