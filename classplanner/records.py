"""Rows of the scheduling tables, as stored."""

from dataclasses import dataclass, fields


class _Record:
    """Checks that every field holds a value of its declared type."""

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            expected = field.type
            if isinstance(value, bool) or not isinstance(value, expected):
                raise TypeError(
                    f"{type(self).__name__}.{field.name} must be "
                    f"{expected.__name__}, not {type(value).__name__}"
                )


@dataclass(frozen=True)
class User(_Record):
    id: int
    username: str
    password: str
    role: str


@dataclass(frozen=True)
class Faculty(_Record):
    id: int
    name: str
    email: str
    department: str


@dataclass(frozen=True)
class Class(_Record):
    id: int
    name: str
    description: str
    capacity: int
    code: str
    class_type: str
    section: str
    term: str


@dataclass(frozen=True)
class Schedule(_Record):
    id: int
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int
    days: str


@dataclass(frozen=True)
class Room(_Record):
    id: int
    room_number: str
    capacity: int
    room_type: str


@dataclass(frozen=True)
class Feature(_Record):
    id: int
    name: str
    description: str


@dataclass(frozen=True)
class RoomFeature(_Record):
    id: int
    room_id: int
    feature_id: int


@dataclass(frozen=True)
class Preference(_Record):
    id: int
    faculty_id: int
    preference_type: str
    value: str


@dataclass(frozen=True)
class ClassScheduleRoom(_Record):
    id: int
    class_id: int
    schedule_id: int
    room_id: int


@dataclass(frozen=True)
class ClassFaculty(_Record):
    id: int
    class_id: int
    faculty_id: int


@dataclass(frozen=True)
class Report(_Record):
    id: int
    report_type: str
    description: str