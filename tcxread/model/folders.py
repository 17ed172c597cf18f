"""Folders, used by applications to organise activities, workouts and
courses. Folders refer to other entities by their ids; they do not
contain them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from tcxread.model.activity import EPOCH_DATE


@dataclass(frozen=True)
class Week:
    """The week is written out only if the notes are present."""
    start_day: date = EPOCH_DATE
    notes: Optional[str] = None


@dataclass(frozen=True)
class HistoryFolder:
    name: str = ''
    folders: List[HistoryFolder] = field(default_factory=list)
    activity_refs: List[datetime] = field(default_factory=list)
    weeks: List[Week] = field(default_factory=list)
    notes: Optional[str] = None


@dataclass(frozen=True)
class MultiSportFolder:
    name: str = ''
    folders: List[MultiSportFolder] = field(default_factory=list)
    multisport_activity_refs: List[datetime] = field(default_factory=list)
    weeks: List[Week] = field(default_factory=list)
    notes: Optional[str] = None


@dataclass(frozen=True)
class History:
    running: Optional[HistoryFolder] = None
    biking: Optional[HistoryFolder] = None
    other: Optional[HistoryFolder] = None
    multi_sport: Optional[MultiSportFolder] = None


@dataclass(frozen=True)
class WorkoutFolder:
    name: str = ''
    folders: List[WorkoutFolder] = field(default_factory=list)
    workout_name_refs: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class WorkoutFolders:
    running: Optional[WorkoutFolder] = None
    biking: Optional[WorkoutFolder] = None
    other: Optional[WorkoutFolder] = None


@dataclass(frozen=True)
class CourseFolder:
    name: str = ''
    folders: List[CourseFolder] = field(default_factory=list)
    course_name_refs: List[str] = field(default_factory=list)
    notes: Optional[str] = None


@dataclass(frozen=True)
class CourseFolders:
    course_folder: Optional[CourseFolder] = None


@dataclass(frozen=True)
class Folders:
    history: Optional[History] = None
    workouts: Optional[WorkoutFolders] = None
    courses: Optional[CourseFolders] = None
