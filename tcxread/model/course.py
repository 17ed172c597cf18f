"""Courses: routes to follow, with their laps and points of interest."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from tcxread.model.activity import EPOCH, Position, TrackPoint
from tcxread.model.enums import CoursePointType, Intensity
from tcxread.model.source import Source
from tcxread.validate import Length, Range, constrained


@dataclass(frozen=True)
class CourseLap:
    total_time_seconds: float = 0.0
    distance_meters: float = 0.0
    begin_position: Optional[Position] = None
    begin_altitude_meters: Optional[float] = None
    end_position: Optional[Position] = None
    end_altitude_meters: Optional[float] = None
    average_heart_rate_bpm: Optional[int] = constrained(Range(min=1), default=None)
    maximum_heart_rate_bpm: Optional[int] = constrained(Range(min=1), default=None)
    intensity: Intensity = Intensity.ACTIVE
    cadence: Optional[int] = constrained(Range(max=254), default=None)


@dataclass(frozen=True)
class CoursePoint:
    name: str = constrained(Length(min=1, max=10), default='')
    time: datetime = EPOCH
    position: Position = field(default_factory=Position)
    altitude_meters: Optional[float] = None
    point_type: CoursePointType = CoursePointType.GENERIC
    notes: Optional[str] = None


@dataclass(frozen=True)
class Course:
    name: str = constrained(Length(min=1, max=15), default='')
    laps: List[CourseLap] = field(default_factory=list)
    track_points: List[TrackPoint] = field(default_factory=list)
    notes: Optional[str] = None
    course_points: List[CoursePoint] = field(default_factory=list)
    creator: Optional[Source] = None


@dataclass(frozen=True)
class CourseList:
    courses: List[Course] = field(default_factory=list)
