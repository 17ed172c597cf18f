"""Planned workouts: steps, repeats, and the durations and targets that
describe each step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Union

from tcxread.model.enums import Intensity, SpeedType, Sport
from tcxread.model.source import Source
from tcxread.validate import Length, Range, constrained


# Durations

@dataclass(frozen=True)
class TimeDuration:
    seconds: int = 0


@dataclass(frozen=True)
class DistanceDuration:
    meters: int = 0


@dataclass(frozen=True)
class HeartRateAboveDuration:
    heart_rate: int = 0


@dataclass(frozen=True)
class HeartRateBelowDuration:
    heart_rate: int = 0


@dataclass(frozen=True)
class CaloriesBurnedDuration:
    calories: int = 0


@dataclass(frozen=True)
class UserInitiatedDuration:
    pass


Duration = Union[TimeDuration, DistanceDuration, HeartRateAboveDuration, HeartRateBelowDuration,
                 CaloriesBurnedDuration, UserInitiatedDuration]


# Zones

@dataclass(frozen=True)
class PredefinedSpeedZone:
    number: int = constrained(Range(min=1, max=10), default=0)


@dataclass(frozen=True)
class CustomSpeedZone:
    view_as: SpeedType = SpeedType.PACE
    low_in_meters_per_second: float = 0.0
    high_in_meters_per_second: float = 0.0


@dataclass(frozen=True)
class PredefinedHeartRateZone:
    number: int = constrained(Range(min=1, max=5), default=0)


@dataclass(frozen=True)
class CustomHeartRateZone:
    low: int = 0
    high: int = 0


SpeedZone = Union[PredefinedSpeedZone, CustomSpeedZone]
HeartRateZone = Union[PredefinedHeartRateZone, CustomHeartRateZone]


# Targets

@dataclass(frozen=True)
class SpeedTarget:
    zone: Optional[SpeedZone] = None


@dataclass(frozen=True)
class HeartRateTarget:
    zone: Optional[HeartRateZone] = None


@dataclass(frozen=True)
class CadenceTarget:
    low: float = 0.0
    high: float = 0.0


@dataclass(frozen=True)
class NoTarget:
    pass


Target = Union[SpeedTarget, HeartRateTarget, CadenceTarget, NoTarget]


# Steps

@dataclass(frozen=True)
class Step:
    step_id: int = constrained(Range(min=1, max=20), default=0)
    name: Optional[str] = constrained(Length(min=1, max=15), default=None)
    duration: Optional[Duration] = None
    intensity: Intensity = Intensity.ACTIVE
    target: Optional[Target] = None


@dataclass(frozen=True)
class Repeat:
    step_id: int = constrained(Range(min=1, max=20), default=0)
    repetitions: int = constrained(Range(min=2, max=99), default=0)
    children: List[Union[Step, Repeat]] = field(default_factory=list)


AbstractStep = Union[Step, Repeat]


@dataclass(frozen=True)
class Workout:
    sport: Sport = Sport.RUNNING
    name: str = constrained(Length(min=1, max=15), default='')
    steps: List[AbstractStep] = field(default_factory=list)
    scheduled_on: List[date] = field(default_factory=list)
    notes: Optional[str] = None
    creator: Optional[Source] = None


@dataclass(frozen=True)
class WorkoutList:
    workouts: List[Workout] = field(default_factory=list)
