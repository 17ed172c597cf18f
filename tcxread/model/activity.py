"""Activities recorded by a device: laps, track points and the training
information attached to them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Optional

from tcxread.model.enums import CadenceSensorType, Intensity, SensorState, Sport, TrainingType, TriggerMethod
from tcxread.model.source import Source
from tcxread.validate import Length, Range, constrained

# Mandatory timestamps that never appear in the document keep this value.
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
EPOCH_DATE = date(1970, 1, 1)


@dataclass(frozen=True)
class Position:
    latitude_degrees: float = constrained(Range(min=-90.0, max=90.0), default=0.0)
    longitude_degrees: float = constrained(Range(min=-180.0, max=180.0), default=0.0)


@dataclass(frozen=True)
class ActivityTrackPointExtension:
    speed: Optional[float] = None
    run_cadence: Optional[int] = constrained(Range(max=254), default=None)
    watts: Optional[int] = None
    cadence_sensor: Optional[CadenceSensorType] = None


@dataclass(frozen=True)
class ActivityLapExtension:
    avg_speed: Optional[float] = None
    max_bike_cadence: Optional[int] = constrained(Range(max=254), default=None)
    avg_run_cadence: Optional[int] = constrained(Range(max=254), default=None)
    max_run_cadence: Optional[int] = constrained(Range(max=254), default=None)
    steps: Optional[int] = None
    avg_watts: Optional[int] = None
    max_watts: Optional[int] = None


@dataclass(frozen=True)
class TrackPoint:
    time: datetime = EPOCH
    position: Optional[Position] = None
    altitude_meters: Optional[float] = None
    distance_meters: Optional[float] = None
    heart_rate_bpm: Optional[int] = constrained(Range(min=1), default=None)
    cadence: Optional[int] = constrained(Range(max=254), default=None)
    sensor_state: Optional[SensorState] = None
    extension: Optional[ActivityTrackPointExtension] = None


@dataclass(frozen=True)
class ActivityLap:
    start_time: datetime = EPOCH
    total_time_seconds: float = 0.0
    distance_meters: float = 0.0
    maximum_speed: Optional[float] = None
    calories: int = 0
    average_heart_rate_bpm: Optional[int] = constrained(Range(min=1), default=None)
    maximum_heart_rate_bpm: Optional[int] = constrained(Range(min=1), default=None)
    intensity: Intensity = Intensity.ACTIVE
    cadence: Optional[int] = constrained(Range(max=254), default=None)
    trigger_method: TriggerMethod = TriggerMethod.MANUAL
    track_points: List[TrackPoint] = field(default_factory=list)
    notes: Optional[str] = None
    extension: Optional[ActivityLapExtension] = None


@dataclass(frozen=True)
class QuickWorkout:
    total_time_seconds: float = 0.0
    distance_meters: float = 0.0


@dataclass(frozen=True)
class Plan:
    # Non-empty string of up to 15 characters.
    name: Optional[str] = constrained(Length(min=1, max=15), default=None)
    training_type: TrainingType = TrainingType.WORKOUT
    interval_workout: bool = False


@dataclass(frozen=True)
class Training:
    virtual_partner: bool = False
    quick_workout_results: Optional[QuickWorkout] = None
    plan: Optional[Plan] = None


@dataclass(frozen=True)
class Activity:
    id: datetime = EPOCH
    sport: Sport = Sport.RUNNING
    laps: List[ActivityLap] = field(default_factory=list)
    notes: Optional[str] = None
    training: Optional[Training] = None
    creator: Optional[Source] = None


@dataclass(frozen=True)
class MultiActivity:
    """One leg of a multi-sport session, optionally preceded by a
    transition lap.
    """
    transition: Optional[ActivityLap] = None
    activity: Optional[Activity] = None


@dataclass(frozen=True)
class MultiSportSession:
    id: datetime = EPOCH
    sports: List[MultiActivity] = field(default_factory=list)
    notes: Optional[str] = None


@dataclass(frozen=True)
class ActivityList:
    activities: List[Activity] = field(default_factory=list)
    multi_sport_sessions: List[MultiSportSession] = field(default_factory=list)
