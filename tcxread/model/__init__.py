"""The typed tree that a TCX document is read into."""

from dataclasses import dataclass
from typing import Optional

from tcxread.model.activity import (EPOCH, EPOCH_DATE, Activity, ActivityLap, ActivityLapExtension, ActivityList,
                                    ActivityTrackPointExtension, MultiActivity, MultiSportSession, Plan, Position,
                                    QuickWorkout, TrackPoint, Training)
from tcxread.model.course import Course, CourseLap, CourseList, CoursePoint
from tcxread.model.enums import (BuildType, CadenceSensorType, CoursePointType, Intensity, SensorState, SpeedType,
                                 Sport, TrainingType, TriggerMethod)
from tcxread.model.folders import (CourseFolder, CourseFolders, Folders, History, HistoryFolder, MultiSportFolder,
                                   Week, WorkoutFolder, WorkoutFolders)
from tcxread.model.source import Application, Build, Device, Source, Version
from tcxread.model.workout import (AbstractStep, CadenceTarget, CaloriesBurnedDuration, CustomHeartRateZone,
                                   CustomSpeedZone, DistanceDuration, Duration, HeartRateAboveDuration,
                                   HeartRateBelowDuration, HeartRateTarget, HeartRateZone, NoTarget,
                                   PredefinedHeartRateZone, PredefinedSpeedZone, Repeat, SpeedTarget, SpeedZone, Step,
                                   Target, TimeDuration, UserInitiatedDuration, Workout, WorkoutList)


@dataclass(frozen=True)
class TrainingCenterDatabase:
    folders: Optional[Folders] = None
    activity_list: Optional[ActivityList] = None
    workout_list: Optional[WorkoutList] = None
    course_list: Optional[CourseList] = None
    author: Optional[Source] = None
