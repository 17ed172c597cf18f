"""Readers for folders. Folders contain sub-folders of the same type, so
the folder readers refer to themselves through small wrapper functions.
"""

from tcxread.model import (CourseFolder, CourseFolders, Folders, History, HistoryFolder, MultiSportFolder, Week,
                           WorkoutFolder, WorkoutFolders)
from tcxread.parse._base import Attribute, ElementReader, Nested, Scalar
from tcxread.parse._events import ElementStart, EventStream
from tcxread.parse._scalars import parse_date, parse_datetime, parse_string

WEEK = ElementReader(
    Week,
    fields=(
        Scalar('Notes', 'notes', parse_string, optional=True),
    ),
    attributes=(
        Attribute('StartDay', 'start_day', parse_date),
    )
)


def read_history_folder(events: EventStream, start: ElementStart) -> HistoryFolder:
    return HISTORY_FOLDER(events, start)


def read_multi_sport_folder(events: EventStream, start: ElementStart) -> MultiSportFolder:
    return MULTI_SPORT_FOLDER(events, start)


def read_workout_folder(events: EventStream, start: ElementStart) -> WorkoutFolder:
    return WORKOUT_FOLDER(events, start)


def read_course_folder(events: EventStream, start: ElementStart) -> CourseFolder:
    return COURSE_FOLDER(events, start)


HISTORY_FOLDER = ElementReader(
    HistoryFolder,
    fields=(
        Nested('Folder', 'folders', read_history_folder, repeated=True),
        Scalar(('ActivityRef', 'Id'), 'activity_refs', parse_datetime, repeated=True),
        Nested('Week', 'weeks', WEEK, repeated=True),
        Scalar('Notes', 'notes', parse_string, optional=True),
    ),
    attributes=(
        Attribute('Name', 'name', parse_string),
    )
)

MULTI_SPORT_FOLDER = ElementReader(
    MultiSportFolder,
    fields=(
        Nested('Folder', 'folders', read_multi_sport_folder, repeated=True),
        Scalar(('MultisportActivityRef', 'Id'), 'multisport_activity_refs', parse_datetime, repeated=True),
        Nested('Week', 'weeks', WEEK, repeated=True),
        Scalar('Notes', 'notes', parse_string, optional=True),
    ),
    attributes=(
        Attribute('Name', 'name', parse_string),
    )
)

HISTORY = ElementReader(History, fields=(
    Nested('Running', 'running', HISTORY_FOLDER),
    Nested('Biking', 'biking', HISTORY_FOLDER),
    Nested('Other', 'other', HISTORY_FOLDER),
    Nested('MultiSport', 'multi_sport', MULTI_SPORT_FOLDER),
))

WORKOUT_FOLDER = ElementReader(
    WorkoutFolder,
    fields=(
        Nested('Folder', 'folders', read_workout_folder, repeated=True),
        Scalar(('WorkoutNameRef', 'Id'), 'workout_name_refs', parse_string, repeated=True),
    ),
    attributes=(
        Attribute('Name', 'name', parse_string),
    )
)

WORKOUT_FOLDERS = ElementReader(WorkoutFolders, fields=(
    Nested('Running', 'running', WORKOUT_FOLDER),
    Nested('Biking', 'biking', WORKOUT_FOLDER),
    Nested('Other', 'other', WORKOUT_FOLDER),
))

COURSE_FOLDER = ElementReader(
    CourseFolder,
    fields=(
        Nested('Folder', 'folders', read_course_folder, repeated=True),
        Scalar(('CourseNameRef', 'Id'), 'course_name_refs', parse_string, repeated=True),
        Scalar('Notes', 'notes', parse_string, optional=True),
    ),
    attributes=(
        Attribute('Name', 'name', parse_string),
    )
)

COURSE_FOLDERS = ElementReader(CourseFolders, fields=(
    Nested('CourseFolder', 'course_folder', COURSE_FOLDER),
))

FOLDERS = ElementReader(Folders, fields=(
    Nested('History', 'history', HISTORY),
    Nested('Workouts', 'workouts', WORKOUT_FOLDERS),
    Nested('Courses', 'courses', COURSE_FOLDERS),
))
