"""Readers for courses."""

from tcxread.model import Course, CourseLap, CourseList, CoursePoint, CoursePointType, Intensity
from tcxread.parse._base import ElementReader, Nested, Polymorphic, Scalar
from tcxread.parse._scalars import enum_parser, parse_datetime, parse_f64, parse_string, parse_u8
from tcxread.parse.activity import POSITION, TRACK_POINT
from tcxread.parse.source import SOURCE_TYPES

COURSE_LAP = ElementReader(CourseLap, fields=(
    Scalar('TotalTimeSeconds', 'total_time_seconds', parse_f64),
    Scalar('DistanceMeters', 'distance_meters', parse_f64),
    Nested('BeginPosition', 'begin_position', POSITION),
    Scalar('BeginAltitudeMeters', 'begin_altitude_meters', parse_f64, optional=True),
    Nested('EndPosition', 'end_position', POSITION),
    Scalar('EndAltitudeMeters', 'end_altitude_meters', parse_f64, optional=True),
    Scalar(('AverageHeartRateBpm', 'Value'), 'average_heart_rate_bpm', parse_u8, optional=True),
    Scalar(('MaximumHeartRateBpm', 'Value'), 'maximum_heart_rate_bpm', parse_u8, optional=True),
    Scalar('Intensity', 'intensity', enum_parser(Intensity)),
    Scalar('Cadence', 'cadence', parse_u8, optional=True),
))

COURSE_POINT = ElementReader(CoursePoint, fields=(
    Scalar('Name', 'name', parse_string),
    Scalar('Time', 'time', parse_datetime),
    Nested('Position', 'position', POSITION, optional=False),
    Scalar('AltitudeMeters', 'altitude_meters', parse_f64, optional=True),
    Scalar('PointType', 'point_type', enum_parser(CoursePointType)),
    Scalar('Notes', 'notes', parse_string, optional=True),
))

COURSE = ElementReader(Course, fields=(
    Scalar('Name', 'name', parse_string),
    Nested('Lap', 'laps', COURSE_LAP, repeated=True),
    Nested(('Track', 'Trackpoint'), 'track_points', TRACK_POINT, repeated=True),
    Scalar('Notes', 'notes', parse_string, optional=True),
    Nested('CoursePoint', 'course_points', COURSE_POINT, repeated=True),
    Polymorphic('Creator', 'creator', SOURCE_TYPES),
))

COURSE_LIST = ElementReader(CourseList, fields=(
    Nested('Course', 'courses', COURSE, repeated=True),
))
