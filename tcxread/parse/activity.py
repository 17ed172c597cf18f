"""Readers for activities and everything they contain."""

from tcxread.model import (Activity, ActivityLap, ActivityLapExtension, ActivityList, ActivityTrackPointExtension,
                           CadenceSensorType, Intensity, MultiActivity, MultiSportSession, Plan, Position,
                           QuickWorkout, SensorState, Sport, TrackPoint, Training, TrainingType, TriggerMethod)
from tcxread.parse._base import Attribute, ElementReader, Nested, Polymorphic, Scalar
from tcxread.parse._scalars import (enum_parser, parse_bool, parse_datetime, parse_f64, parse_string, parse_u8,
                                    parse_u16)
from tcxread.parse.source import SOURCE_TYPES

POSITION = ElementReader(Position, fields=(
    Scalar('LatitudeDegrees', 'latitude_degrees', parse_f64),
    Scalar('LongitudeDegrees', 'longitude_degrees', parse_f64),
))

# Garmin ActivityExtension v2

TRACK_POINT_EXTENSION = ElementReader(
    ActivityTrackPointExtension,
    fields=(
        Scalar('Speed', 'speed', parse_f64, optional=True),
        Scalar('RunCadence', 'run_cadence', parse_u8, optional=True),
        Scalar('Watts', 'watts', parse_u16, optional=True),
    ),
    attributes=(
        Attribute('CadenceSensor', 'cadence_sensor', enum_parser(CadenceSensorType), optional=True),
    )
)

LAP_EXTENSION = ElementReader(ActivityLapExtension, fields=(
    Scalar('AvgSpeed', 'avg_speed', parse_f64, optional=True),
    Scalar('MaxBikeCadence', 'max_bike_cadence', parse_u8, optional=True),
    Scalar('AvgRunCadence', 'avg_run_cadence', parse_u8, optional=True),
    Scalar('MaxRunCadence', 'max_run_cadence', parse_u8, optional=True),
    Scalar('Steps', 'steps', parse_u16, optional=True),
    Scalar('AvgWatts', 'avg_watts', parse_u16, optional=True),
    Scalar('MaxWatts', 'max_watts', parse_u16, optional=True),
))

TRACK_POINT = ElementReader(TrackPoint, fields=(
    Scalar('Time', 'time', parse_datetime),
    Nested('Position', 'position', POSITION),
    Scalar('AltitudeMeters', 'altitude_meters', parse_f64, optional=True),
    Scalar('DistanceMeters', 'distance_meters', parse_f64, optional=True),
    Scalar(('HeartRateBpm', 'Value'), 'heart_rate_bpm', parse_u8, optional=True),
    Scalar('Cadence', 'cadence', parse_u8, optional=True),
    Scalar('SensorState', 'sensor_state', enum_parser(SensorState), optional=True),
    Nested(('Extensions', 'TPX'), 'extension', TRACK_POINT_EXTENSION),
))

ACTIVITY_LAP = ElementReader(
    ActivityLap,
    fields=(
        Scalar('TotalTimeSeconds', 'total_time_seconds', parse_f64),
        Scalar('DistanceMeters', 'distance_meters', parse_f64),
        Scalar('MaximumSpeed', 'maximum_speed', parse_f64, optional=True),
        Scalar('Calories', 'calories', parse_u16),
        Scalar(('AverageHeartRateBpm', 'Value'), 'average_heart_rate_bpm', parse_u8, optional=True),
        Scalar(('MaximumHeartRateBpm', 'Value'), 'maximum_heart_rate_bpm', parse_u8, optional=True),
        Scalar('Intensity', 'intensity', enum_parser(Intensity)),
        Scalar('Cadence', 'cadence', parse_u8, optional=True),
        Scalar('TriggerMethod', 'trigger_method', enum_parser(TriggerMethod)),
        # A lap may have several tracks; their points are read into one list.
        Nested(('Track', 'Trackpoint'), 'track_points', TRACK_POINT, repeated=True),
        Scalar('Notes', 'notes', parse_string, optional=True),
        Nested(('Extensions', 'LX'), 'extension', LAP_EXTENSION),
    ),
    attributes=(
        Attribute('StartTime', 'start_time', parse_datetime),
    )
)

QUICK_WORKOUT = ElementReader(QuickWorkout, fields=(
    Scalar('TotalTimeSeconds', 'total_time_seconds', parse_f64),
    Scalar('DistanceMeters', 'distance_meters', parse_f64),
))

PLAN = ElementReader(
    Plan,
    fields=(
        Scalar('Name', 'name', parse_string, optional=True),
    ),
    attributes=(
        Attribute('Type', 'training_type', enum_parser(TrainingType)),
        Attribute('IntervalWorkout', 'interval_workout', parse_bool),
    )
)

TRAINING = ElementReader(
    Training,
    fields=(
        Nested('QuickWorkoutResults', 'quick_workout_results', QUICK_WORKOUT),
        Nested('Plan', 'plan', PLAN),
    ),
    attributes=(
        Attribute('VirtualPartner', 'virtual_partner', parse_bool),
    )
)

ACTIVITY = ElementReader(
    Activity,
    fields=(
        Scalar('Id', 'id', parse_datetime),
        Nested('Lap', 'laps', ACTIVITY_LAP, repeated=True),
        Scalar('Notes', 'notes', parse_string, optional=True),
        Nested('Training', 'training', TRAINING),
        Polymorphic('Creator', 'creator', SOURCE_TYPES),
    ),
    attributes=(
        Attribute('Sport', 'sport', enum_parser(Sport)),
    )
)

# Each leg of a multi-sport session is a <FirstSport> or <NextSport> element.
MULTI_ACTIVITY = ElementReader(MultiActivity, fields=(
    Nested('Transition', 'transition', ACTIVITY_LAP),
    Nested('Activity', 'activity', ACTIVITY),
))

MULTI_SPORT_SESSION = ElementReader(MultiSportSession, fields=(
    Scalar('Id', 'id', parse_datetime),
    Nested('FirstSport', 'sports', MULTI_ACTIVITY, repeated=True),
    Nested('NextSport', 'sports', MULTI_ACTIVITY, repeated=True),
    Scalar('Notes', 'notes', parse_string, optional=True),
))

ACTIVITY_LIST = ElementReader(ActivityList, fields=(
    Nested('Activity', 'activities', ACTIVITY, repeated=True),
    Nested('MultiSportSession', 'multi_sport_sessions', MULTI_SPORT_SESSION, repeated=True),
))
