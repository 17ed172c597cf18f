"""Readers for planned workouts. Steps, durations, targets and zones are
all polymorphic elements, resolved by their xsi:type.
"""

from tcxread.model import (CadenceTarget, CaloriesBurnedDuration, CustomHeartRateZone, CustomSpeedZone,
                           DistanceDuration, HeartRateAboveDuration, HeartRateBelowDuration, HeartRateTarget,
                           Intensity, NoTarget, PredefinedHeartRateZone, PredefinedSpeedZone, Repeat, SpeedTarget,
                           SpeedType, Sport, Step, TimeDuration, UserInitiatedDuration, Workout, WorkoutList)
from tcxread.parse._base import Attribute, ElementReader, Nested, Polymorphic, Scalar
from tcxread.parse._events import ElementStart, EventStream
from tcxread.parse._scalars import enum_parser, parse_date, parse_f64, parse_string, parse_u8, parse_u16
from tcxread.parse.source import SOURCE_TYPES

DURATION_TYPES = {
    'Time_t': ElementReader(TimeDuration, fields=(
        Scalar('Seconds', 'seconds', parse_u16),
    )),
    'Distance_t': ElementReader(DistanceDuration, fields=(
        Scalar('Meters', 'meters', parse_u16),
    )),
    'HeartRateAbove_t': ElementReader(HeartRateAboveDuration, fields=(
        Scalar(('HeartRate', 'Value'), 'heart_rate', parse_u8),
    )),
    'HeartRateBelow_t': ElementReader(HeartRateBelowDuration, fields=(
        Scalar(('HeartRate', 'Value'), 'heart_rate', parse_u8),
    )),
    'CaloriesBurned_t': ElementReader(CaloriesBurnedDuration, fields=(
        Scalar('Calories', 'calories', parse_u16),
    )),
    'UserInitiated_t': ElementReader(UserInitiatedDuration),
}

SPEED_ZONE_TYPES = {
    'PredefinedSpeedZone_t': ElementReader(PredefinedSpeedZone, fields=(
        Scalar('Number', 'number', parse_u8),
    )),
    'CustomSpeedZone_t': ElementReader(CustomSpeedZone, fields=(
        Scalar('ViewAs', 'view_as', enum_parser(SpeedType)),
        Scalar('LowInMetersPerSecond', 'low_in_meters_per_second', parse_f64),
        Scalar('HighInMetersPerSecond', 'high_in_meters_per_second', parse_f64),
    )),
}

HEART_RATE_ZONE_TYPES = {
    'PredefinedHeartRateZone_t': ElementReader(PredefinedHeartRateZone, fields=(
        Scalar('Number', 'number', parse_u8),
    )),
    'CustomHeartRateZone_t': ElementReader(CustomHeartRateZone, fields=(
        Scalar(('Low', 'Value'), 'low', parse_u8),
        Scalar(('High', 'Value'), 'high', parse_u8),
    )),
}

TARGET_TYPES = {
    'Speed_t': ElementReader(SpeedTarget, fields=(
        Polymorphic('SpeedZone', 'zone', SPEED_ZONE_TYPES),
    )),
    'HeartRate_t': ElementReader(HeartRateTarget, fields=(
        Polymorphic('HeartRateZone', 'zone', HEART_RATE_ZONE_TYPES),
    )),
    'Cadence_t': ElementReader(CadenceTarget, fields=(
        Scalar('Low', 'low', parse_f64),
        Scalar('High', 'high', parse_f64),
    )),
    'None_t': ElementReader(NoTarget),
}

STEP = ElementReader(Step, fields=(
    Scalar('StepId', 'step_id', parse_u8),
    Scalar('Name', 'name', parse_string, optional=True),
    Polymorphic('Duration', 'duration', DURATION_TYPES),
    Scalar('Intensity', 'intensity', enum_parser(Intensity)),
    Polymorphic('Target', 'target', TARGET_TYPES),
))


def read_repeat(events: EventStream, start: ElementStart) -> Repeat:
    # Repeats nest, so REPEAT can only be looked up once it exists.
    return REPEAT(events, start)


STEP_TYPES = {
    'Step_t': STEP,
    'Repeat_t': read_repeat,
}

REPEAT = ElementReader(Repeat, fields=(
    Scalar('StepId', 'step_id', parse_u8),
    Scalar('Repetitions', 'repetitions', parse_u8),
    Polymorphic('Child', 'children', STEP_TYPES, repeated=True),
))

WORKOUT = ElementReader(
    Workout,
    fields=(
        Scalar('Name', 'name', parse_string),
        Polymorphic('Step', 'steps', STEP_TYPES, repeated=True),
        Scalar('ScheduledOn', 'scheduled_on', parse_date, repeated=True),
        Scalar('Notes', 'notes', parse_string, optional=True),
        Polymorphic('Creator', 'creator', SOURCE_TYPES),
    ),
    attributes=(
        Attribute('Sport', 'sport', enum_parser(Sport)),
    )
)

WORKOUT_LIST = ElementReader(WorkoutList, fields=(
    Nested('Workout', 'workouts', WORKOUT, repeated=True),
))
