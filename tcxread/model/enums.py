"""Closed enumerations used in TCX documents. The value of each member is
the exact literal that appears in the document.
"""

from enum import Enum


class Sport(Enum):
    RUNNING = 'Running'
    BIKING = 'Biking'
    OTHER = 'Other'


class Intensity(Enum):
    ACTIVE = 'Active'
    RESTING = 'Resting'


class TriggerMethod(Enum):
    MANUAL = 'Manual'
    DISTANCE = 'Distance'
    LOCATION = 'Location'
    TIME = 'Time'
    HEART_RATE = 'HeartRate'


class SensorState(Enum):
    PRESENT = 'Present'
    ABSENT = 'Absent'


class TrainingType(Enum):
    WORKOUT = 'Workout'
    COURSE = 'Course'


class BuildType(Enum):
    INTERNAL = 'Internal'
    ALPHA = 'Alpha'
    BETA = 'Beta'
    RELEASE = 'Release'


class CadenceSensorType(Enum):
    FOOTPOD = 'Footpod'
    BIKE = 'Bike'


class SpeedType(Enum):
    PACE = 'Pace'
    SPEED = 'Speed'


class CoursePointType(Enum):
    GENERIC = 'Generic'
    SUMMIT = 'Summit'
    VALLEY = 'Valley'
    WATER = 'Water'
    FOOD = 'Food'
    DANGER = 'Danger'
    LEFT = 'Left'
    RIGHT = 'Right'
    STRAIGHT = 'Straight'
    FIRST_AID = 'First Aid'
    CATEGORY_4 = '4th Category'
    CATEGORY_3 = '3rd Category'
    CATEGORY_2 = '2nd Category'
    CATEGORY_1 = '1st Category'
    HORS_CATEGORY = 'Hors Category'
    SPRINT = 'Sprint'
