"""Read TCX documents into a TrainingCenterDatabase."""

import io
from typing import BinaryIO, Optional, Union

from tcxread.config import Config
from tcxread.exceptions import XmlReadError
from tcxread.model import TrainingCenterDatabase
from tcxread.parse._base import ElementReader, Nested, Polymorphic, logger
from tcxread.parse._events import EventStream
from tcxread.parse.activity import ACTIVITY_LIST
from tcxread.parse.course import COURSE_LIST
from tcxread.parse.folders import FOLDERS
from tcxread.parse.source import SOURCE_TYPES
from tcxread.parse.workout import WORKOUT_LIST

ROOT_ELEMENT = 'TrainingCenterDatabase'

TRAINING_CENTER_DATABASE = ElementReader(TrainingCenterDatabase, fields=(
    Nested('Folders', 'folders', FOLDERS),
    Nested('Activities', 'activity_list', ACTIVITY_LIST),
    Nested('Workouts', 'workout_list', WORKOUT_LIST),
    Nested('Courses', 'course_list', COURSE_LIST),
    Polymorphic('Author', 'author', SOURCE_TYPES),
))


def read(source: Union[BinaryIO, bytes], config: Optional[Config] = None) -> TrainingCenterDatabase:
    """Read a TCX document from `source`, a binary file-like object (or
    bytes), and return the TrainingCenterDatabase it describes.

    Raises a ReadError subclass describing the first problem found.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    huge_tree = config.huge_tree if config is not None else False

    events = EventStream(source, huge_tree=huge_tree)
    root = events.root()
    if root.name != ROOT_ELEMENT:
        raise XmlReadError(f'root element is <{root.name}>, not <{ROOT_ELEMENT}>').locate(root.name, root.line)
    try:
        tc_db = TRAINING_CENTER_DATABASE(events, root)
    except RecursionError:
        # Each nested element is read by a nested call, so deep enough nesting exhausts the Python stack.
        raise XmlReadError('document nested too deeply').locate(root.name, root.line) from None

    activity_count = len(tc_db.activity_list.activities) if tc_db.activity_list is not None else 0
    logger.info(f'Read TCX data with {activity_count} activities.')
    return tc_db


def read_file(fpath: str, config: Optional[Config] = None) -> TrainingCenterDatabase:
    """Read the TCX file at `fpath`."""
    logger.info(f'Reading TCX file "{fpath}".')
    with open(fpath, 'rb') as f:
        return read(f, config)
