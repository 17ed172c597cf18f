"""Configuration for the reader and its logging.

Values are read from an optional INI file with `[reader]` and
`[logging]` sections; keyword arguments override the file.
"""
import logging
import os
from configparser import ConfigParser
from dataclasses import dataclass
from typing import Optional, Union

import appdirs

from tcxread.metadata import APP_NAME

LOG_FILE_NAME = f'{APP_NAME}.log'


def _parse_level(value: Optional[Union[str, int]]) -> Optional[int]:
    """Convert a level name such as "DEBUG" (or a number) to a logging level."""
    if value is None or value == '':
        return None
    if isinstance(value, int):
        return value
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f'Unknown logging level "{value}".')
    return level


@dataclass(init=False)
class Config:
    # Add these as fields so that they are compared in __eq__
    huge_tree: bool
    console_level: Optional[int]
    file_level: Optional[int]
    log_file: Optional[str]

    def __init__(self, ini_fpath: Optional[str] = None, **kwargs):
        self.ini_fpath = ini_fpath
        self.kwargs = kwargs
        self.load()

    def read_file(self, ini_fpath: str):
        parser = ConfigParser()
        if not parser.read(ini_fpath):
            raise FileNotFoundError(f'Could not read config file "{ini_fpath}".')

        if parser.has_section('reader'):
            self.huge_tree = parser['reader'].getboolean('huge_tree', fallback=False)

        if parser.has_section('logging'):
            self.console_level = _parse_level(parser['logging'].get('console_level'))
            self.file_level = _parse_level(parser['logging'].get('file_level'))
            self.log_file = parser['logging'].get('log_file') or None

    def load(self, fpath: Optional[str] = None):
        """Load values from the given file and keyword arguments."""

        self.huge_tree = False
        self.console_level = None
        self.file_level = None
        self.log_file = None

        fpath = fpath or self.ini_fpath
        if fpath is not None:
            self.read_file(fpath)

        for k in self.kwargs:
            if k in ('console_level', 'file_level'):
                setattr(self, k, _parse_level(self.kwargs[k]))
            else:
                setattr(self, k, self.kwargs[k])

        if (self.file_level is not None) and (self.log_file is None):
            log_dir = appdirs.user_log_dir(APP_NAME)
            if not os.path.exists(log_dir):
                os.makedirs(log_dir)
            self.log_file = os.path.join(log_dir, LOG_FILE_NAME)
