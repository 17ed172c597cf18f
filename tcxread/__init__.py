"""Read Training Center XML (TCX) documents into a typed tree."""

from tcxread.config import Config
from tcxread.exceptions import (BaseTcxReadException, DateParseError, ParseBoolError, ParseFloatError, ParseIntError,
                                ReadError, TypeNotDefinedError, UnknownEnumValueError, XmlReadError)
from tcxread.metadata import VERSION as __version__
from tcxread.model import *
from tcxread.parse import read, read_file
from tcxread.validate import Result, Violation, validate
