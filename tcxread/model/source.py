"""The applications and devices that create TCX data."""

from dataclasses import dataclass, field
from typing import Optional, Union

from tcxread.model.enums import BuildType
from tcxread.validate import Length, Pattern, constrained


@dataclass(frozen=True)
class Version:
    version_major: int = 0
    version_minor: int = 0
    build_major: Optional[int] = None
    build_minor: Optional[int] = None


@dataclass(frozen=True)
class Build:
    """Information about the build."""
    version: Version = field(default_factory=Version)
    build_type: Optional[BuildType] = None
    # A string containing the date and time when an application was built. This is generated by the compiler, so is
    # not an xsd:dateTime.
    time: Optional[str] = None
    # The login name of the engineer who created this build.
    builder: Optional[str] = None


@dataclass(frozen=True)
class Application:
    """Identifies a PC software application."""
    name: str = ''
    build: Build = field(default_factory=Build)
    # The two character ISO 639-1 language id of the installed language of the application.
    lang_id: str = constrained(Length(equal=2), default='')
    # The formatted XXX-XXXXX-XX Garmin part number of the application.
    part_number: str = constrained(Pattern('part_number'), default='')


@dataclass(frozen=True)
class Device:
    """Identifies the originating GPS device that tracked a run or
    the type of device capable of handling the data for loading.
    """
    name: str = ''
    unit_id: int = 0
    product_id: int = 0
    version: Version = field(default_factory=Version)


Source = Union[Application, Device]
