"""Readers for the applications and devices that author TCX data."""

from tcxread.model import Application, Build, BuildType, Device, Version
from tcxread.parse._base import ElementReader, Nested, Scalar
from tcxread.parse._scalars import enum_parser, parse_string, parse_u16, parse_u32

VERSION = ElementReader(Version, fields=(
    Scalar('VersionMajor', 'version_major', parse_u16),
    Scalar('VersionMinor', 'version_minor', parse_u16),
    Scalar('BuildMajor', 'build_major', parse_u16, optional=True),
    Scalar('BuildMinor', 'build_minor', parse_u16, optional=True),
))

BUILD = ElementReader(Build, fields=(
    Nested('Version', 'version', VERSION, optional=False),
    Scalar('Type', 'build_type', enum_parser(BuildType), optional=True),
    Scalar('Time', 'time', parse_string, optional=True),
    # The login name of the builder is a <Build> element inside <Build>.
    Scalar('Build', 'builder', parse_string, optional=True),
))

APPLICATION = ElementReader(Application, fields=(
    Scalar('Name', 'name', parse_string),
    Nested('Build', 'build', BUILD, optional=False),
    Scalar('LangID', 'lang_id', parse_string),
    Scalar('PartNumber', 'part_number', parse_string),
))

DEVICE = ElementReader(Device, fields=(
    Scalar('Name', 'name', parse_string),
    Scalar('UnitId', 'unit_id', parse_u32),
    Scalar('ProductID', 'product_id', parse_u16),
    Nested('Version', 'version', VERSION, optional=False),
))

# Readers for the concrete types of an Author or Creator element, by xsi:type.
SOURCE_TYPES = {
    'Application_t': APPLICATION,
    'Device_t': DEVICE,
}
