"""Metadata that we can use elsewhere in the library. The version data
corresponds to the parts of the version identifier specified by
PEP 440.
"""

APP_NAME = 'tcxread'
VERSION_MAJOR = 0
VERSION_MINOR = 1
RELEASE_SEGMENT = 'a1'
VERSION = f'{VERSION_MAJOR}.{VERSION_MINOR}{RELEASE_SEGMENT}'
