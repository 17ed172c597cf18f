from enum import Enum
from typing import Optional, Type


class BaseTcxReadException(Exception):
    """Base class for all tcxread-related exceptions."""
    pass


class ReadError(BaseTcxReadException):
    """A TCX document could not be read. Once the reader knows where
    the error happened, `element` and `line` describe the location.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.element: Optional[str] = None
        self.line: Optional[int] = None

    def locate(self, element: str, line: Optional[int]) -> 'ReadError':
        """Record where the error happened, unless a more specific
        location has already been recorded.
        """
        if self.element is None:
            self.element = element
            self.line = line
        return self

    def __str__(self) -> str:
        if self.element is None:
            return self.message
        elif self.line is None:
            return f'{self.message} (in <{self.element}>)'
        else:
            return f'{self.message} (in <{self.element}> at line {self.line})'


class XmlReadError(ReadError):
    """The underlying XML is malformed or is not a TCX document."""
    pass


class ParseIntError(ReadError):
    """Element text is not an unsigned integer of the expected width."""

    def __init__(self, kind: str, text: str):
        super().__init__(f"error while parsing '{text}' to {kind}")
        self.kind = kind
        self.text = text


class ParseFloatError(ReadError):
    """Element text is not a valid floating point number."""

    def __init__(self, text: str):
        super().__init__(f"error while parsing '{text}' to float")
        self.text = text


class ParseBoolError(ReadError):
    """Text is not a valid boolean literal."""

    def __init__(self, text: str):
        super().__init__(f"error while parsing '{text}' to boolean")
        self.text = text


class DateParseError(ReadError):
    """Text is not a valid RFC 3339 timestamp (or xsd:date)."""

    def __init__(self, text: str, reason: Optional[str] = None):
        message = f"error while parsing '{text}' to date"
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)
        self.text = text


class TypeNotDefinedError(ReadError):
    """A polymorphic element has no xsi:type attribute."""

    def __init__(self):
        super().__init__('type not defined, but expected')


class UnknownEnumValueError(ReadError):
    """Text does not match any literal of a closed enumeration."""

    def __init__(self, enum: Type[Enum], text: str):
        super().__init__(f"unknown '{enum.__name__}' value '{text}'")
        self.enum = enum
        self.enum_name = enum.__name__
        self.text = text
