"""Helper classes and functions to check that values read from a TCX
document satisfy the constraints of the TCX schema (numeric ranges,
string lengths and shapes) which are not enforced while reading.

Constraints are attached to the fields of the model dataclasses using
`constrained`, and checked by `validate`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields, is_dataclass
from functools import lru_cache
from typing import Any, Dict, List, Optional, Union

CONSTRAINTS_KEY = 'constraints'

PATTERNS = {
    # The formatted XXX-XXXXX-XX Garmin part number of a PC application.
    'part_number': r'[A-Z\d]{3}-[A-Z\d]{5}-[A-Z\d]{2}'
}


@lru_cache(maxsize=None)
def compiled_pattern(name: str) -> re.Pattern:
    """Return the compiled regular expression for the named pattern.
    Each pattern is compiled once, the first time it is needed.
    """
    return re.compile(PATTERNS[name], re.ASCII)


@dataclass(frozen=True)
class Range:
    min: Optional[float] = None
    max: Optional[float] = None

    def check(self, value: Union[int, float]) -> Optional[str]:
        if (self.min is not None) and (value < self.min):
            return f'{value} is less than {self.min}'
        if (self.max is not None) and (value > self.max):
            return f'{value} is greater than {self.max}'
        return None


@dataclass(frozen=True)
class Length:
    min: Optional[int] = None
    max: Optional[int] = None
    equal: Optional[int] = None

    def check(self, value: str) -> Optional[str]:
        length = len(value)
        if (self.equal is not None) and (length != self.equal):
            return f'length {length} is not {self.equal}'
        if (self.min is not None) and (length < self.min):
            return f'length {length} is less than {self.min}'
        if (self.max is not None) and (length > self.max):
            return f'length {length} is greater than {self.max}'
        return None


@dataclass(frozen=True)
class Pattern:
    name: str

    def check(self, value: str) -> Optional[str]:
        if compiled_pattern(self.name).fullmatch(value) is None:
            return f'"{value}" does not match the {self.name} pattern'
        return None


Constraint = Union[Range, Length, Pattern]


def constrained(*constraints: Constraint, **kwargs) -> Any:
    """Return a dataclass field carrying the given constraints. Keyword
    arguments (default, default_factory, etc) are passed to `field`.
    """
    return field(metadata={CONSTRAINTS_KEY: constraints}, **kwargs)


@dataclass(frozen=True)
class Violation:
    field: str
    constraint: Constraint
    value: Any
    message: str


@dataclass
class Result:
    is_valid: bool
    violations: List[Violation]
    # dict mapping field path to the violations for that field
    field_errors: Dict[str, List[Violation]]


def _check(value: Any, path: str, violations: List[Violation]):
    if is_dataclass(value) and not isinstance(value, type):
        for f in fields(value):
            f_value = getattr(value, f.name)
            f_path = f'{path}.{f.name}' if path else f.name
            if f_value is not None:
                for constraint in f.metadata.get(CONSTRAINTS_KEY, ()):
                    if (message := constraint.check(f_value)) is not None:
                        violations.append(Violation(f_path, constraint, f_value, message))
            _check(f_value, f_path, violations)
    elif isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check(item, f'{path}[{i}]', violations)


def validate(value: Any) -> Result:
    """Check `value` (a model object) and everything it contains against
    the constraints of the TCX schema. Absent optional values are not
    checked.
    """
    violations: List[Violation] = []
    _check(value, '', violations)
    field_errors: Dict[str, List[Violation]] = {}
    for v in violations:
        field_errors.setdefault(v.field, []).append(v)
    return Result(
        is_valid=not violations,
        violations=violations,
        field_errors=field_errors
    )
