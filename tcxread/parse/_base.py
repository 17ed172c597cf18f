"""Base classes for building element readers.

Every TCX entity is read by an `ElementReader`: a single event loop
driven by a table of fields, each of which says which child element (or
attribute) it reads, how to convert it and where to put the result.
"""

from dataclasses import fields as dataclass_fields, MISSING
from typing import Any, Callable, Dict, Iterable, Mapping, Sequence, Tuple, Union

from tcxread._xml_namespaces import UNBOUND_XSI_TYPE, XSI_TYPE
from tcxread.exceptions import ReadError, TypeNotDefinedError
from tcxread.logger import get_logger
from tcxread.parse._events import ElementStart, EventStream, Text

# Create a common logger for all readers.
logger = get_logger('parse')

# A reader is called with the event stream positioned just after `start` and must consume everything up to and
# including the end of `start`.
Reader = Callable[[EventStream, ElementStart], Any]

Path = Union[str, Tuple[str, ...]]


def resolve_type(start: ElementStart) -> str:
    """Return the value of the xsi:type attribute of `start`, which
    determines the concrete type of a polymorphic element.
    """
    e_type = start.attributes.get(XSI_TYPE)
    if e_type is None:
        e_type = start.attributes.get(UNBOUND_XSI_TYPE)
    if e_type is None:
        raise TypeNotDefinedError().locate(start.name, start.line)
    return e_type


class Field:
    """A child element of an entity that populates one of its attributes.

    `path` is the local name of the child element, or a tuple of names
    where the value is wrapped in further elements (such as
    `('AverageHeartRateBpm', 'Value')`).
    """

    def __init__(self, path: Path, attr: str, optional: bool = True, repeated: bool = False):
        self.path: Tuple[str, ...] = (path,) if isinstance(path, str) else tuple(path)
        self.attr = attr
        self.optional = optional
        self.repeated = repeated

    @property
    def tag(self) -> str:
        return self.path[0]

    def dispatch(self, events: EventStream, start: ElementStart, values: Dict[str, Any]):
        """Handle the element `start`, whose name matches the first part of
        the path. Descend through the rest of the path, then populate.
        """
        self._descend(events, start, self.path[1:], values)

    def _descend(self, events: EventStream, start: ElementStart, rest: Tuple[str, ...], values: Dict[str, Any]):
        if not rest:
            self.populate(events, start, values)
            return
        for event in events.children(start):
            if isinstance(event, ElementStart):
                if event.name == rest[0]:
                    self._descend(events, event, rest[1:], values)
                else:
                    events.skip(event)

    def store(self, values: Dict[str, Any], value: Any):
        if self.repeated:
            values.setdefault(self.attr, []).append(value)
        else:
            values[self.attr] = value

    def populate(self, events: EventStream, start: ElementStart, values: Dict[str, Any]):
        raise NotImplementedError('Child of Field must implement a populate method.')


class Scalar(Field):
    """A leaf element whose text is converted by `convert`. If the
    element has no text, the attribute is left as it is.
    """

    def __init__(self, path: Path, attr: str, convert: Callable[[str], Any], optional: bool = False,
                 repeated: bool = False):
        super().__init__(path, attr, optional, repeated)
        self.convert = convert

    def populate(self, events: EventStream, start: ElementStart, values: Dict[str, Any]):
        event = events.peek()
        if isinstance(event, Text):
            next(events)
            try:
                value = self.convert(event.content)
            except ReadError as e:
                raise e.locate(start.name, event.line)
            self.store(values, value)
        events.skip(start)


class Nested(Field):
    """A composite element read by another reader."""

    def __init__(self, path: Path, attr: str, reader: Reader, optional: bool = True, repeated: bool = False):
        super().__init__(path, attr, optional, repeated)
        self.reader = reader

    def populate(self, events: EventStream, start: ElementStart, values: Dict[str, Any]):
        self.store(values, self.reader(events, start))


class Polymorphic(Field):
    """A composite element whose reader is chosen by its xsi:type
    attribute. Elements of a type not in `variants` are skipped.
    """

    def __init__(self, path: Path, attr: str, variants: Mapping[str, Reader], optional: bool = True,
                 repeated: bool = False):
        super().__init__(path, attr, optional, repeated)
        self.variants = variants

    def populate(self, events: EventStream, start: ElementStart, values: Dict[str, Any]):
        e_type = resolve_type(start)
        reader = self.variants.get(e_type)
        if reader is None:
            logger.debug(f'Ignoring <{start.name}> of unknown type "{e_type}" at line {start.line}.')
            events.skip(start)
            return
        self.store(values, reader(events, start))


class Attribute:
    """An attribute of the entity's own start tag."""

    def __init__(self, name: str, attr: str, convert: Callable[[str], Any], optional: bool = False):
        self.name = name
        self.attr = attr
        self.convert = convert
        self.optional = optional

    def populate(self, start: ElementStart, values: Dict[str, Any]):
        text = start.attributes.get(self.name)
        if text is None:
            return
        try:
            values[self.attr] = self.convert(text)
        except ReadError as e:
            raise e.locate(start.name, start.line)


class ElementReader:
    """Reads an element into an instance of `model` (a dataclass), using
    `fields` for child elements and `attributes` for the attributes of the
    element itself. Child elements that no field asks for are skipped.
    """

    def __init__(self, model: type, fields: Sequence[Field] = (), attributes: Iterable[Attribute] = ()):
        self.model = model
        self.fields: Dict[str, Field] = {}
        for f in fields:
            if f.tag in self.fields:
                raise ValueError(f'Two fields of {model.__name__} read the element <{f.tag}>.')
            self.fields[f.tag] = f
        self.attributes = tuple(attributes)
        self._mandatory = self._find_mandatory()

    def _find_mandatory(self) -> Dict[str, str]:
        """Map each mandatory attribute of the model to the name of the
        element or attribute it is read from.
        """
        mandatory = {}
        for f in self.fields.values():
            if not (f.optional or f.repeated):
                mandatory[f.attr] = '/'.join(f.path)
        for a in self.attributes:
            if not a.optional:
                mandatory[a.attr] = f'@{a.name}'
        model_fields = {f.name: f for f in dataclass_fields(self.model)}
        for attr in mandatory:
            if (attr not in model_fields) or (model_fields[attr].default is MISSING
                                              and model_fields[attr].default_factory is MISSING):
                raise ValueError(f'{self.model.__name__} has no default for mandatory field "{attr}".')
        return mandatory

    def __call__(self, events: EventStream, start: ElementStart) -> Any:
        return self.read(events, start)

    def read(self, events: EventStream, start: ElementStart) -> Any:
        values: Dict[str, Any] = {}
        for a in self.attributes:
            a.populate(start, values)
        for event in events.children(start):
            if isinstance(event, ElementStart):
                f = self.fields.get(event.name)
                if f is None:
                    events.skip(event)
                else:
                    f.dispatch(events, event, values)
        for attr, source in self._mandatory.items():
            if attr not in values:
                logger.debug(f'<{start.name}> at line {start.line} has no {source}; '
                             f'{self.model.__name__}.{attr} keeps its default value.')
        return self.model(**values)
