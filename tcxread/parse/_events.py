"""A pull-based stream of XML events over lxml's iterparse.

The stream produces, in document order, one `DocumentStart`, then an
`ElementStart`, an optional `Text` and an `ElementEnd` for each element,
then one `EndOfDocument`. Element and attribute names are reported
without their namespace (except for namespaced attributes, which keep
their Clark notation key in `ElementStart.attributes`). Elements are
cleared as soon as their end event has been produced, so the whole
document is never held in memory.
"""

from collections import deque
from dataclasses import dataclass
from typing import BinaryIO, Deque, Dict, Iterator, Optional, Union

import lxml.etree

from tcxread.exceptions import XmlReadError


@dataclass(frozen=True)
class DocumentStart:
    pass


@dataclass(frozen=True)
class ElementStart:
    name: str
    attributes: Dict[str, str]
    line: Optional[int] = None


@dataclass(frozen=True)
class Text:
    content: str
    line: Optional[int] = None


@dataclass(frozen=True)
class ElementEnd:
    name: str
    line: Optional[int] = None


@dataclass(frozen=True)
class EndOfDocument:
    pass


Event = Union[DocumentStart, ElementStart, Text, ElementEnd, EndOfDocument]


def local_name(tag: str) -> str:
    """Strip the namespace (in Clark notation) from a tag."""
    if tag[:1] == '{':
        return tag.rsplit('}', 1)[1]
    return tag


class EventStream:
    """A finite, non-restartable stream of XML events read from `source`
    (a binary file-like object).
    """

    def __init__(self, source: BinaryIO, huge_tree: bool = False):
        self._context = lxml.etree.iterparse(
            source,
            events=('start', 'end'),
            remove_comments=True,
            remove_pis=True,
            resolve_entities=False,
            huge_tree=huge_tree
        )
        self._pending: Deque[Event] = deque([DocumentStart()])
        self._finished = False

    def __iter__(self) -> Iterator[Event]:
        return self

    def __next__(self) -> Event:
        if not self._pending:
            self._fill()
        if not self._pending:
            raise StopIteration
        return self._pending.popleft()

    def peek(self) -> Event:
        """Return the next event without consuming it."""
        if not self._pending:
            self._fill()
        if not self._pending:
            raise XmlReadError('unexpected end of document')
        return self._pending[0]

    def _fill(self):
        """Translate the next iterparse event into one or more of our events."""
        if self._finished:
            return
        try:
            action, elem = next(self._context)
        except StopIteration:
            self._finished = True
            self._pending.append(EndOfDocument())
            return
        except lxml.etree.XMLSyntaxError as e:
            self._finished = True
            raise XmlReadError(f"error reading XML '{e}'") from e

        if action == 'start':
            self._pending.append(ElementStart(local_name(elem.tag), dict(elem.attrib), elem.sourceline))
        else:
            name = local_name(elem.tag)
            # Only leaf elements have meaningful text; whitespace between child elements is not reported.
            if (elem.text is not None) and (len(elem) == 0):
                self._pending.append(Text(elem.text, elem.sourceline))
            self._pending.append(ElementEnd(name, elem.sourceline))
            elem.clear()
            # Drop earlier siblings that have already been read.
            while elem.getprevious() is not None:
                del elem.getparent()[0]

    def root(self) -> ElementStart:
        """Consume events up to and including the start of the root element."""
        for event in self:
            if isinstance(event, ElementStart):
                return event
            if isinstance(event, EndOfDocument):
                break
        raise XmlReadError('document has no root element')

    def children(self, start: ElementStart) -> Iterator[Event]:
        """Yield the events inside the element that `start` opened, then
        consume its end event. The caller must consume (or `skip`) every
        child element it is given, so that the end event seen at this level
        is the end of `start`.
        """
        for event in self:
            if isinstance(event, ElementEnd) and event.name == start.name:
                return
            if isinstance(event, EndOfDocument):
                break
            yield event
        raise XmlReadError(f'unexpected end of document inside <{start.name}>')

    def skip(self, start: ElementStart):
        """Consume the rest of the element that `start` opened, including
        everything nested in it.
        """
        depth = 1
        for event in self:
            if isinstance(event, ElementStart):
                depth += 1
            elif isinstance(event, ElementEnd):
                depth -= 1
                if depth == 0:
                    return
            elif isinstance(event, EndOfDocument):
                break
        raise XmlReadError(f'unexpected end of document inside <{start.name}>')
