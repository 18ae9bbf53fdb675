"""lxml-backed structured document writer.

Builds an element tree from a stream of start/attribute/end calls and
serializes it to a binary output when the document ends.
"""

import logging
from typing import BinaryIO, Optional

from lxml import etree

from ..constants import CHARACTER_ENCODING

logger = logging.getLogger(__name__)


class PackageWriteError(Exception):
    """Raised when the writer is driven out of order.

    A document that raised this error is incomplete and must be
    discarded.
    """


def _qualify(namespace: Optional[str], name: str) -> str:
    """Build an lxml qualified name ({namespace}name)."""
    if namespace:
        return f"{{{namespace}}}{name}"
    return name


class LxmlSerializer:
    """Implements IXmlSerializer on top of lxml.etree.

    Prefix bindings declared with set_prefix() are attached to the next
    element started. The output stream is written to and flushed, never
    closed.
    """

    def __init__(self, output: BinaryIO, pretty_print: bool = True) -> None:
        """Initialize the serializer.

        Args:
            output: Binary stream the finished document is written to.
            pretty_print: Indent the serialized document.
        """
        self._output = output
        self._pretty_print = pretty_print
        self._encoding = CHARACTER_ENCODING
        self._pending_nsmap: dict[Optional[str], str] = {}
        self._root: Optional[etree._Element] = None
        self._stack: list[etree._Element] = []
        self._started = False
        self._ended = False

    def start_document(self, encoding: str) -> None:
        if self._started:
            raise PackageWriteError("document already started")
        self._encoding = encoding
        self._started = True

    def set_prefix(self, prefix: str, namespace: str) -> None:
        self._check_open()
        self._pending_nsmap[prefix or None] = namespace

    def start_tag(self, namespace: str, name: str) -> None:
        self._check_open()
        tag = _qualify(namespace, name)
        nsmap = self._pending_nsmap or None
        if self._root is None:
            element = etree.Element(tag, nsmap=nsmap)
            self._root = element
        elif self._stack:
            element = etree.SubElement(self._stack[-1], tag, nsmap=nsmap)
        else:
            raise PackageWriteError(f"cannot start <{name}>: root element already closed")
        self._pending_nsmap = {}
        self._stack.append(element)

    def attribute(self, namespace: str, name: str, value: str) -> None:
        if not self._stack:
            raise PackageWriteError(f"attribute {name!r} written outside of an element")
        self._stack[-1].set(_qualify(namespace, name), value)

    def text(self, value: str) -> None:
        if not self._stack:
            raise PackageWriteError("text written outside of an element")
        element = self._stack[-1]
        if len(element):
            last = element[-1]
            last.tail = (last.tail or "") + value
        else:
            element.text = (element.text or "") + value

    def end_tag(self, namespace: str, name: str) -> None:
        tag = _qualify(namespace, name)
        if not self._stack:
            raise PackageWriteError(f"end tag </{name}> without open element")
        if self._stack[-1].tag != tag:
            raise PackageWriteError(
                f"end tag </{name}> does not match open element {self._stack[-1].tag}"
            )
        self._stack.pop()

    def end_document(self) -> None:
        self._check_open()
        if self._root is None:
            raise PackageWriteError("document has no root element")
        if self._stack:
            raise PackageWriteError(f"{len(self._stack)} element(s) left open")
        self._output.write(
            etree.tostring(
                self._root,
                xml_declaration=True,
                encoding=self._encoding,
                pretty_print=self._pretty_print,
            )
        )
        self._ended = True
        logger.debug("Serialized <%s> document", etree.QName(self._root).localname)

    def flush(self) -> None:
        self._output.flush()

    def _check_open(self) -> None:
        if not self._started:
            raise PackageWriteError("document not started")
        if self._ended:
            raise PackageWriteError("document already ended")
