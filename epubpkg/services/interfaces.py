"""Service interfaces (protocols) for package document writing.

The package document writer talks to its collaborators only through
these protocols, so any structured-writer or metadata implementation
can be injected.
"""

from typing import Protocol

from ..domain import Book


class IXmlSerializer(Protocol):
    """Streaming structured-document writer.

    Calls are expected to be well nested: every start_tag is matched
    by an end_tag with the same namespace and name.
    """

    def start_document(self, encoding: str) -> None:
        """Begin a new document in the given character encoding."""
        ...

    def set_prefix(self, prefix: str, namespace: str) -> None:
        """Bind a namespace prefix on the next element started.

        An empty prefix binds the default namespace.
        """
        ...

    def start_tag(self, namespace: str, name: str) -> None:
        """Open an element."""
        ...

    def attribute(self, namespace: str, name: str, value: str) -> None:
        """Set an attribute on the most recently opened element."""
        ...

    def text(self, value: str) -> None:
        """Write character content into the most recently opened element."""
        ...

    def end_tag(self, namespace: str, name: str) -> None:
        """Close the most recently opened element."""
        ...

    def end_document(self) -> None:
        """Finish the document; all elements must be closed."""
        ...

    def flush(self) -> None:
        """Flush buffered output without closing the underlying stream."""
        ...


class IMetadataWriter(Protocol):
    """Writes the descriptive metadata block of the package document."""

    def write_metadata(self, book: Book, serializer: IXmlSerializer) -> None:
        """Emit zero or more well-nested elements inside the open root.

        Args:
            book: The book whose metadata to write.
            serializer: The sink to write to.
        """
        ...
