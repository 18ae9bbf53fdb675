"""Entry points for writing a package document to a stream."""

import io
from typing import BinaryIO

from .config import WriterConfig
from .domain import Book
from .infrastructure import LxmlSerializer, NoCloseStream
from .services import IMetadataWriter, PackageDocumentResult, PackageDocumentWriter
from .services.package_document_writer import Diagnostics


def write_package_document(
    book: Book,
    output: BinaryIO,
    config: WriterConfig | None = None,
    metadata_writer: IMetadataWriter | None = None,
    diagnostics: Diagnostics | None = None,
) -> PackageDocumentResult:
    """Write the package document of a book to a binary stream.

    The stream is flushed but stays open, so further documents can be
    written to it afterwards.

    Args:
        book: The book to write.
        output: Destination stream.
        config: Writer configuration; defaults to WriterConfig().
        metadata_writer: Metadata collaborator; defaults to Dublin Core.
        diagnostics: Callback for resources left out of the manifest.

    Returns:
        The PackageDocumentResult of the write.

    Raises:
        PackageWriteError: If the document could not be assembled.
        OSError: If writing to the stream fails.
    """
    config = config or WriterConfig()
    serializer = LxmlSerializer(NoCloseStream(output), pretty_print=config.pretty_print)
    writer = PackageDocumentWriter(config, metadata_writer, diagnostics)
    return writer.write(book, serializer)


def package_document_bytes(
    book: Book,
    config: WriterConfig | None = None,
    metadata_writer: IMetadataWriter | None = None,
    diagnostics: Diagnostics | None = None,
) -> bytes:
    """Render the package document of a book to bytes."""
    buffer = io.BytesIO()
    write_package_document(book, buffer, config, metadata_writer, diagnostics)
    return buffer.getvalue()
