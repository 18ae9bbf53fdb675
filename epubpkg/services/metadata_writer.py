"""Dublin Core metadata writer.

Writes the metadata block of the package document: dc elements for the
book's descriptive metadata plus the cover and generator meta entries.
"""

from .. import __version__
from ..constants import (
    BOOK_ID_ID,
    EMPTY_NAMESPACE,
    NAMESPACE_DUBLIN_CORE,
    NAMESPACE_OPF,
    DCTags,
    OPFAttributes,
    OPFTags,
    PREFIX_OPF_ATTRIBUTES,
    OPFValues,
)
from ..domain import Author, Book, Identifier
from .interfaces import IXmlSerializer

GENERATOR = f"epub-package-writer {__version__}"


class DublinCoreMetadataWriter:
    """Implements IMetadataWriter with Dublin Core elements.

    Blank values are skipped. The book-id identifier is written first,
    carrying the id referenced by the package's unique-identifier.
    """

    def write_metadata(self, book: Book, serializer: IXmlSerializer) -> None:
        metadata = book.metadata
        serializer.set_prefix(PREFIX_OPF_ATTRIBUTES, NAMESPACE_OPF)
        serializer.start_tag(NAMESPACE_OPF, OPFTags.METADATA)

        self._write_identifiers(metadata.identifiers, serializer)
        for title in metadata.titles:
            self._write_simple(serializer, DCTags.TITLE, title)
        for author in metadata.authors:
            self._write_author(serializer, DCTags.CREATOR, author)
        for contributor in metadata.contributors:
            self._write_author(serializer, DCTags.CONTRIBUTOR, contributor)
        for subject in metadata.subjects:
            self._write_simple(serializer, DCTags.SUBJECT, subject)
        for description in metadata.descriptions:
            self._write_simple(serializer, DCTags.DESCRIPTION, description)
        for publisher in metadata.publishers:
            self._write_simple(serializer, DCTags.PUBLISHER, publisher)
        for type_ in metadata.types:
            self._write_simple(serializer, DCTags.TYPE, type_)
        for rights in metadata.rights:
            self._write_simple(serializer, DCTags.RIGHTS, rights)
        for date in metadata.dates:
            if not date.value.strip():
                continue
            serializer.start_tag(NAMESPACE_DUBLIN_CORE, DCTags.DATE)
            if date.event:
                serializer.attribute(NAMESPACE_OPF, OPFAttributes.EVENT, date.event)
            self._text(serializer, date.value)
            serializer.end_tag(NAMESPACE_DUBLIN_CORE, DCTags.DATE)
        self._write_simple(serializer, DCTags.LANGUAGE, metadata.language)

        if book.cover_image is not None:
            self._write_meta(serializer, OPFValues.META_COVER, book.cover_image.id)
        self._write_meta(serializer, OPFValues.META_GENERATOR, GENERATOR)

        serializer.end_tag(NAMESPACE_OPF, OPFTags.METADATA)

    def _write_identifiers(
        self, identifiers: list[Identifier], serializer: IXmlSerializer
    ) -> None:
        book_id = Identifier.get_book_id_identifier(identifiers)
        if book_id is None:
            return
        ordered = [book_id] + [i for i in identifiers if i is not book_id]
        for identifier in ordered:
            serializer.start_tag(NAMESPACE_DUBLIN_CORE, DCTags.IDENTIFIER)
            if identifier is book_id:
                serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.ID, BOOK_ID_ID)
            if identifier.scheme:
                serializer.attribute(NAMESPACE_OPF, OPFAttributes.SCHEME, identifier.scheme)
            self._text(serializer, identifier.value)
            serializer.end_tag(NAMESPACE_DUBLIN_CORE, DCTags.IDENTIFIER)

    def _write_author(self, serializer: IXmlSerializer, tag: str, author: Author) -> None:
        if not author.display_name:
            return
        serializer.start_tag(NAMESPACE_DUBLIN_CORE, tag)
        if author.role:
            serializer.attribute(NAMESPACE_OPF, OPFAttributes.ROLE, author.role)
        serializer.attribute(NAMESPACE_OPF, OPFAttributes.FILE_AS, author.file_as)
        self._text(serializer, author.display_name)
        serializer.end_tag(NAMESPACE_DUBLIN_CORE, tag)

    def _write_simple(self, serializer: IXmlSerializer, tag: str, value: str) -> None:
        if not value or not value.strip():
            return
        serializer.start_tag(NAMESPACE_DUBLIN_CORE, tag)
        self._text(serializer, value)
        serializer.end_tag(NAMESPACE_DUBLIN_CORE, tag)

    @staticmethod
    def _write_meta(serializer: IXmlSerializer, name: str, content: str) -> None:
        serializer.start_tag(NAMESPACE_OPF, OPFTags.META)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.NAME, name)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.CONTENT, content)
        serializer.end_tag(NAMESPACE_OPF, OPFTags.META)

    @staticmethod
    def _text(serializer: IXmlSerializer, value: str) -> None:
        serializer.text(value)
