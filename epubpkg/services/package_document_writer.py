"""Package document writer implementation.

Writes the OPF package document as defined by namespace
http://www.idpf.org/2007/opf: the root package element, the metadata
block, then manifest, spine and guide, in that order.
"""

import logging
from typing import Callable, Optional

from ..config import WriterConfig
from ..constants import (
    BOOK_ID_ID,
    EMPTY_NAMESPACE,
    NAMESPACE_DUBLIN_CORE,
    NAMESPACE_OPF,
    PACKAGE_VERSION,
    PREFIX_DUBLIN_CORE,
    PREFIX_OPF,
    OPFAttributes,
    OPFTags,
    OPFValues,
)
from ..domain import Book, Guide, GuideReference, Resource, Spine
from ..domain import media_types
from .interfaces import IMetadataWriter, IXmlSerializer
from .metadata_writer import DublinCoreMetadataWriter

logger = logging.getLogger(__name__)

Diagnostics = Callable[[str], None]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class PackageDocumentResult:
    """Summary of a completed package document write."""

    def __init__(self) -> None:
        self.items_written = 0
        self.itemrefs_written = 0
        self.references_written = 0
        self.skipped: list[str] = []

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "items_written": self.items_written,
            "itemrefs_written": self.itemrefs_written,
            "references_written": self.references_written,
            "skipped": list(self.skipped),
        }


class PackageDocumentWriter:
    """Service for writing a book's OPF package document.

    Uses constructor injection for the writer configuration, the
    metadata collaborator and the diagnostics callback. The writer keeps
    no state between documents; each write() builds its own result.
    """

    def __init__(
        self,
        config: WriterConfig | None = None,
        metadata_writer: IMetadataWriter | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        """Initialize the writer.

        Args:
            config: Supplies the fixed NCX manifest entry and encoding.
            metadata_writer: Writes the metadata block.
            diagnostics: Receives one message per resource left out of
                the manifest. Defaults to logging at error level.
        """
        self._config = config or WriterConfig()
        self._metadata_writer = metadata_writer or DublinCoreMetadataWriter()
        self._diagnostics = diagnostics or logger.error

    def write(self, book: Book, serializer: IXmlSerializer) -> PackageDocumentResult:
        """Write the complete package document.

        Errors raised by the serializer propagate unchanged; output
        written before the error is incomplete and must be discarded.
        The serializer is flushed, never closed.

        Args:
            book: The book to write. It is not modified.
            serializer: The sink to write to.

        Returns:
            Counts of written entries and the skipped-resource messages.
        """
        result = PackageDocumentResult()
        logger.debug("Writing package document (%d resources)", len(book.resources))

        serializer.start_document(self._config.encoding)
        serializer.set_prefix(PREFIX_OPF, NAMESPACE_OPF)
        serializer.set_prefix(PREFIX_DUBLIN_CORE, NAMESPACE_DUBLIN_CORE)
        serializer.start_tag(NAMESPACE_OPF, OPFTags.PACKAGE)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.VERSION, PACKAGE_VERSION)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.UNIQUE_IDENTIFIER, BOOK_ID_ID)

        self._metadata_writer.write_metadata(book, serializer)

        self.write_manifest(book, serializer, result)
        self.write_spine(book, serializer, result)
        self.write_guide(book, serializer, result)

        serializer.end_tag(NAMESPACE_OPF, OPFTags.PACKAGE)
        serializer.end_document()
        serializer.flush()

        logger.debug(
            "Package document written: %d items, %d itemrefs, %d references, %d skipped",
            result.items_written,
            result.itemrefs_written,
            result.references_written,
            len(result.skipped),
        )
        return result

    def write_manifest(
        self,
        book: Book,
        serializer: IXmlSerializer,
        result: PackageDocumentResult | None = None,
    ) -> None:
        """Write the manifest: the NCX entry, then all resources sorted by id.

        Resources with a blank id or href, or without a media type, are
        reported and left out; the rest of the manifest is still written.
        """
        result = result or PackageDocumentResult()
        serializer.start_tag(NAMESPACE_OPF, OPFTags.MANIFEST)

        self._write_item_element(
            serializer,
            self._config.ncx_id,
            self._config.ncx_href,
            self._config.ncx_media_type,
        )
        result.items_written += 1

        for resource in self._get_all_resources_sorted_by_id(book):
            if self._write_item(book, resource, serializer, result):
                result.items_written += 1

        serializer.end_tag(NAMESPACE_OPF, OPFTags.MANIFEST)

    def write_spine(
        self,
        book: Book,
        serializer: IXmlSerializer,
        result: PackageDocumentResult | None = None,
    ) -> None:
        """Write the spine.

        A cover page missing from the reading order is written first as
        a non-linear itemref.
        """
        result = result or PackageDocumentResult()
        spine = book.spine
        serializer.start_tag(NAMESPACE_OPF, OPFTags.SPINE)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.TOC, spine.toc_resource.id)

        cover_page = book.cover_page
        if cover_page is not None and spine.find_first_resource_by_id(cover_page.id) < 0:
            self._write_itemref(serializer, cover_page.id, linear=False)
            result.itemrefs_written += 1

        self._write_spine_items(spine, serializer, result)
        serializer.end_tag(NAMESPACE_OPF, OPFTags.SPINE)

    def write_guide(
        self,
        book: Book,
        serializer: IXmlSerializer,
        result: PackageDocumentResult | None = None,
    ) -> None:
        """Write the guide, adding a cover reference when none is declared."""
        result = result or PackageDocumentResult()
        guide = book.guide
        serializer.start_tag(NAMESPACE_OPF, OPFTags.GUIDE)

        self._ensure_cover_page_guide_reference_written(guide, serializer, result)
        for reference in guide.references:
            if self._write_guide_reference(reference, serializer):
                result.references_written += 1

        serializer.end_tag(NAMESPACE_OPF, OPFTags.GUIDE)

    @staticmethod
    def _get_all_resources_sorted_by_id(book: Book) -> list[Optional[Resource]]:
        # sorted() is stable: equal ids keep collection order
        return sorted(
            book.resources.get_all(),
            key=lambda resource: (resource.id or "").lower() if resource is not None else "",
        )

    def _write_item(
        self,
        book: Book,
        resource: Optional[Resource],
        serializer: IXmlSerializer,
        result: PackageDocumentResult,
    ) -> bool:
        """Write a resource as a manifest item.

        Returns:
            True if an item element was written.
        """
        if resource is None or (
            resource.media_type == media_types.NCX and book.spine.toc_resource is not None
        ):
            return False

        message = None
        if _is_blank(resource.id):
            message = (
                f"resource id must not be empty "
                f"(href: {resource.href}, media type: {resource.media_type})"
            )
        elif _is_blank(resource.href):
            message = (
                f"resource href must not be empty "
                f"(id: {resource.id}, media type: {resource.media_type})"
            )
        elif resource.media_type is None:
            message = (
                f"resource media type must not be empty "
                f"(id: {resource.id}, href: {resource.href})"
            )
        if message:
            result.skipped.append(message)
            self._diagnostics(message)
            return False

        self._write_item_element(
            serializer, resource.id, resource.href, resource.media_type.name
        )
        return True

    @staticmethod
    def _write_item_element(
        serializer: IXmlSerializer, id: str, href: str, media_type: str
    ) -> None:
        serializer.start_tag(NAMESPACE_OPF, OPFTags.ITEM)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.ID, id)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.HREF, href)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.MEDIA_TYPE, media_type)
        serializer.end_tag(NAMESPACE_OPF, OPFTags.ITEM)

    def _write_spine_items(
        self, spine: Spine, serializer: IXmlSerializer, result: PackageDocumentResult
    ) -> None:
        for reference in spine.references:
            self._write_itemref(serializer, reference.resource_id, reference.linear)
            result.itemrefs_written += 1

    @staticmethod
    def _write_itemref(serializer: IXmlSerializer, idref: str, linear: bool) -> None:
        serializer.start_tag(NAMESPACE_OPF, OPFTags.ITEMREF)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.IDREF, idref)
        # linear="yes" is the default and is never written
        if not linear:
            serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.LINEAR, OPFValues.NO)
        serializer.end_tag(NAMESPACE_OPF, OPFTags.ITEMREF)

    def _ensure_cover_page_guide_reference_written(
        self, guide: Guide, serializer: IXmlSerializer, result: PackageDocumentResult
    ) -> None:
        if guide.get_references_by_type(GuideReference.COVER):
            return
        if guide.cover_page is not None:
            reference = GuideReference(
                guide.cover_page, GuideReference.COVER, GuideReference.COVER
            )
            if self._write_guide_reference(reference, serializer):
                result.references_written += 1

    @staticmethod
    def _write_guide_reference(
        reference: Optional[GuideReference], serializer: IXmlSerializer
    ) -> bool:
        if reference is None:
            return False
        serializer.start_tag(NAMESPACE_OPF, OPFTags.REFERENCE)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.TYPE, reference.type)
        serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.HREF, reference.complete_href)
        if not _is_blank(reference.title):
            serializer.attribute(EMPTY_NAMESPACE, OPFAttributes.TITLE, reference.title)
        serializer.end_tag(NAMESPACE_OPF, OPFTags.REFERENCE)
        return True
