"""Service layer for package document writing.

Provides the collaborator interfaces (protocols) and the writer
implementations for the package document and its metadata block.
"""

from .interfaces import IMetadataWriter, IXmlSerializer
from .metadata_writer import DublinCoreMetadataWriter
from .package_document_writer import PackageDocumentResult, PackageDocumentWriter

__all__ = [
    "IMetadataWriter",
    "IXmlSerializer",
    "DublinCoreMetadataWriter",
    "PackageDocumentResult",
    "PackageDocumentWriter",
]
