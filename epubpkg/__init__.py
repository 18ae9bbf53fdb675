"""EPUB package document writer.

Assembles the OPF package document (metadata, manifest, spine, guide)
of an EPUB container from an in-memory book model.
"""

from importlib.metadata import version as get_version

# Get version from package metadata
try:
    __version__ = get_version("epub-package-writer")
except Exception:
    __version__ = "0.0.0"  # Fallback version

from .config import WriterConfig
from .infrastructure import PackageWriteError
from .services import PackageDocumentResult, PackageDocumentWriter
from .writer import package_document_bytes, write_package_document

__all__ = [
    "__version__",
    "WriterConfig",
    "PackageWriteError",
    "PackageDocumentResult",
    "PackageDocumentWriter",
    "package_document_bytes",
    "write_package_document",
]
