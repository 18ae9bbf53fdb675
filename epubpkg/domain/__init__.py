"""Domain layer for the book model."""

from .book import Book
from .guide import Guide, GuideReference
from .media_types import MediaType
from .metadata import Author, BookDate, Identifier, Metadata
from .resource import Resource, Resources
from .spine import Spine, SpineReference

__all__ = [
    "Book",
    "Guide",
    "GuideReference",
    "MediaType",
    "Author",
    "BookDate",
    "Identifier",
    "Metadata",
    "Resource",
    "Resources",
    "Spine",
    "SpineReference",
]
