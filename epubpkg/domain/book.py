"""The book aggregate."""

from dataclasses import dataclass, field
from typing import Optional

from .guide import Guide
from .metadata import Metadata
from .resource import Resource, Resources
from .spine import Spine, SpineReference


@dataclass
class Book:
    """A book: its resources, reading order, guide and metadata.

    The cover page is the resource shown as the book's cover in reading
    order. It is independent of ``guide.cover_page``, which drives the
    guide's cover reference.
    """

    resources: Resources = field(default_factory=Resources)
    spine: Spine = field(default_factory=Spine)
    guide: Guide = field(default_factory=Guide)
    metadata: Metadata = field(default_factory=Metadata)
    cover_page: Optional[Resource] = None
    cover_image: Optional[Resource] = None

    def add_resource(self, resource: Resource) -> Resource:
        return self.resources.add(resource)

    def add_section(self, resource: Resource, linear: bool = True) -> SpineReference:
        """Add a resource to the book and append it to the reading order."""
        self.resources.add(resource)
        return self.spine.add_resource(resource, linear)
