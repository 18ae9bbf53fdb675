"""The spine: reading order of the book."""

from dataclasses import dataclass, field
from typing import Optional

from .resource import Resource


@dataclass
class SpineReference:
    """A resource in reading order.

    Non-linear references are auxiliary content a reader may skip
    when paging through the book.
    """

    resource: Resource
    linear: bool = True

    @property
    def resource_id(self) -> str:
        return self.resource.id


@dataclass
class Spine:
    """Ordered spine references plus the NCX table-of-contents resource."""

    references: list[SpineReference] = field(default_factory=list)
    toc_resource: Optional[Resource] = None

    def add_resource(self, resource: Resource, linear: bool = True) -> SpineReference:
        """Append a resource to the reading order."""
        reference = SpineReference(resource, linear)
        self.references.append(reference)
        return reference

    def find_first_resource_by_id(self, resource_id: str) -> int:
        """Find the position of a resource in the spine.

        Args:
            resource_id: Id of the resource to look for.

        Returns:
            Index of the first reference to the resource, or -1.
        """
        for index, reference in enumerate(self.references):
            if reference.resource_id == resource_id:
                return index
        return -1

    def get_resource(self, index: int) -> Optional[Resource]:
        if 0 <= index < len(self.references):
            return self.references[index].resource
        return None

    @property
    def size(self) -> int:
        return len(self.references)

    def is_empty(self) -> bool:
        return not self.references
