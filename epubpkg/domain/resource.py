"""Resources: the files that make up a book."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .media_types import MediaType, determine_media_type


@dataclass
class Resource:
    """A single file of the book, addressed by id and relative href."""

    id: str
    href: str
    media_type: Optional[MediaType]
    title: str = ""
    data: bytes = field(default=b"", repr=False)

    @classmethod
    def from_href(cls, href: str, data: bytes = b"", id: str | None = None) -> "Resource":
        """Create a resource whose media type is derived from its href.

        Args:
            href: Path of the resource relative to the package document.
            data: Raw content of the resource.
            id: Explicit id; defaults to the href.

        Returns:
            A new Resource.
        """
        return cls(
            id=href if id is None else id,
            href=href,
            media_type=determine_media_type(href),
            data=data,
        )


class Resources:
    """Collection of resources keyed by id.

    Iteration order follows insertion but carries no meaning; the
    manifest re-derives its order by sorting on id.
    """

    def __init__(self, resources: dict[str, Optional[Resource]] | None = None) -> None:
        self._resources: dict[str, Optional[Resource]] = dict(resources or {})

    def add(self, resource: Resource) -> Resource:
        """Add a resource, replacing any resource with the same id."""
        self._resources[resource.id] = resource
        return resource

    def remove(self, id: str) -> Optional[Resource]:
        """Remove and return the resource with the given id, if present."""
        return self._resources.pop(id, None)

    def contains_id(self, id: str) -> bool:
        return id in self._resources

    def get_by_id(self, id: str) -> Optional[Resource]:
        return self._resources.get(id)

    def get_by_href(self, href: str) -> Optional[Resource]:
        """Find a resource by href, ignoring any fragment."""
        href = href.split("#", 1)[0]
        for resource in self._resources.values():
            if resource is not None and resource.href == href:
                return resource
        return None

    def get_all(self) -> list[Optional[Resource]]:
        return list(self._resources.values())

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[Optional[Resource]]:
        return iter(self.get_all())
