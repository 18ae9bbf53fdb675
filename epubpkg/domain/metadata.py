"""Descriptive (Dublin Core) metadata of a book."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Author:
    """A creator or contributor with an optional MARC relator role."""

    first_name: str = ""
    last_name: str = ""
    role: str = "aut"

    @property
    def display_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def file_as(self) -> str:
        """Name in 'Last, First' form for sorting."""
        if self.first_name and self.last_name:
            return f"{self.last_name}, {self.first_name}"
        return self.last_name or self.first_name


@dataclass
class Identifier:
    """A book identifier such as an ISBN or UUID."""

    value: str
    scheme: str = ""
    book_id: bool = False

    @staticmethod
    def get_book_id_identifier(identifiers: list["Identifier"]) -> Optional["Identifier"]:
        """Pick the identifier referenced by the package unique-identifier.

        The first identifier flagged as book id wins, otherwise the
        first identifier in the list.
        """
        for identifier in identifiers:
            if identifier.book_id:
                return identifier
        return identifiers[0] if identifiers else None


@dataclass
class BookDate:
    """A date with an optional event (creation, publication, ...)."""

    value: str
    event: str = ""


@dataclass
class Metadata:
    """Dublin Core metadata fields of a book."""

    titles: list[str] = field(default_factory=list)
    authors: list[Author] = field(default_factory=list)
    contributors: list[Author] = field(default_factory=list)
    identifiers: list[Identifier] = field(default_factory=list)
    language: str = "en"
    publishers: list[str] = field(default_factory=list)
    descriptions: list[str] = field(default_factory=list)
    subjects: list[str] = field(default_factory=list)
    dates: list[BookDate] = field(default_factory=list)
    rights: list[str] = field(default_factory=list)
    types: list[str] = field(default_factory=list)

    @property
    def first_title(self) -> str:
        return self.titles[0] if self.titles else ""
