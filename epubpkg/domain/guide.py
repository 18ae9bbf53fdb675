"""The guide: typed shortcuts to structural parts of the book."""

from dataclasses import dataclass, field
from typing import Optional

from .resource import Resource


@dataclass
class GuideReference:
    """A typed reference to a resource, optionally to a fragment in it.

    Types come from the OPF 2.0 guide vocabulary (cover, toc, text, ...).
    """

    COVER = "cover"
    TITLE_PAGE = "title-page"
    TOC = "toc"
    INDEX = "index"
    GLOSSARY = "glossary"
    ACKNOWLEDGEMENTS = "acknowledgements"
    BIBLIOGRAPHY = "bibliography"
    COLOPHON = "colophon"
    COPYRIGHT_PAGE = "copyright-page"
    DEDICATION = "dedication"
    EPIGRAPH = "epigraph"
    FOREWORD = "foreword"
    LOI = "loi"  # list of illustrations
    LOT = "lot"  # list of tables
    NOTES = "notes"
    PREFACE = "preface"
    TEXT = "text"

    resource: Resource
    type: str
    title: str = ""
    fragment_id: str = ""

    @property
    def href(self) -> str:
        return self.resource.href

    @property
    def complete_href(self) -> str:
        """Href of the resource including the fragment, if any."""
        if self.fragment_id:
            return f"{self.href}#{self.fragment_id}"
        return self.href


@dataclass
class Guide:
    """Guide references plus an optional designated cover page."""

    references: list[Optional[GuideReference]] = field(default_factory=list)
    cover_page: Optional[Resource] = None

    def add_reference(self, reference: GuideReference) -> GuideReference:
        self.references.append(reference)
        return reference

    def get_references_by_type(self, type: str) -> list[GuideReference]:
        """Get all references of the given guide type."""
        return [
            reference
            for reference in self.references
            if reference is not None and reference.type == type
        ]
