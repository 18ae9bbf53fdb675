"""Tests for the book model."""

import pytest

from epubpkg.domain import (
    Author,
    Book,
    Guide,
    GuideReference,
    Identifier,
    Resource,
    Resources,
    Spine,
)
from epubpkg.domain import media_types


@pytest.fixture
def chapter() -> Resource:
    return Resource("chapter1", "text/chapter1.xhtml", media_types.XHTML)


class TestMediaTypes:
    """Tests for media type lookup."""

    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("chapter.html", media_types.XHTML),
            ("chapter.XHTML", media_types.XHTML),
            ("cover.jpeg", media_types.JPG),
            ("toc.ncx", media_types.NCX),
            ("style.css", media_types.CSS),
            ("font.otf", media_types.OPENTYPE),
            ("notes.txt", None),
        ],
    )
    def test_determine_media_type(self, filename, expected):
        assert media_types.determine_media_type(filename) == expected

    def test_get_by_name(self):
        assert media_types.get_media_type_by_name("image/png") is media_types.PNG
        assert media_types.get_media_type_by_name("text/plain") is None

    def test_bitmap_images(self):
        assert media_types.is_bitmap_image(media_types.GIF)
        assert not media_types.is_bitmap_image(media_types.SVG)
        assert not media_types.is_bitmap_image(None)

    def test_str_is_name(self):
        assert str(media_types.NCX) == "application/x-dtbncx+xml"


class TestResources:
    """Tests for the resource collection."""

    def test_from_href(self):
        """Test the media type and id are derived from the href."""
        resource = Resource.from_href("images/cover.png", b"\x89PNG")

        assert resource.id == "images/cover.png"
        assert resource.media_type is media_types.PNG
        assert resource.data == b"\x89PNG"

    def test_add_and_lookup(self, chapter):
        resources = Resources()
        resources.add(chapter)

        assert resources.contains_id("chapter1")
        assert resources.get_by_id("chapter1") is chapter
        assert resources.get_by_href("text/chapter1.xhtml#part2") is chapter
        assert resources.get_by_href("missing.xhtml") is None
        assert len(resources) == 1

    def test_add_replaces_same_id(self, chapter):
        resources = Resources()
        resources.add(chapter)
        replacement = Resource("chapter1", "other.xhtml", media_types.XHTML)
        resources.add(replacement)

        assert resources.get_all() == [replacement]

    def test_remove(self, chapter):
        resources = Resources({"chapter1": chapter})

        assert resources.remove("chapter1") is chapter
        assert resources.remove("chapter1") is None
        assert list(resources) == []


class TestSpine:
    """Tests for spine lookup."""

    def test_find_first_resource_by_id(self, chapter):
        spine = Spine()
        spine.add_resource(Resource("intro", "intro.xhtml", media_types.XHTML))
        spine.add_resource(chapter)
        spine.add_resource(chapter, linear=False)

        assert spine.find_first_resource_by_id("chapter1") == 1
        assert spine.find_first_resource_by_id("missing") == -1
        assert spine.size == 3

    def test_get_resource(self, chapter):
        spine = Spine()
        spine.add_resource(chapter)

        assert spine.get_resource(0) is chapter
        assert spine.get_resource(5) is None

    def test_default_linear(self, chapter):
        reference = Spine().add_resource(chapter)

        assert reference.linear is True
        assert reference.resource_id == "chapter1"

    def test_is_empty(self):
        assert Spine().is_empty()


class TestGuide:
    """Tests for guide references."""

    def test_complete_href(self, chapter):
        """Test the fragment is appended to the href when set."""
        plain = GuideReference(chapter, GuideReference.TEXT)
        with_fragment = GuideReference(chapter, GuideReference.TOC, "Contents", "toc")

        assert plain.complete_href == "text/chapter1.xhtml"
        assert with_fragment.complete_href == "text/chapter1.xhtml#toc"

    def test_references_by_type(self, chapter):
        guide = Guide()
        cover = guide.add_reference(GuideReference(chapter, GuideReference.COVER, "Cover"))
        guide.add_reference(GuideReference(chapter, GuideReference.TEXT, "Start"))
        guide.references.append(None)

        assert guide.get_references_by_type("cover") == [cover]
        assert guide.get_references_by_type("index") == []


class TestBook:
    """Tests for the book aggregate."""

    def test_add_section(self, chapter):
        """Test sections are added to resources and reading order."""
        book = Book()
        book.add_section(chapter, linear=False)

        assert book.resources.get_by_id("chapter1") is chapter
        assert book.spine.references[0].linear is False

    def test_cover_pages_independent(self, chapter):
        """Test the book and guide cover pages are separate fields."""
        book = Book(cover_page=chapter)

        assert book.guide.cover_page is None


class TestMetadata:
    """Tests for metadata helpers."""

    def test_book_id_identifier_flagged(self):
        first = Identifier("isbn")
        flagged = Identifier("uuid", book_id=True)

        assert Identifier.get_book_id_identifier([first, flagged]) is flagged

    def test_book_id_identifier_falls_back_to_first(self):
        first = Identifier("isbn")

        assert Identifier.get_book_id_identifier([first, Identifier("uuid")]) is first
        assert Identifier.get_book_id_identifier([]) is None

    @pytest.mark.parametrize(
        "author, display_name, file_as",
        [
            (Author("Ada", "Lovelace"), "Ada Lovelace", "Lovelace, Ada"),
            (Author(last_name="Homer"), "Homer", "Homer"),
            (Author(first_name="Plato"), "Plato", "Plato"),
        ],
    )
    def test_author_names(self, author, display_name, file_as):
        assert author.display_name == display_name
        assert author.file_as == file_as
