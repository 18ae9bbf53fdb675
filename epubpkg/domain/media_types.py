"""Media types known to the EPUB 2 container format.

Each media type carries its canonical name and the file extensions
that map onto it, so a resource type can be derived from its href.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class MediaType:
    """A MIME media type with its associated file extensions."""

    name: str
    default_extension: str
    extensions: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.extensions:
            object.__setattr__(self, "extensions", (self.default_extension,))

    def __str__(self) -> str:
        return self.name


XHTML = MediaType("application/xhtml+xml", ".xhtml", (".htm", ".html", ".xhtml"))
EPUB = MediaType("application/epub+zip", ".epub")
NCX = MediaType("application/x-dtbncx+xml", ".ncx")
JAVASCRIPT = MediaType("text/javascript", ".js")
CSS = MediaType("text/css", ".css")

# images
JPG = MediaType("image/jpeg", ".jpg", (".jpg", ".jpeg"))
PNG = MediaType("image/png", ".png")
GIF = MediaType("image/gif", ".gif")
SVG = MediaType("image/svg+xml", ".svg")

# fonts
TTF = MediaType("application/x-truetype-font", ".ttf")
OPENTYPE = MediaType("application/vnd.ms-opentype", ".otf")
WOFF = MediaType("application/font-woff", ".woff")

# audio / video
MP3 = MediaType("audio/mpeg", ".mp3")
MP4 = MediaType("video/mp4", ".mp4")
OGG = MediaType("audio/ogg", ".ogg")

SMIL = MediaType("application/smil+xml", ".smil")
XPGT = MediaType("application/adobe-page-template+xml", ".xpgt")
PLS = MediaType("application/pls+xml", ".pls")

MEDIA_TYPES: tuple[MediaType, ...] = (
    XHTML,
    EPUB,
    NCX,
    JAVASCRIPT,
    CSS,
    JPG,
    PNG,
    GIF,
    SVG,
    TTF,
    OPENTYPE,
    WOFF,
    MP3,
    MP4,
    OGG,
    SMIL,
    XPGT,
    PLS,
)

_BY_NAME = {media_type.name: media_type for media_type in MEDIA_TYPES}


def is_bitmap_image(media_type: Optional[MediaType]) -> bool:
    """Check whether the media type is a raster image."""
    return media_type in (JPG, PNG, GIF)


def determine_media_type(filename: str) -> Optional[MediaType]:
    """Guess the media type of a file from its extension.

    Args:
        filename: File name or href, compared case-insensitively.

    Returns:
        The matching MediaType, or None when the extension is unknown.
    """
    lowered = filename.lower()
    for media_type in MEDIA_TYPES:
        for extension in media_type.extensions:
            if lowered.endswith(extension):
                return media_type
    return None


def get_media_type_by_name(name: str) -> Optional[MediaType]:
    """Look up a known media type by its canonical name."""
    return _BY_NAME.get(name)
