"""
Configuration settings for the package document writer
"""

import os

from .constants import CHARACTER_ENCODING
from .domain import media_types


class WriterConfig:
    """Configuration class for package document writing."""

    # Fixed manifest entry for the NCX navigation document
    DEFAULT_NCX_ID = "ncx"
    DEFAULT_NCX_HREF = "toc.ncx"
    DEFAULT_NCX_MEDIA_TYPE = media_types.NCX.name

    # Serialization settings
    DEFAULT_ENCODING = CHARACTER_ENCODING
    PRETTY_PRINT = True

    def __init__(
        self,
        ncx_id: str = DEFAULT_NCX_ID,
        ncx_href: str = DEFAULT_NCX_HREF,
        ncx_media_type: str = DEFAULT_NCX_MEDIA_TYPE,
        encoding: str = DEFAULT_ENCODING,
        pretty_print: bool = PRETTY_PRINT,
    ) -> None:
        self.ncx_id = ncx_id
        self.ncx_href = ncx_href
        self.ncx_media_type = ncx_media_type
        self.encoding = encoding
        self.pretty_print = pretty_print

    @classmethod
    def from_env(cls) -> "WriterConfig":
        """Build a configuration, checking environment variables."""
        return cls(
            ncx_id=os.environ.get("EPUB_NCX_ID") or cls.DEFAULT_NCX_ID,
            ncx_href=os.environ.get("EPUB_NCX_HREF") or cls.DEFAULT_NCX_HREF,
        )
