"""Tests for writer configuration."""

from epubpkg import WriterConfig


class TestWriterConfig:
    """Tests for WriterConfig defaults and environment overrides."""

    def test_defaults(self):
        config = WriterConfig()

        assert config.ncx_id == "ncx"
        assert config.ncx_href == "toc.ncx"
        assert config.ncx_media_type == "application/x-dtbncx+xml"
        assert config.encoding == "UTF-8"
        assert config.pretty_print is True

    def test_from_env(self, monkeypatch):
        """Test environment variables override the NCX entry."""
        monkeypatch.setenv("EPUB_NCX_ID", "nav")
        monkeypatch.setenv("EPUB_NCX_HREF", "nav/toc.ncx")

        config = WriterConfig.from_env()

        assert config.ncx_id == "nav"
        assert config.ncx_href == "nav/toc.ncx"

    def test_from_env_without_variables(self, monkeypatch):
        monkeypatch.delenv("EPUB_NCX_ID", raising=False)
        monkeypatch.delenv("EPUB_NCX_HREF", raising=False)

        config = WriterConfig.from_env()

        assert config.ncx_id == WriterConfig.DEFAULT_NCX_ID
        assert config.ncx_href == WriterConfig.DEFAULT_NCX_HREF
