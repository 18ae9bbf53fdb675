"""Namespaces and vocabulary of the OPF 2.0 package document."""

CHARACTER_ENCODING = "UTF-8"

NAMESPACE_OPF = "http://www.idpf.org/2007/opf"
NAMESPACE_DUBLIN_CORE = "http://purl.org/dc/elements/1.1/"

# Package namespace is the default namespace of the document
PREFIX_OPF = ""
PREFIX_DUBLIN_CORE = "dc"
# Bound on the metadata element for opf:role, opf:scheme, ...
PREFIX_OPF_ATTRIBUTES = "opf"

EMPTY_NAMESPACE = ""

PACKAGE_VERSION = "2.0"

# Id of the dc:identifier element referenced by unique-identifier
BOOK_ID_ID = "BookId"


class OPFTags:
    """Element names in the OPF namespace."""

    PACKAGE = "package"
    METADATA = "metadata"
    META = "meta"
    MANIFEST = "manifest"
    ITEM = "item"
    SPINE = "spine"
    ITEMREF = "itemref"
    GUIDE = "guide"
    REFERENCE = "reference"


class DCTags:
    """Element names in the Dublin Core namespace."""

    TITLE = "title"
    CREATOR = "creator"
    CONTRIBUTOR = "contributor"
    SUBJECT = "subject"
    DESCRIPTION = "description"
    PUBLISHER = "publisher"
    TYPE = "type"
    DATE = "date"
    IDENTIFIER = "identifier"
    LANGUAGE = "language"
    RIGHTS = "rights"


class OPFAttributes:
    """Attribute names used on OPF elements."""

    VERSION = "version"
    UNIQUE_IDENTIFIER = "unique-identifier"
    ID = "id"
    HREF = "href"
    MEDIA_TYPE = "media-type"
    TOC = "toc"
    IDREF = "idref"
    LINEAR = "linear"
    TYPE = "type"
    TITLE = "title"
    NAME = "name"
    CONTENT = "content"
    SCHEME = "scheme"
    ROLE = "role"
    EVENT = "event"
    FILE_AS = "file-as"


class OPFValues:
    """Attribute values with a fixed meaning."""

    NO = "no"
    META_COVER = "cover"
    META_GENERATOR = "generator"
