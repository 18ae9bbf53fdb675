"""Infrastructure layer: concrete output sinks."""

from .streams import NoCloseStream
from .xml_serializer import LxmlSerializer, PackageWriteError

__all__ = [
    "NoCloseStream",
    "LxmlSerializer",
    "PackageWriteError",
]
