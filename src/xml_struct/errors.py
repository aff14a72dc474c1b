"""Error kinds raised by the XML serializer."""

from __future__ import annotations


class XMLSerializationError(Exception):
    """Base class for every failure of a serialization call."""

    default_message = "XML serialization failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class UnsupportedEncoding(XMLSerializationError):
    default_message = "Data is not UTF8 encoded. (Other encodings are not yet supported)"


class ObjectIsNotSerializable(XMLSerializationError):
    default_message = "Object is not serializable"


class RootNodeRetrievalFailure(XMLSerializationError):
    default_message = "Root node retrieval failure"
