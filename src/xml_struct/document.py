"""Driver: bytes → parsed document → serialized VMapping."""

from __future__ import annotations

import logging

from lxml import etree

from .errors import ObjectIsNotSerializable, RootNodeRetrievalFailure, UnsupportedEncoding
from .nodes import LxmlNode
from .options import SerializerOptions
from .serializer import serialize_node
from .values import VMapping, to_python

logger = logging.getLogger(__name__)


def _make_parser() -> etree.XMLParser:
    # remove_blank_text drops formatting-only text between elements
    return etree.XMLParser(remove_blank_text=True, encoding="utf-8", no_network=True)


class ParsedDocument:
    """Owns a parsed lxml tree for the duration of a ``with`` block.

    Usage::

        with ParsedDocument(data) as doc:
            root = doc.root()
    """

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._root: etree._Element | None = None
        self._open = False

    def __enter__(self) -> ParsedDocument:
        parser = _make_parser()
        try:
            root = etree.fromstring(self._data, parser)
        except (etree.XMLSyntaxError, ValueError) as exc:
            raise ObjectIsNotSerializable(f"Object is not serializable: {exc}") from exc

        errors = parser.error_log.filter_from_errors()
        if errors:
            raise ObjectIsNotSerializable(f"Object is not serializable: {errors[0].message}")
        for entry in parser.error_log.filter_from_warnings():
            logger.warning("XML parser warning at line %s: %s", entry.line, entry.message)

        self._root = root
        self._open = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def release(self) -> None:
        if self._open:
            logger.debug("Releasing parsed document")
        self._root = None
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def root(self) -> LxmlNode | None:
        if not self._open:
            raise RuntimeError("document has been released")
        if self._root is None:
            return None
        return LxmlNode(self._root)


def _as_bytes(data) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes-like input, got {type(data).__name__}")


def to_structure(
    data: bytes,
    coerce_values: bool | None = None,
    options: SerializerOptions | None = None,
) -> VMapping:
    """Serialize UTF-8 XML *data* into ``VMapping({root_name: value})``.

    *coerce_values*, when given, overrides ``options.coerce_values``.

    Raises:
        UnsupportedEncoding: *data* is not valid UTF-8.
        ObjectIsNotSerializable: the parser could not build a tree.
        RootNodeRetrievalFailure: no usable, named root element.
    """
    data = _as_bytes(data)
    if options is None:
        options = SerializerOptions()
    if coerce_values is not None:
        options = options.with_coercion(coerce_values)

    try:
        data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnsupportedEncoding() from exc

    logger.debug("Serializing %d bytes (coerce_values=%s)", len(data), options.coerce_values)

    with ParsedDocument(data) as doc:
        root = doc.root()
        if root is None:
            raise RootNodeRetrievalFailure()
        root_name = root.name()
        if root_name is None:
            raise RootNodeRetrievalFailure()
        serialized = serialize_node(root, options)
        if serialized is None:
            raise RootNodeRetrievalFailure()

    logger.debug("Serialized root element %r", root_name)
    return VMapping({root_name: serialized})


def to_python_structure(
    data: bytes,
    coerce_values: bool | None = None,
    options: SerializerOptions | None = None,
) -> dict:
    """Same as :func:`to_structure`, returning plain dicts / lists / scalars."""
    return to_python(to_structure(data, coerce_values, options))
