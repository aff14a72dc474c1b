"""Node access: the read-only view of a parsed tree the serializer works on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol

from lxml import etree


class XMLNode(Protocol):
    """Read-only view of one node of a parsed document."""

    def name(self) -> str | None:
        """Local tag name, or ``None`` for unnamed / non-element nodes."""
        ...

    def is_element(self) -> bool:
        ...

    def children(self) -> Iterator[XMLNode]:
        """Direct child nodes in document order."""
        ...

    def attributes(self) -> list[tuple[str, str]]:
        """``(name, raw value)`` pairs in document order."""
        ...

        """Text of the node and its descendants, untrimmed; ``None`` if none."""
        """Text content of the node and its descendants, untrimmed; ``None`` when there is none."""
        ...


def local_name(tag) -> str | None:
    """Strip a ``{namespace}`` part from an lxml tag or attribute name."""
    if not isinstance(tag, str):
        # comments, processing instructions and entities use factory callables
        return None
    if tag.startswith("{"):
        return etree.QName(tag).localname
    return tag or None


@dataclass(frozen=True)
class LxmlNode:
    """XMLNode backed by an ``lxml.etree`` element."""

    element: etree._Element

    def name(self) -> str | None:
        return local_name(self.element.tag)

    def is_element(self) -> bool:
        return isinstance(self.element.tag, str)

    def children(self) -> Iterator[LxmlNode]:
        for child in self.element:
            yield LxmlNode(child)

    def attributes(self) -> list[tuple[str, str]]:
        if not self.is_element():
            return []
        pairs: list[tuple[str, str]] = []
        for key, value in self.element.attrib.items():
            name = local_name(key)
            if name is not None:
                pairs.append((name, value))
        return pairs

    def text(self) -> str | None:
        """Concatenate every text node below the element, like libxml2's content.

        Comments and processing instructions contribute nothing. ``None``
        when the subtree holds no text node at all.
        """
        if not self.is_element():
            return self.element.text
        parts = self.element.xpath(".//text()")
        if not parts:
            return None
        return "".join(parts)
