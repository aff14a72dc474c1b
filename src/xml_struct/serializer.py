"""Tree serializer: XMLNode → Value.

Every function takes the active SerializerOptions explicitly; nothing here
reads module-level settings.
"""

from __future__ import annotations

import logging

from .coercion import coerce
from .nodes import XMLNode
from .options import SerializerOptions
from .values import Value, VMapping, VSequence, VString

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------

def extract_attributes(node: XMLNode, options: SerializerOptions) -> dict[str, Value] | None:
    """Return ``{name: coerced value}`` for an element, ``None`` otherwise.

    Names are not prefixed yet. A repeated name overwrites the earlier one.
    """
    if not node.is_element():
        return None

    attributes: dict[str, Value] = {}
    for name, raw in node.attributes():
        attributes[name] = coerce(raw, options.coerce_values)
    return attributes


# ---------------------------------------------------------------------------
# Children
# ---------------------------------------------------------------------------

def aggregate_children(node: XMLNode, options: SerializerOptions) -> dict[str, Value] | None:
    """Serialize element children and group them by tag name.

    - non-element children and unnamed elements are skipped
    - a name seen once maps to its value, a name seen twice or more maps to
      a VSequence in document order
    - ``None`` when nothing was collected
    """
    groups: dict[str, list[Value]] = {}

    for child in node.children():
        if not child.is_element():
            continue
        name = child.name()
        if name is None:
            logger.debug("Skipping unnamed element child")
            continue
        serialized = serialize_node(child, options)
        if serialized is None:
            continue
        groups.setdefault(name, []).append(serialized)

    if not groups:
        return None

    collapsed: dict[str, Value] = {}
    for name, members in groups.items():
        if len(members) == 1:
            collapsed[name] = members[0]
        else:
            collapsed[name] = VSequence(members)
    return collapsed


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

def node_value(node: XMLNode, options: SerializerOptions) -> Value | None:
    """The node's text content, coerced; ``None`` when it has no text."""
    text = node.text()
    if text is None:
        return None
    return coerce(text, options.coerce_values)


def serialize_node(node: XMLNode, options: SerializerOptions) -> Value | None:
    """Serialize one node.

    Returns ``None`` for non-element nodes. An element with neither
    attributes nor element children collapses to its text value; otherwise
    it becomes a VMapping of prefixed attributes, child groups and (when
    non-empty) its text under ``options.value_key``.
    """
    attributes = extract_attributes(node, options)
    if attributes is None:
        return None

    entries: dict[str, Value] = {}
    for name, value in attributes.items():
        entries[options.attribute_key(name)] = value

    children = aggregate_children(node, options)
    if children is not None:
        entries.update(children)

    value = node_value(node, options)
    if value is not None:
        if not entries:
            return value
        if not (isinstance(value, VString) and value.value == ""):
            entries[options.value_key] = value

    return VMapping(entries)
