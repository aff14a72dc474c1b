"""xml-struct: convert parsed XML trees into generic map / list / scalar data."""

from .coercion import coerce
from .document import ParsedDocument, to_python_structure, to_structure
from .errors import (
    ObjectIsNotSerializable,
    RootNodeRetrievalFailure,
    UnsupportedEncoding,
    XMLSerializationError,
)
from .nodes import LxmlNode, XMLNode
from .options import SerializerOptions
from .serializer import aggregate_children, extract_attributes, serialize_node
from .values import (
    Value,
    VBool,
    VFloat,
    VInteger,
    VMapping,
    VSequence,
    VString,
    to_python,
)

__all__ = [
    "to_structure",
    "to_python_structure",
    "ParsedDocument",
    "SerializerOptions",
    "XMLNode",
    "LxmlNode",
    "coerce",
    "extract_attributes",
    "aggregate_children",
    "serialize_node",
    "Value",
    "VBool",
    "VFloat",
    "VInteger",
    "VMapping",
    "VSequence",
    "VString",
    "to_python",
    "XMLSerializationError",
    "UnsupportedEncoding",
    "ObjectIsNotSerializable",
    "RootNodeRetrievalFailure",
]
