"""Domain enums for the contentful parser."""
from enum import Enum


class ResourceKind(str, Enum):
    """Kinds of decodable resources, keyed by their wire name."""
    ASSET = "Asset"
    ENTRY = "Entry"
    CONTENT_TYPE = "ContentType"
    SPACE = "Space"
    LOCALE = "Locale"


class FieldType(str, Enum):
    """Content type field types. NONE covers anything unrecognized."""
    ARRAY = "Array"
    ASSET = "Asset"
    BOOLEAN = "Boolean"
    DATE = "Date"
    ENTRY = "Entry"
    INTEGER = "Integer"
    LINK = "Link"
    LOCATION = "Location"
    NUMBER = "Number"
    OBJECT = "Object"
    RICH_TEXT = "RichText"
    SYMBOL = "Symbol"
    TEXT = "Text"
    NONE = "None"

    @classmethod
    def from_raw(cls, value) -> 'FieldType':
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


class ValueShape(str, Enum):
    """Shapes a value extraction can be asked for."""
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    ANY = "any"


class FieldValueKind(str, Enum):
    """Tag of a normalized entry field value."""
    SCALAR = "scalar"
    OBJECT = "object"
    ARRAY = "array"
    LINK = "link"
    LINK_COLLECTION = "link_collection"
    RESOURCE = "resource"
    RESOURCE_SEQUENCE = "resource_sequence"
