"""
Declarative XML -> dataclass decoding for JetBrains option files.

Schema classes are dataclasses; each field says where its value lives:
attr("frameTitle") for an attribute, child("map", XmlMap) for the first
matching sub-element, children("entry", Entry) for all of them. decode()
walks an ElementTree element against the schema. Missing attributes keep
the field default, missing children decode as an empty instance.
"""
import xml.etree.ElementTree as etree
from dataclasses import dataclass, field, fields
from typing import ClassVar

from .exceptions import MalformedRecordError

_ATTR = "xml_attr"
_CHILD = "xml_child"
_CHILDREN = "xml_children"


def attr(name: str, default: str = ""):
    return field(default=default, metadata={_ATTR: name})


def child(tag: str, cls):
    return field(default_factory=cls, metadata={_CHILD: tag, "type": cls})


def children(tag: str, cls):
    return field(default_factory=list, metadata={_CHILDREN: tag, "type": cls})


def decode(element: etree.Element, cls):
    """Build an instance of schema class cls from element."""
    kwargs = {}
    for f in fields(cls):
        meta = f.metadata
        if _ATTR in meta:
            kwargs[f.name] = element.get(meta[_ATTR], f.default)
        elif _CHILD in meta:
            sub = element.find(meta[_CHILD])
            kwargs[f.name] = decode(sub, meta["type"]) if sub is not None else meta["type"]()
        elif _CHILDREN in meta:
            kwargs[f.name] = [decode(sub, meta["type"]) for sub in element.findall(meta[_CHILDREN])]
    return cls(**kwargs)


def decode_document(data: bytes, cls, source="<bytes>"):
    """Parse XML bytes and decode the root element; root tag must be cls.TAG."""
    try:
        root = etree.fromstring(data)
    except etree.ParseError as e:
        raise MalformedRecordError(source, str(e)) from e
    if root.tag != cls.TAG:
        raise MalformedRecordError(source, f"expected <{cls.TAG}> root, got <{root.tag}>")
    return decode(root, cls)


# ---------------------------------------------------------------------------
# recentProjects.xml / recentSolutions.xml
# ---------------------------------------------------------------------------

@dataclass
class MetaOption:
    name: str = attr("name")
    value: str = attr("value")


class MetaOptions(list):
    """Named sub-options of RecentProjectMetaInfo."""

    def find(self, name: str) -> str:
        for option in self:
            if option.name == name:
                return option.value
        return ""


@dataclass
class RecentProjectMetaInfo:
    frame_title: str = attr("frameTitle")
    opened: str = attr("opened")
    workspace_id: str = attr("projectWorkspaceId")
    options: list = children("option", MetaOption)

    def __post_init__(self):
        self.options = MetaOptions(self.options)


@dataclass
class Value:
    meta: RecentProjectMetaInfo = child("RecentProjectMetaInfo", RecentProjectMetaInfo)


@dataclass
class Entry:
    key: str = attr("key")
    values: list = children("value", Value)


@dataclass
class XmlMap:
    entries: list = children("entry", Entry)


@dataclass
class Option:
    name: str = attr("name")
    value: str = attr("value")
    map: XmlMap = child("map", XmlMap)


@dataclass
class Component:
    name: str = attr("name")
    options: list = children("option", Option)

    def option(self, name: str) -> Option | None:
        for option in self.options:
            if option.name == name:
                return option
        return None


@dataclass
class Application:
    TAG: ClassVar[str] = "application"

    component: Component = child("component", Component)
