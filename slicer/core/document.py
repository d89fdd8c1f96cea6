"""
Parsed manifest / string-resource documents.

jadx and apktool both write decoded XML with the android namespace declared on
the root, so attributes are looked up by their qualified name
({http://schemas.android.com/apk/res/android}exported), not the "android:" prefix.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterator, List, Optional, Union

from lxml import etree

from .errors import MalformedDocumentError, MissingInputError

ANDROID_NS = "http://schemas.android.com/apk/res/android"

MANIFEST = "manifest"
RESOURCES = "resources"


def local_name(elem: etree._Element) -> str:
    return etree.QName(elem).localname


def child_elements(elem: etree._Element, tag: Optional[str] = None) -> Iterator[etree._Element]:
    """Direct element children (comments and PIs skipped), optionally by local tag."""
    for child in elem.iterchildren(tag=etree.Element):
        if tag is None or local_name(child) == tag:
            yield child


def android_attr(elem: etree._Element, name: str, default: Optional[str] = None) -> Optional[str]:
    v = elem.get(f"{{{ANDROID_NS}}}{name}")
    return default if v is None else v


def attributes(elem: etree._Element) -> dict:
    """Attributes keyed by local name; android:scheme -> scheme."""
    return {etree.QName(k).localname: v for k, v in elem.attrib.items()}


class ResourceDocument:
    """A parsed XML document with element/attribute lookup helpers."""

    def __init__(self, root: etree._Element, path: Union[str, Path] = "<memory>"):
        self.root = root
        self.path = Path(path)

    @property
    def kind(self) -> str:
        return local_name(self.root)

    @property
    def is_manifest(self) -> bool:
        return self.kind == MANIFEST

    @property
    def is_resources(self) -> bool:
        return self.kind == RESOURCES

    def select(self, tag: str) -> List[etree._Element]:
        return list(child_elements(self.root, tag))

    @classmethod
    def from_bytes(cls, data: bytes, path: Union[str, Path] = "<memory>") -> "ResourceDocument":
        parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=True)
        try:
            root = etree.fromstring(data, parser=parser)
        except etree.XMLSyntaxError as e:
            raise MalformedDocumentError(path, e.msg or "not well-formed", e.lineno) from e
        if root is None:
            raise MalformedDocumentError(path, "empty document")
        return cls(root, path)


def load_document(path: Union[str, Path]) -> ResourceDocument:
    p = Path(path)
    if not p.is_file():
        raise MissingInputError(p)
    return ResourceDocument.from_bytes(p.read_bytes(), p)
