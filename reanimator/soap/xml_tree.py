"""Generic XML tree used by the WSDL parser.

``parse_xml`` is the only place that touches the concrete XML library.
Elements are exposed by local name (namespace URI kept separately), so
structural code works the same for ``wsdl:message`` and ``message``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field

from ..core.exceptions import ParseError


@dataclass
class XmlNode:
    """An XML element with namespace-free tag and attribute names."""

    tag: str
    namespace: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[XmlNode] = field(default_factory=list)
    text: str = ""

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def find(self, tag: str) -> XmlNode | None:
        """First direct child with the given local name."""
        return next(self.iter_children(tag), None)

    def find_all(self, tag: str) -> list[XmlNode]:
        """All direct children with the given local name."""
        return list(self.iter_children(tag))

    def iter_children(self, tag: str) -> Iterator[XmlNode]:
        return (child for child in self.children if child.tag == tag)


def _split_name(name: str) -> tuple[str | None, str]:
    if name.startswith("{"):
        uri, _, local = name[1:].partition("}")
        return uri, local
    return None, name


def _convert(element: ET.Element) -> XmlNode:
    namespace, tag = _split_name(element.tag)
    return XmlNode(
        tag=tag,
        namespace=namespace,
        attributes={_split_name(k)[1]: v for k, v in element.attrib.items()},
        children=[_convert(child) for child in element if isinstance(child.tag, str)],
        text=(element.text or "").strip(),
    )


def parse_xml(text: str) -> XmlNode:
    """Parse XML text into an ``XmlNode`` tree.

    Raises:
        ParseError: The text is not well-formed XML. ``reason`` carries the
            underlying parser message.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ParseError(f"Failed to parse WSDL: {e}", reason=str(e)) from e
    return _convert(root)
