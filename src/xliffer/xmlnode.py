"""
XML node helpers on top of lxml.

Covers the small set of node capabilities the File model relies on
(element checks, local tag names, descendant search) plus hardened
parsing and serialization.
"""

from pathlib import Path
from typing import Any, List, Union
import logging

from lxml import etree

from .constants import MAX_FILE_SIZE

logger = logging.getLogger("xliffer")


def _secure_parser() -> etree.XMLParser:
    """Build an lxml parser that does not expand entities or touch the network."""
    return etree.XMLParser(
        remove_blank_text=False,
        strip_cdata=False,
        resolve_entities=False,  # Prevent XXE attacks
        no_network=True,         # Block external network access
        huge_tree=False,         # Prevent billion laughs / memory exhaustion
    )


def is_xml_element(node: Any) -> bool:
    """
    Check whether node is an XML element.

    Comments, processing instructions and entity references are lxml
    _Element subclasses too, but their tag is not a string.
    """
    return isinstance(node, etree._Element) and isinstance(node.tag, str)


def local_name(node: etree._Element) -> str:
    """Return the element tag without its namespace."""
    return etree.QName(node).localname


def find_descendants(node: etree._Element, name: str) -> List[etree._Element]:
    """
    Find every descendant element with the given local name.

    Matches at any depth, ignores namespaces and keeps document order.
    The node itself is never part of the result.
    """
    return node.xpath('.//*[local-name()=$name]', name=name)


def get_text_content(element: etree._Element) -> str:
    """
    Extract text content from an element, handling mixed content.

    Args:
        element: XML element to extract text from

    Returns:
        Concatenated text content
    """
    text_parts = []

    if element.text:
        text_parts.append(element.text)

    for child in element:
        # Comments and unexpanded entities carry no translatable text
        if is_xml_element(child):
            text_parts.append(get_text_content(child))
        if child.tail:
            text_parts.append(child.tail)

    return ''.join(text_parts)


def parse_xml(text: Union[str, bytes]) -> etree._Element:
    """
    Parse an XML document from a string and return its root element.

    Raises:
        lxml.etree.XMLSyntaxError: If the text is not well-formed
    """
    if isinstance(text, str):
        # lxml rejects unicode input that carries an encoding declaration
        text = text.encode('utf-8')
    return etree.fromstring(text, _secure_parser())


def load_xml(file_path: Union[str, Path]) -> etree._Element:
    """
    Load and parse an XML file, returning its root element.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is larger than MAX_FILE_SIZE
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    # Check file size to prevent memory exhaustion
    file_size = path.stat().st_size
    if file_size > MAX_FILE_SIZE:
        raise ValueError(
            f"File too large: {file_size / (1024*1024):.1f}MB "
            f"(max: {MAX_FILE_SIZE / (1024*1024):.0f}MB)"
        )

    logger.debug(f"Loading {path} ({file_size} bytes)")
    tree = etree.parse(str(path), _secure_parser())
    return tree.getroot()


def to_string(node: etree._Element) -> str:
    """Serialize a node (and its subtree) to a unicode string."""
    return etree.tostring(node, encoding='unicode')
