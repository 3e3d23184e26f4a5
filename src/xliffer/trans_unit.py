"""
Translation unit model.

A TranslationUnit wraps one <trans-unit> element and exposes its id,
source, note and a writable target.
"""

from typing import Optional

from lxml import etree

from .constants import ID_ATTR, NOTE_TAG, SOURCE_TAG, TARGET_TAG
from .xmlnode import get_text_content, is_xml_element, local_name


class TranslationUnit:
    """One translatable string of an XLIFF <file>."""

    def __init__(self, xml: etree._Element):
        """
        Initialize the unit from its <trans-unit> element.

        Args:
            xml: The trans-unit XML element
        """
        self._xml = xml
        self._id: Optional[str] = xml.get(ID_ATTR)

    def __repr__(self) -> str:
        return f"TranslationUnit(id={self._id!r}, target={self.target!r})"

    @property
    def xml(self) -> etree._Element:
        return self._xml

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def source(self) -> Optional[str]:
        return self._child_text(SOURCE_TAG)

    @property
    def note(self) -> Optional[str]:
        return self._child_text(NOTE_TAG)

    @property
    def target(self) -> Optional[str]:
        """Text of the <target> child, or None if the unit has no target."""
        return self._child_text(TARGET_TAG)

    @target.setter
    def target(self, value: str):
        target_elem = self._child(TARGET_TAG)
        if target_elem is None:
            target_elem = self._create_target()

        # Replace content - inline children are dropped with the old text
        for child in list(target_elem):
            target_elem.remove(child)
        target_elem.text = value

    def _child(self, name: str) -> Optional[etree._Element]:
        for child in self._xml:
            if is_xml_element(child) and local_name(child) == name:
                return child
        return None

    def _child_text(self, name: str) -> Optional[str]:
        child = self._child(name)
        if child is None:
            return None
        return get_text_content(child)

    def _create_target(self) -> etree._Element:
        """Create a <target> in the unit's namespace, right after <source> when present."""
        namespace = etree.QName(self._xml).namespace
        tag = f"{{{namespace}}}{TARGET_TAG}" if namespace else TARGET_TAG

        source_elem = self._child(SOURCE_TAG)
        if source_elem is None:
            return etree.SubElement(self._xml, tag)

        target_elem = self._xml.makeelement(tag)
        # Repeat the source's trailing whitespace so siblings stay indented
        target_elem.tail = source_elem.tail
        source_elem.addnext(target_elem)
        return target_elem
