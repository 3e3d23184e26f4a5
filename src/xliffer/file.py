"""
XLIFF <file> model.

Wraps one <file> element of a parsed XLIFF document, caches its metadata
and gives indexed access to the translation units it contains.
"""

from typing import Any, Dict, Iterator, List, Optional
import logging

from lxml import etree

from .constants import (
    BUILD_NUM_ATTR,
    DATATYPE_ATTR,
    FILE_TAG,
    ORIGINAL_ATTR,
    SOURCE_LANGUAGE_ATTR,
    TARGET_LANGUAGE_ATTR,
    TOOL_ATTRIBUTES,
    TOOL_ID_ATTR,
    TOOL_NAME_ATTR,
    TOOL_TAG,
    TOOL_VERSION_ATTR,
    TRANS_UNIT_TAG,
)
from .errors import InvalidArgumentError, NotFoundError
from .trans_unit import TranslationUnit
from .xmlnode import find_descendants, is_xml_element, local_name

logger = logging.getLogger("xliffer")


class File:
    """
    One <file> subtree of an XLIFF document.

    Metadata is read once at construction. Language setters write through
    to the backing element; nothing else touches the XML.
    """

    def __init__(self, xml: Any):
        """
        Initialize from a <file> element.

        Args:
            xml: lxml element whose local tag name is "file" (any case)

        Raises:
            InvalidArgumentError: If xml is not an element or not a <file>
        """
        if not (is_xml_element(xml) and self._is_file(xml)):
            raise InvalidArgumentError("can't create a File without a file subtree")

        self._xml: etree._Element = xml

        self._original: Optional[str] = xml.get(ORIGINAL_ATTR)
        self._source_language: Optional[str] = xml.get(SOURCE_LANGUAGE_ATTR)
        self._target_language: Optional[str] = xml.get(TARGET_LANGUAGE_ATTR)
        self._datatype: Optional[str] = xml.get(DATATYPE_ATTR)

        self._tool: Dict[str, Optional[str]] = self._read_tool()

        self._strings: List[TranslationUnit] = [
            TranslationUnit(tu) for tu in find_descendants(xml, TRANS_UNIT_TAG)
        ]
        logger.debug(f"File {self._original!r}: {len(self._strings)} translation units")

    @staticmethod
    def _is_file(xml: etree._Element) -> bool:
        return local_name(xml).lower() == FILE_TAG

    def _read_tool(self) -> Dict[str, Optional[str]]:
        """
        Read the tool attributes from the first descendant <tool>.

        Each attribute missing on the element is left as None on its own.
        """
        tools = find_descendants(self._xml, TOOL_TAG)
        if not tools:
            return dict.fromkeys(TOOL_ATTRIBUTES)

        tool = tools[0]
        values = {name: tool.get(name) for name in TOOL_ATTRIBUTES}
        missing = [name for name, value in values.items() if value is None]
        if missing:
            logger.warning(f"<tool> element is missing attributes: {', '.join(missing)}")
        return values

    def __repr__(self) -> str:
        return (
            f"File(original={self._original!r}, source_language={self._source_language!r}, "
            f"target_language={self._target_language!r}, strings={len(self._strings)})"
        )

    @property
    def xml(self) -> etree._Element:
        return self._xml

    @property
    def original(self) -> Optional[str]:
        return self._original

    file_name = original

    @property
    def datatype(self) -> Optional[str]:
        return self._datatype

    @property
    def source_language(self) -> Optional[str]:
        return self._source_language

    @source_language.setter
    def source_language(self, value: str):
        self._source_language = value
        self._xml.set(SOURCE_LANGUAGE_ATTR, value)
        logger.debug(f"Set {SOURCE_LANGUAGE_ATTR}={value!r}")

    @property
    def target_language(self) -> Optional[str]:
        return self._target_language

    @target_language.setter
    def target_language(self, value: str):
        self._target_language = value
        self._xml.set(TARGET_LANGUAGE_ATTR, value)
        logger.debug(f"Set {TARGET_LANGUAGE_ATTR}={value!r}")

    @property
    def tool_id(self) -> Optional[str]:
        return self._tool[TOOL_ID_ATTR]

    @property
    def tool_name(self) -> Optional[str]:
        return self._tool[TOOL_NAME_ATTR]

    @property
    def tool_version(self) -> Optional[str]:
        return self._tool[TOOL_VERSION_ATTR]

    @property
    def build_num(self) -> Optional[str]:
        return self._tool[BUILD_NUM_ATTR]

    @property
    def strings(self) -> List[TranslationUnit]:
        # Copy, the unit order is fixed at construction
        return list(self._strings)

    def get(self, unit_id: str) -> Optional[TranslationUnit]:
        """
        Find a translation unit by id.

        Args:
            unit_id: Exact, case-sensitive id to look for

        Returns:
            The first unit with that id, or None if there is none
        """
        return next((tu for tu in self._strings if tu.id == unit_id), None)

    def set(self, unit_id: str, target: str) -> None:
        """
        Replace the target text of a translation unit.

        Args:
            unit_id: Id of the unit to update
            target: New target text

        Raises:
            NotFoundError: If no unit has that id
        """
        unit = self.get(unit_id)
        if unit is None:
            raise NotFoundError(unit_id)
        unit.target = target

    def __getitem__(self, unit_id: str) -> Optional[TranslationUnit]:
        return self.get(unit_id)

    def __setitem__(self, unit_id: str, target: str):
        self.set(unit_id, target)

    def __contains__(self, unit_id: object) -> bool:
        return self.get(unit_id) is not None

    def __iter__(self) -> Iterator[TranslationUnit]:
        return iter(self._strings)

    def __len__(self) -> int:
        return len(self._strings)
