"""
xliffer - structured access to XLIFF <file> elements.

Reads file-level localization metadata and gives indexed get/set access
to translation units, on top of lxml.
"""

from .errors import InvalidArgumentError, NotFoundError, XliffError
from .file import File
from .trans_unit import TranslationUnit
from .xmlnode import load_xml, parse_xml, to_string

__all__ = [
    "File",
    "TranslationUnit",
    "XliffError",
    "InvalidArgumentError",
    "NotFoundError",
    "parse_xml",
    "load_xml",
    "to_string",
]
