"""
Constants and configuration values for xliffer.

Centralizes element and attribute names and parser limits.
"""

# File size limit for load_xml
MAX_FILE_SIZE = 50 * 1024 * 1024  # 50MB - XLIFF files are typically much smaller

# Known XLIFF namespaces (matching is done by local name, these are informative)
XLIFF_NAMESPACES = {
    '1.2': 'urn:oasis:names:tc:xliff:document:1.2',
    '2.0': 'urn:oasis:names:tc:xliff:document:2.0',
}

# Element names (local names, compared without namespace)
FILE_TAG = 'file'
TRANS_UNIT_TAG = 'trans-unit'
TOOL_TAG = 'tool'
SOURCE_TAG = 'source'
TARGET_TAG = 'target'
NOTE_TAG = 'note'

# <file> attributes
ORIGINAL_ATTR = 'original'
SOURCE_LANGUAGE_ATTR = 'source-language'
TARGET_LANGUAGE_ATTR = 'target-language'
DATATYPE_ATTR = 'datatype'

# <trans-unit> attributes
ID_ATTR = 'id'

# <tool> attributes, in the order File exposes them
TOOL_ID_ATTR = 'tool-id'
TOOL_NAME_ATTR = 'tool-name'
TOOL_VERSION_ATTR = 'tool-version'
BUILD_NUM_ATTR = 'build-num'
TOOL_ATTRIBUTES = (TOOL_ID_ATTR, TOOL_NAME_ATTR, TOOL_VERSION_ATTR, BUILD_NUM_ATTR)
