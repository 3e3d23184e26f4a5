"""
Tests for the TranslationUnit model.

Tests reading id/source/note/target and replacing the target text,
including units that have no <target> yet.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xliffer import TranslationUnit
from xliffer.constants import XLIFF_NAMESPACES
from xliffer.xmlnode import local_name, parse_xml, to_string

XLIFF_NS = XLIFF_NAMESPACES['1.2']

SAMPLE_XLIFF = '''<?xml version="1.0" encoding="utf-8"?>
<xliff xmlns="urn:oasis:names:tc:xliff:document:1.2" version="1.2">
  <file source-language="en" target-language="fr">
    <body>
      <trans-unit id="plain">
        <source>Hello World</source>
        <target>Bonjour le monde</target>
        <note>Greeting on the start screen</note>
      </trans-unit>
      <trans-unit id="tagged">
        <source>Click <g id="1">here</g> now</source>
        <target>Cliquez <g id="1">ici</g> maintenant</target>
      </trans-unit>
      <trans-unit id="untranslated">
        <source>Missing</source>
        <note>Not translated yet</note>
      </trans-unit>
      <trans-unit id="empty">
        <source>Empty</source>
        <target/>
      </trans-unit>
    </body>
  </file>
</xliff>'''


@pytest.fixture
def root():
    return parse_xml(SAMPLE_XLIFF)


@pytest.fixture
def units(root):
    """Map of id to TranslationUnit for every trans-unit in the sample."""
    result = {}
    for tu in root.iter(f'{{{XLIFF_NS}}}trans-unit'):
        unit = TranslationUnit(tu)
        result[unit.id] = unit
    return result


class TestRead:
    """Tests for reading unit content."""

    def test_id(self, units):
        assert set(units) == {'plain', 'tagged', 'untranslated', 'empty'}

    def test_source_and_target(self, units):
        assert units['plain'].source == 'Hello World'
        assert units['plain'].target == 'Bonjour le monde'

    def test_note(self, units):
        assert units['plain'].note == 'Greeting on the start screen'
        assert units['tagged'].note is None

    def test_inline_tags_are_flattened(self, units):
        assert units['tagged'].source == 'Click here now'
        assert units['tagged'].target == 'Cliquez ici maintenant'

    def test_missing_target_is_none(self, units):
        assert units['untranslated'].target is None

    def test_empty_target_is_empty_string(self, units):
        assert units['empty'].target == ''

    def test_id_none_when_missing(self):
        unit = TranslationUnit(parse_xml('<trans-unit><source>A</source></trans-unit>'))
        assert unit.id is None


class TestWriteTarget:
    """Tests for replacing target text."""

    def test_replace_target(self, units):
        units['plain'].target = 'Salut'
        assert units['plain'].target == 'Salut'
        assert 'Salut' in to_string(units['plain'].xml)

    def test_replace_drops_inline_tags(self, units):
        units['tagged'].target = 'Cliquez'
        target = units['tagged'].xml.find(f'{{{XLIFF_NS}}}target')
        assert len(target) == 0
        assert target.text == 'Cliquez'

    def test_replace_empty_target(self, units):
        units['empty'].target = 'Vide'
        assert units['empty'].target == 'Vide'

    def test_create_missing_target(self, units):
        unit = units['untranslated']
        unit.target = 'Manquant'

        assert unit.target == 'Manquant'
        names = [local_name(child) for child in unit.xml]
        assert names == ['source', 'target', 'note']

    def test_created_target_uses_unit_namespace(self, units):
        unit = units['untranslated']
        unit.target = 'Manquant'
        assert unit.xml.find(f'{{{XLIFF_NS}}}target') is not None
        assert unit.xml.find('target') is None

    def test_create_target_without_source(self):
        unit = TranslationUnit(parse_xml('<trans-unit id="1"/>'))
        unit.target = 'Texte'
        assert to_string(unit.xml) == '<trans-unit id="1"><target>Texte</target></trans-unit>'

    def test_other_units_untouched(self, units):
        units['plain'].target = 'Salut'
        assert units['tagged'].target == 'Cliquez ici maintenant'
