#!/usr/bin/env python3
"""Unit tests for appstream_translatable module."""

import xml.etree.ElementTree as ET

import pytest

from appstream_converters import child_elements
from appstream_translatable import (
	DEFAULT_LOCALE,
	MarkupTranslatableString,
	TranslatableList,
	TranslatableString,
	aggregate_keywords,
	aggregate_markup,
	aggregate_text,
	locale_candidates,
	markup_to_text,
)


def _children(xml, tag):
	return child_elements(ET.fromstring(xml), tag)


class TestAggregateText:
	"""Tests for folding translated siblings."""

	def test_default_and_translations(self):
		"""Test untranslated text lands under the default key."""
		names = aggregate_text(
			_children('<c><name>Foo</name><name xml:lang="fr">Fou</name></c>', "name")
		)
		assert dict(names) == {DEFAULT_LOCALE: "Foo", "fr": "Fou"}
		assert names.default == "Foo"

	def test_later_duplicate_overwrites(self):
		"""Test a later entry for the same locale wins."""
		names = aggregate_text(_children("<c><name>First</name><name>Second</name></c>", "name"))
		assert names.default == "Second"

	def test_whitespace_only_is_skipped(self):
		"""Test blank text neither creates nor erases an entry."""
		names = aggregate_text(
			_children('<c><name>Foo</name><name>   </name><name xml:lang="de"> </name></c>', "name")
		)
		assert dict(names) == {DEFAULT_LOCALE: "Foo"}

	def test_text_is_trimmed(self):
		"""Test surrounding whitespace is removed."""
		names = aggregate_text(_children("<c><name>\n  Foo  \n</name></c>", "name"))
		assert names.default == "Foo"

	def test_empty_group(self):
		"""Test no elements give an empty mapping."""
		names = aggregate_text([])
		assert len(names) == 0
		assert names.default is None


class TestLocaleLookup:
	"""Tests for locale fallback."""

	def test_candidates(self):
		"""Test lookup order for a full POSIX locale."""
		assert locale_candidates("de_DE.UTF-8@euro") == ["de_DE.UTF-8@euro", "de_DE", "de", "C"]

	def test_fallback_to_language(self):
		"""Test a regional locale falls back to its language."""
		text = TranslatableString({"C": "Color", "en_GB": "Colour", "de": "Farbe"})
		assert text.get_for_locale("de_AT") == "Farbe"
		assert text.get_for_locale("en_GB") == "Colour"
		assert text.get_for_locale("ja") == "Color"

	def test_no_fallback(self):
		"""Test exact lookups when fallback is disabled."""
		text = TranslatableString({"C": "Color"})
		assert text.get_for_locale("ja", fallback=False) is None
		assert text.get_for_locale(None, fallback=False) == "Color"

	def test_hashable(self):
		"""Test equal values hash alike and can be used as keys."""
		first = TranslatableString({"C": "Foo", "de": "Füh"})
		second = TranslatableString({"de": "Füh", "C": "Foo"})
		assert first == second
		assert hash(first) == hash(second)
		assert len({first, second}) == 1
		assert hash(TranslatableList({"C": ["a"]})) == hash(TranslatableList({"C": ("a",)}))

	def test_read_only(self):
		"""Test values cannot be assigned."""
		text = TranslatableString.with_default("Foo")
		with pytest.raises(TypeError):
			text["de"] = "Füh"


class TestAggregateKeywords:
	"""Tests for keyword collection."""

	def test_per_keyword_locale(self):
		"""Test keywords carrying their own locale."""
		keywords = aggregate_keywords(
			_children(
				'<c><keywords><keyword>photo</keyword><keyword xml:lang="de">Foto</keyword></keywords></c>',
				"keywords",
			)
		)
		assert keywords.default == ("photo",)
		assert keywords.get_for_locale("de_DE") == ("Foto",)

	def test_block_locale_is_inherited(self):
		"""Test keywords inherit the locale of their block."""
		keywords = aggregate_keywords(
			_children(
				'<c><keywords><keyword>a</keyword></keywords>'
				'<keywords xml:lang="fr"><keyword>b</keyword><keyword>c</keyword></keywords></c>',
				"keywords",
			)
		)
		assert dict(keywords) == {"C": ("a",), "fr": ("b", "c")}

	def test_missing_locale_is_empty(self):
		"""Test an unknown locale without a default gives no keywords."""
		assert TranslatableList({"de": ["x"]}).get_for_locale("ja") == ()


class TestAggregateMarkup:
	"""Tests for description markup."""

	def test_per_paragraph_translation(self):
		"""Test collection-style translated paragraphs."""
		description = aggregate_markup(
			_children(
				'<c><description><p>Hello</p><p xml:lang="de">Hallo</p>'
				"<ul><li>One</li></ul></description></c>",
				"description",
			)
		)
		assert description.default == "<p>Hello</p><ul><li>One</li></ul>"
		assert description["de"] == "<p>Hallo</p>"

	def test_whole_description_translation(self):
		"""Test metainfo-style translated descriptions."""
		description = aggregate_markup(
			_children(
				'<c><description><p>Hello</p></description>'
				'<description xml:lang="fr"><p>Bonjour</p></description></c>',
				"description",
			)
		)
		assert description.get_for_locale("fr_FR") == "<p>Bonjour</p>"
		assert description.default == "<p>Hello</p>"

	def test_bare_text(self):
		"""Test descriptions without paragraph markup."""
		description = aggregate_markup(_children("<c><description> Just text </description></c>", "description"))
		assert description.default == "Just text"

	def test_plain_text(self):
		"""Test rendering markup as plain text."""
		description = MarkupTranslatableString(
			{"C": "<p>Intro  text</p><ul><li>Layers</li><li>Filters</li></ul><ol><li>First</li></ol>"}
		)
		assert description.plain_text() == "Intro text\n• Layers\n• Filters\n1. First"

	def test_leading_text_beside_paragraphs(self):
		"""Test bare text before paragraph markup is kept as a paragraph."""
		description = aggregate_markup(_children("<c><description> Intro &amp; more <p>x</p></description></c>", "description"))
		assert description.default == "<p>Intro &amp; more</p><p>x</p>"
		assert description.plain_text() == "Intro & more\nx"

	def test_leading_text_follows_description_locale(self):
		"""Test leading text takes the locale of its <description>."""
		description = aggregate_markup(
			_children('<c><description xml:lang="de">Hallo<p>Welt</p></description></c>', "description")
		)
		assert dict(description) == {"de": "<p>Hallo</p><p>Welt</p>"}

	def test_markup_to_text_invalid_markup(self):
		"""Test unparseable markup is returned unchanged."""
		assert markup_to_text("<p>broken") == "<p>broken"
