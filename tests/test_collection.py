#!/usr/bin/env python3
"""Unit tests for appstream_collection module."""

import gzip
import io
import logging
import tempfile
from pathlib import Path

import pytest

from appstream_collection import (
	EntityFailurePolicy,
	ParseOptions,
	load_collection,
	load_metainfo,
	parse_collection,
	parse_metainfo,
)
from appstream_enums import ComponentKind
from appstream_errors import InvalidRootError, MalformedXmlError, MissingRequiredFieldError

DATA_DIR = Path(__file__).parent / "data"
SAMPLE = DATA_DIR / "collection.xml"

STRICT = ParseOptions(on_entity_failure=EntityFailurePolicy.ABORT)

EXTENDS_XML = """<?xml version="1.0"?>
<components version="0.14" origin="test">
  <component type="desktop-application">
    <id>a.b.c</id>
    <name>Host</name>
  </component>
  <component type="addon">
    <id>x.y.z</id>
    <extends>a.b.c</extends>
    <name>Plugin</name>
  </component>
</components>
"""


class TestParseCollection:
	"""Tests for parse_collection."""

	def test_components_in_document_order(self):
		"""Test every component is returned in document order."""
		collection = parse_collection(EXTENDS_XML)
		assert [c.id for c in collection] == ["a.b.c", "x.y.z"]
		assert len(collection) == 2

	def test_extends_scenario(self):
		"""Test a plugin extending a host application."""
		collection = parse_collection(EXTENDS_XML)
		plugin = collection.find_by_id("x.y.z")
		assert plugin.kind is ComponentKind.ADDON
		assert plugin.extends == ("a.b.c",)
		assert collection.find_by_id("a.b.c").name.default == "Host"
		assert collection.extending("a.b.c") == (plugin,)
		assert collection.find_by_id("nope") is None

	def test_root_attributes(self):
		"""Test collection-level attributes."""
		collection = parse_collection(EXTENDS_XML)
		assert collection.version == "0.14"
		assert collection.origin == "test"
		assert collection.architecture is None

	def test_empty_collection(self):
		"""Test a collection without components."""
		collection = parse_collection("<components/>")
		assert len(collection) == 0
		assert collection.version is None
		assert collection.failures == ()

	def test_bytes_input(self):
		"""Test raw bytes are accepted."""
		assert len(parse_collection(EXTENDS_XML.encode("utf-8"))) == 2

	def test_stream_input(self):
		"""Test binary streams are accepted."""
		assert len(parse_collection(io.BytesIO(EXTENDS_XML.encode("utf-8")))) == 2

	def test_gzip_matches_plain(self):
		"""Test gzip-compressed input parses like the plain document."""
		plain = parse_collection(EXTENDS_XML)
		compressed = parse_collection(gzip.compress(EXTENDS_XML.encode("utf-8")))
		assert compressed == plain

	def test_non_component_children_skipped(self):
		"""Test other root children are ignored."""
		collection = parse_collection("<components><info/><component><id>a</id></component></components>")
		assert [c.id for c in collection] == ["a"]

	def test_wrong_root(self):
		"""Test a non-collection root is rejected."""
		with pytest.raises(InvalidRootError) as exc_info:
			parse_collection("<component><id>a</id></component>")
		assert exc_info.value.expected == "components"
		assert exc_info.value.found == "component"

	def test_malformed_xml(self):
		"""Test an unterminated tag raises MalformedXmlError."""
		with pytest.raises(MalformedXmlError) as exc_info:
			parse_collection("<components><component><id>a</id></components>")
		assert exc_info.value.position is not None

	def test_broken_gzip(self):
		"""Test a truncated gzip stream is reported as malformed."""
		data = gzip.compress(EXTENDS_XML.encode("utf-8"))[:20]
		with pytest.raises(MalformedXmlError):
			parse_collection(data)


class TestFailurePolicy:
	"""Tests for lenient and strict handling of broken components."""

	XML = """
	<components>
	  <component><id>good.one</id></component>
	  <component><name>No id here</name></component>
	  <component><id>good.two</id><categories><category>Spaceship</category></categories></component>
	</components>
	"""

	def test_lenient_drops_only_broken_component(self):
		"""Test the broken component is skipped and recorded."""
		collection = parse_collection(self.XML)
		assert [c.id for c in collection] == ["good.one", "good.two"]
		assert len(collection.failures) == 1
		assert isinstance(collection.failures[0], MissingRequiredFieldError)

	def test_lenient_logs_warning(self, caplog):
		"""Test skipped components are logged."""
		with caplog.at_level(logging.WARNING, logger="appstream_collection"):
			parse_collection(self.XML)
		assert "Skipping component" in caplog.text

	def test_strict_raises(self):
		"""Test strict mode raises the first failure."""
		with pytest.raises(MissingRequiredFieldError) as exc_info:
			parse_collection(self.XML, STRICT)
		assert exc_info.value.field == "id"

	def test_failure_context(self):
		"""Test failures inside a component carry its id."""
		xml = '<components><component><id>bad.url</id><url type="homepage">nope</url></component></components>'
		collection = parse_collection(xml)
		assert collection.failures[0].context == "bad.url"
		assert "bad.url" in str(collection.failures[0])

	def test_unknown_tokens_are_not_failures(self):
		"""Test unknown enumeration values never fail a component."""
		collection = parse_collection(self.XML)
		assert str(collection.find_by_id("good.two").categories[0]) == "Spaceship"


class TestLoadCollection:
	"""Tests for loading collections from disk."""

	def test_sample_catalog(self):
		"""Test the bundled sample catalog."""
		collection = load_collection(SAMPLE)
		assert collection.origin == "flathub"
		assert collection.media_baseurl == "https://dl.flathub.org/media"
		assert len(collection) == 5
		assert len(collection.failures) == 1

	def test_string_path(self):
		"""Test plain string paths are accepted."""
		assert len(load_collection(str(SAMPLE))) == 5

	def test_gzip_file(self):
		"""Test .gz files are decompressed transparently."""
		with tempfile.TemporaryDirectory() as tmpdir:
			path = Path(tmpdir) / "collection.xml.gz"
			path.write_bytes(gzip.compress(SAMPLE.read_bytes()))
			assert load_collection(path).components == load_collection(SAMPLE).components

	def test_missing_file(self):
		"""Test I/O errors propagate unchanged."""
		with pytest.raises(FileNotFoundError):
			load_collection("/nonexistent/collection.xml")

	def test_sample_details(self):
		"""Test a fully populated component from the sample catalog."""
		gimp = load_collection(SAMPLE).find_by_id("org.gimp.GIMP")
		assert gimp.name.get_for_locale("de_DE") == "GNU Bildbearbeitungsprogramm"
		assert gimp.summary.get_for_locale("fr") == "Créer des images et modifier des photographies"
		assert gimp.keywords.default == ("photo", "paint")
		assert [r.version for r in gimp.releases] == ["2.10.38", "2.10.36"]
		assert gimp.default_screenshot.source_image().width == 1920
		assert gimp.description.plain_text().splitlines() == [
			"GIMP is an image editor.",
			"• Layers",
			"• Filters",
		]


class TestMetainfo:
	"""Tests for single-component metainfo files."""

	XML = """<?xml version="1.0" encoding="UTF-8"?>
	<component type="desktop-application">
	  <id>org.example.Editor</id>
	  <metadata_license>CC0-1.0</metadata_license>
	  <name>Editor</name>
	  <description>
	    <p>Edits text.</p>
	  </description>
	  <description xml:lang="de">
	    <p>Bearbeitet Text.</p>
	  </description>
	</component>
	"""

	def test_parse(self):
		"""Test a metainfo document parses into a Component."""
		component = parse_metainfo(self.XML.strip())
		assert component.id == "org.example.Editor"
		assert component.description.plain_text("de") == "Bearbeitet Text."

	def test_wrong_root(self):
		"""Test a collection is not a metainfo file."""
		with pytest.raises(InvalidRootError):
			parse_metainfo("<components/>")

	def test_load(self):
		"""Test loading a metainfo file from disk."""
		with tempfile.TemporaryDirectory() as tmpdir:
			path = Path(tmpdir) / "org.example.Editor.metainfo.xml"
			path.write_text(self.XML.strip(), encoding="utf-8")
			assert load_metainfo(path).id == "org.example.Editor"
