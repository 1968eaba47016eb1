#!/usr/bin/env python3
#
# Licensed under the GNU General Public License Version 2
#
# Entry points for reading AppStream collections and metainfo files

"""
Read AppStream catalogs into a Collection.

Usage:
	collection = load_collection("/usr/share/swcatalog/xml/flathub.xml.gz")
	firefox = collection.find_by_id("org.mozilla.firefox")

	strict = parse_collection(xml_text, ParseOptions(on_entity_failure=EntityFailurePolicy.ABORT))
"""

from __future__ import annotations

import gzip
import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from appstream_converters import get_attr, local_name
from appstream_errors import InvalidRootError, MalformedXmlError, ParseError
from appstream_model import Collection, Component
from appstream_parser import parse_component

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"


class EntityFailurePolicy(Enum):
	"""What to do when one <component> cannot be parsed."""

	SKIP_AND_COLLECT = "skip"
	ABORT = "abort"


@dataclass(frozen=True)
class ParseOptions:
	on_entity_failure: EntityFailurePolicy = EntityFailurePolicy.SKIP_AND_COLLECT


Source = str | bytes | os.PathLike | BinaryIO


# =============================================================================
# Input handling
# =============================================================================


def _read_source(source: Source) -> str | bytes:
	"""
	Turn any accepted source into XML text or bytes.

	str is taken as XML text; bytes, files and streams may be gzip-compressed.
	"""
	if isinstance(source, str):
		return source
	if isinstance(source, os.PathLike):
		with open(source, "rb") as f:
			data = f.read()
	elif isinstance(source, (bytes, bytearray)):
		data = bytes(source)
	else:
		data = source.read()

	if data[:2] == GZIP_MAGIC:
		try:
			data = gzip.decompress(data)
		except (OSError, EOFError) as e:
			raise MalformedXmlError(f"broken gzip stream: {e}") from e
	return data


def _parse_root(source: Source, expected: str) -> ET.Element:
	data = _read_source(source)
	try:
		root = ET.fromstring(data)
	except ET.ParseError as e:
		raise MalformedXmlError(str(e), getattr(e, "position", None)) from e

	found = local_name(root)
	if found != expected:
		raise InvalidRootError(expected, found)
	return root


# =============================================================================
# Entry points
# =============================================================================


def parse_collection(source: Source, options: ParseOptions | None = None) -> Collection:
	"""
	Parse an AppStream collection (<components> root).

	Args:
		source: XML text, raw bytes, a path or a binary stream; gzip is detected
		options: Failure policy; lenient (skip and collect) by default

	Returns:
		Collection of every component that parsed, in document order

	Raises:
		MalformedXmlError: the document is not well-formed XML
		InvalidRootError: the root element is not <components>
		ParseError: first component failure, with EntityFailurePolicy.ABORT
	"""
	options = options or ParseOptions()
	root = _parse_root(source, "components")

	components: list[Component] = []
	failures: list[ParseError] = []
	for element in root:
		if local_name(element) != "component":
			continue
		try:
			components.append(parse_component(element))
		except ParseError as e:
			if options.on_entity_failure is EntityFailurePolicy.ABORT:
				raise
			logger.warning("Skipping component: %s", e)
			failures.append(e)

	collection = Collection(
		components=tuple(components),
		version=get_attr(root, "version"),
		origin=get_attr(root, "origin"),
		architecture=get_attr(root, "architecture"),
		media_baseurl=get_attr(root, "media_baseurl"),
		failures=tuple(failures),
	)
	logger.debug(
		"Parsed collection origin=%s: %d components, %d failures",
		collection.origin,
		len(components),
		len(failures),
	)
	return collection


def load_collection(path: str | os.PathLike, options: ParseOptions | None = None) -> Collection:
	"""Parse a collection file (plain or .gz) by path."""
	return parse_collection(Path(path), options)


def parse_metainfo(source: Source) -> Component:
	"""Parse a metainfo file: a single <component> root."""
	return parse_component(_parse_root(source, "component"))


def load_metainfo(path: str | os.PathLike) -> Component:
	return parse_metainfo(Path(path))
