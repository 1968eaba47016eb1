#!/usr/bin/env python3
#
# Licensed under the GNU General Public License Version 2
#
# Locale-keyed text for AppStream translatable elements

"""
Translatable text.

AppStream repeats an element once per language:

	<name>Foo</name>
	<name xml:lang="de">Füh</name>

The helpers here fold such sibling groups into one read-only, locale-keyed
value. The untranslated entry is stored under DEFAULT_LOCALE ("C").
"""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator, Mapping

from appstream_converters import XML_LANG, child_elements, get_locale, local_name

DEFAULT_LOCALE = "C"


def normalize_locale(locale: str | None) -> str:
	"""Map an absent or "C" locale onto the default key."""
	if not locale or locale == DEFAULT_LOCALE:
		return DEFAULT_LOCALE
	return locale


def locale_candidates(locale: str | None) -> list[str]:
	"""
	Lookup order for a requested locale.

	"de_DE.UTF-8@euro" tries "de_DE" then "de", then the default entry.
	"""
	candidates: list[str] = []
	if locale:
		base = locale.split(".", 1)[0].split("@", 1)[0]
		for candidate in (locale, base, base.split("_", 1)[0]):
			if candidate and candidate not in candidates:
				candidates.append(candidate)
	if DEFAULT_LOCALE not in candidates:
		candidates.append(DEFAULT_LOCALE)
	return candidates


class TranslatableString(Mapping[str, str]):
	"""Read-only mapping of locale to text."""

	__slots__ = ("_texts",)

	def __init__(self, texts: Mapping[str, str] | Iterable[tuple[str, str]] = ()):
		self._texts: dict[str, str] = dict(texts)

	@classmethod
	def with_default(cls, text: str) -> TranslatableString:
		return cls({DEFAULT_LOCALE: text})

	def __getitem__(self, locale: str) -> str:
		return self._texts[locale]

	def __iter__(self) -> Iterator[str]:
		return iter(self._texts)

	def __len__(self) -> int:
		return len(self._texts)

	def __repr__(self) -> str:
		return f"{type(self).__name__}({self._texts!r})"

	def __hash__(self) -> int:
		return hash(frozenset(self._texts.items()))

	@property
	def default(self) -> str | None:
		"""The untranslated text, if any."""
		return self._texts.get(DEFAULT_LOCALE)

	def get_for_locale(self, locale: str | None = None, fallback: bool = True) -> str | None:
		"""
		Text for a locale.

		Args:
			locale: Locale such as "de_DE"; None means the default entry
			fallback: Try the language part and then the default entry

		Returns:
			The best matching text, or None
		"""
		if not fallback:
			return self._texts.get(normalize_locale(locale))
		for candidate in locale_candidates(locale):
			if candidate in self._texts:
				return self._texts[candidate]
		return None


class MarkupTranslatableString(TranslatableString):
	"""TranslatableString whose values are description markup."""

	__slots__ = ()

	def plain_text(self, locale: str | None = None) -> str:
		"""Render the markup for a locale as plain text."""
		markup = self.get_for_locale(locale)
		if not markup:
			return ""
		return markup_to_text(markup)


class TranslatableList(Mapping[str, tuple[str, ...]]):
	"""Read-only mapping of locale to a list of strings (keywords)."""

	__slots__ = ("_items",)

	def __init__(self, items: Mapping[str, Iterable[str]] | None = None):
		self._items: dict[str, tuple[str, ...]] = {
			locale: tuple(values) for locale, values in (items or {}).items()
		}

	def __getitem__(self, locale: str) -> tuple[str, ...]:
		return self._items[locale]

	def __iter__(self) -> Iterator[str]:
		return iter(self._items)

	def __len__(self) -> int:
		return len(self._items)

	def __repr__(self) -> str:
		return f"{type(self).__name__}({self._items!r})"

	def __hash__(self) -> int:
		return hash(frozenset(self._items.items()))

	@property
	def default(self) -> tuple[str, ...]:
		return self._items.get(DEFAULT_LOCALE, ())

	def get_for_locale(self, locale: str | None = None) -> tuple[str, ...]:
		for candidate in locale_candidates(locale):
			if candidate in self._items:
				return self._items[candidate]
		return ()


# =============================================================================
# Aggregation
# =============================================================================


def aggregate_text(elements: Iterable[ET.Element]) -> TranslatableString:
	"""
	Fold same-named sibling elements into one TranslatableString.

	Later elements for the same locale overwrite earlier ones; elements whose
	text is empty or whitespace-only contribute nothing.
	"""
	texts: dict[str, str] = {}
	for element in elements:
		text = "".join(element.itertext()).strip()
		if not text:
			continue
		texts[normalize_locale(get_locale(element))] = text
	return TranslatableString(texts)


def aggregate_keywords(elements: Iterable[ET.Element]) -> TranslatableList:
	"""
	Collect <keyword> entries from one or more <keywords> blocks.

	A keyword without its own locale inherits the locale of its block, so both
	the per-keyword and the per-block translation styles are understood.
	"""
	items: dict[str, list[str]] = {}
	for block in elements:
		block_locale = get_locale(block)
		for keyword in child_elements(block, "keyword"):
			text = "".join(keyword.itertext()).strip()
			if not text:
				continue
			locale = normalize_locale(get_locale(keyword) or block_locale)
			items.setdefault(locale, []).append(text)
	return TranslatableList(items)


def aggregate_markup(elements: Iterable[ET.Element]) -> MarkupTranslatableString:
	"""
	Fold <description> elements into locale-keyed markup.

	Metainfo files translate the whole <description>; collections translate
	each paragraph instead. Both are handled: a child's own locale wins over
	the locale of its <description>.
	"""
	parts: dict[str, list[str]] = {}
	for description in elements:
		description_locale = normalize_locale(get_locale(description))
		children = child_elements(description)
		text = (description.text or "").strip()
		if not children:
			# Bare text inside <description> without any paragraph markup
			if text:
				parts[description_locale] = [text]
			continue

		blocks: list[tuple[str, str]] = []
		if text:
			# Leading text beside paragraph markup becomes its own paragraph
			blocks.append((description_locale, _paragraph(text)))
		for child in children:
			markup = _serialize_markup(child)
			if not markup:
				continue
			child_locale = get_locale(child)
			blocks.append((normalize_locale(child_locale) if child_locale else description_locale, markup))

		# A new <description> for a locale replaces what came before it
		seen: set[str] = set()
		for locale, markup in blocks:
			if locale not in seen:
				parts[locale] = []
				seen.add(locale)
			parts[locale].append(markup)

	return MarkupTranslatableString({locale: "".join(chunks) for locale, chunks in parts.items()})


def _paragraph(text: str) -> str:
	paragraph = ET.Element("p")
	paragraph.text = text
	return ET.tostring(paragraph, encoding="unicode")


def _serialize_markup(element: ET.Element) -> str:
	if not "".join(element.itertext()).strip():
		return ""
	clean = copy.deepcopy(element)
	clean.tail = None
	for node in clean.iter():
		if isinstance(node.tag, str):
			node.tag = local_name(node)
		node.attrib.pop(XML_LANG, None)
		node.attrib.pop("lang", None)
	return ET.tostring(clean, encoding="unicode").strip()


def markup_to_text(markup: str) -> str:
	"""Convert description markup to plain text, one block per line."""
	try:
		root = ET.fromstring(f"<description>{markup}</description>")
	except ET.ParseError:
		return markup

	if not child_elements(root):
		return (root.text or "").strip()

	parts = []
	for child in child_elements(root):
		tag = local_name(child)
		if tag == "p":
			text = " ".join("".join(child.itertext()).split())
			if text:
				parts.append(text)
		elif tag == "ul":
			for li in child_elements(child, "li"):
				text = " ".join("".join(li.itertext()).split())
				if text:
					parts.append(f"• {text}")
		elif tag == "ol":
			for i, li in enumerate(child_elements(child, "li"), 1):
				text = " ".join("".join(li.itertext()).split())
				if text:
					parts.append(f"{i}. {text}")

	return "\n".join(parts)
