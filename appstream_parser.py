#!/usr/bin/env python3
#
# Licensed under the GNU General Public License Version 2
#
# AppStream XML parser: entity parsers and the component grammar

"""
Parse AppStream <component> elements into the typed object model.

Extracts:
- Names, summaries, descriptions and keywords in every locale
- Licenses, categories, URLs, launchables, provides and bundles
- Icons, screenshots (images and videos) and releases
- Content rating, languages, kudos, relations and custom metadata

General policy:
- Unknown elements and attributes are ignored
- Unknown enumeration tokens become Unknown, never an error
- Missing required values raise MissingRequiredFieldError
- Malformed numbers, dates and URLs raise InvalidValueError

The component grammar is a table from element tag to Rule, so supporting a
new AppStream element is one more table entry.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Any

from appstream_converters import (
	child_elements,
	get_attr,
	get_locale,
	get_text,
	local_name,
	parse_date,
	parse_int,
	parse_url,
)
from appstream_enums import (
	ArtifactKind,
	BundleKind,
	Category,
	ChecksumKind,
	ComponentKind,
	ContentAttribute,
	ContentRatingVersion,
	ContentState,
	IconKind,
	ImageKind,
	Kudo,
	LaunchableKind,
	ProvideKind,
	ReleaseSizeKind,
	ReleaseType,
	ReleaseUrgency,
	RequirementKind,
	ScreenshotKind,
	TranslationKind,
	UrlKind,
)
from appstream_errors import MissingRequiredFieldError, ParseError
from appstream_model import (
	Artifact,
	Bundle,
	Component,
	ContentRating,
	Icon,
	Image,
	Language,
	Launchable,
	License,
	ProjectUrl,
	Provide,
	Release,
	Requirement,
	Screenshot,
	Translation,
	Video,
)
from appstream_translatable import aggregate_keywords, aggregate_markup, aggregate_text

logger = logging.getLogger(__name__)


def _required_text(element: ET.Element, field: str | None = None) -> str:
	text = get_text(element)
	if text is None:
		raise MissingRequiredFieldError(field or local_name(element))
	return text


def _required_attr(element: ET.Element, name: str) -> str:
	value = get_attr(element, name)
	if not value:
		raise MissingRequiredFieldError(f"{local_name(element)}@{name}")
	return value


def _sizes(elements: list[ET.Element], field: str) -> MappingProxyType:
	sizes = {}
	for size in elements:
		kind = ReleaseSizeKind.from_token(get_attr(size, "type") or "download")
		sizes[kind] = parse_int(_required_text(size, field), field)
	return MappingProxyType(sizes)


# =============================================================================
# Entity parsers
# =============================================================================


def parse_project_url(element: ET.Element) -> ProjectUrl:
	"""Parse <url type="...">; a missing type means homepage."""
	kind = UrlKind.from_token(get_attr(element, "type") or UrlKind.HOMEPAGE.value)
	return ProjectUrl(kind=kind, url=parse_url(_required_text(element, "url"), "url"))


def parse_launchable(element: ET.Element) -> Launchable:
	kind = LaunchableKind.from_token(get_attr(element, "type") or "")
	value = _required_text(element, "launchable")
	if kind is LaunchableKind.URL:
		value = parse_url(value, "launchable")
	return Launchable(kind=kind, value=value)


def parse_provide(element: ET.Element) -> Provide:
	"""Parse one child of <provides>; the tag names the kind."""
	tag = local_name(element)
	return Provide(
		kind=ProvideKind.from_token(tag),
		value=_required_text(element, f"provides/{tag}"),
		qualifier=get_attr(element, "type"),
	)


def parse_bundle(element: ET.Element) -> Bundle:
	return Bundle(
		kind=BundleKind.from_token(get_attr(element, "type") or ""),
		value=_required_text(element, "bundle"),
		runtime=get_attr(element, "runtime"),
		sdk=get_attr(element, "sdk"),
	)


def parse_icon(element: ET.Element) -> Icon:
	"""Parse <icon>; icons without a type are cached icons."""
	kind = IconKind.from_token(get_attr(element, "type") or IconKind.CACHED.value)
	value = _required_text(element, "icon")
	if kind is IconKind.REMOTE:
		value = parse_url(value, "icon")
	return Icon(
		kind=kind,
		value=value,
		width=parse_int(get_attr(element, "width"), "icon@width"),
		height=parse_int(get_attr(element, "height"), "icon@height"),
		scale=parse_int(get_attr(element, "scale"), "icon@scale"),
	)


def parse_translation(element: ET.Element) -> Translation:
	return Translation(
		kind=TranslationKind.from_token(get_attr(element, "type") or ""),
		domain=_required_text(element, "translation"),
	)


def parse_language(element: ET.Element) -> Language:
	return Language(
		locale=_required_text(element, "lang"),
		percentage=parse_int(get_attr(element, "percentage"), "lang@percentage"),
	)


def parse_requirement(element: ET.Element) -> Requirement:
	"""Parse one child of <requires>, <recommends> or <supports>."""
	tag = local_name(element)
	return Requirement(
		kind=RequirementKind.from_token(tag),
		value=_required_text(element, tag),
		compare=get_attr(element, "compare"),
		version=get_attr(element, "version"),
		side=get_attr(element, "side"),
	)


def parse_image(element: ET.Element) -> Image:
	return Image(
		url=parse_url(_required_text(element, "image"), "image"),
		kind=ImageKind.from_token(get_attr(element, "type") or ImageKind.SOURCE.value),
		width=parse_int(get_attr(element, "width"), "image@width"),
		height=parse_int(get_attr(element, "height"), "image@height"),
		scale=parse_int(get_attr(element, "scale"), "image@scale"),
		locale=get_locale(element),
	)


def parse_video(element: ET.Element) -> Video:
	return Video(
		url=parse_url(_required_text(element, "video"), "video"),
		width=parse_int(get_attr(element, "width"), "video@width"),
		height=parse_int(get_attr(element, "height"), "video@height"),
		codec=get_attr(element, "codec"),
		container=get_attr(element, "container"),
		locale=get_locale(element),
	)


def parse_screenshot(element: ET.Element) -> Screenshot:
	"""
	Parse <screenshot>.

	Very old catalogs put the image URL directly into <screenshot>; that form
	is read as a single source image.
	"""
	images = tuple(parse_image(image) for image in child_elements(element, "image"))
	videos = tuple(parse_video(video) for video in child_elements(element, "video"))
	if not images and not videos and get_text(element):
		images = (Image(url=parse_url(get_text(element), "screenshot")),)

	return Screenshot(
		kind=ScreenshotKind.from_token(get_attr(element, "type") or ScreenshotKind.EXTRA.value),
		caption=aggregate_text(child_elements(element, "caption")),
		images=images,
		videos=videos,
	)


def parse_artifact(element: ET.Element) -> Artifact:
	locations = child_elements(element, "location")
	filenames = child_elements(element, "filename")

	checksums = {}
	for checksum in child_elements(element, "checksum"):
		kind = ChecksumKind.from_token(_required_attr(checksum, "type"))
		checksums[kind] = _required_text(checksum, "checksum")

	return Artifact(
		kind=ArtifactKind.from_token(get_attr(element, "type")),
		location=parse_url(get_text(locations[0]), "artifact/location") if locations else None,
		platform=get_attr(element, "platform"),
		filename=get_text(filenames[0]) if filenames else None,
		sizes=_sizes(child_elements(element, "size"), "artifact/size"),
		checksums=MappingProxyType(checksums),
	)


def parse_release(element: ET.Element) -> Release:
	"""
	Parse <release>.

	The release time comes from the "timestamp" attribute when present and
	from "date" otherwise; both are converted strictly.
	"""
	version = _required_attr(element, "version")

	timestamp = parse_date(get_attr(element, "timestamp"), "release@timestamp")
	if timestamp is None:
		timestamp = parse_date(get_attr(element, "date"), "release@date")

	urls = child_elements(element, "url")
	artifacts = []
	for block in child_elements(element, "artifacts"):
		artifacts.extend(parse_artifact(artifact) for artifact in child_elements(block, "artifact"))

	return Release(
		version=version,
		timestamp=timestamp,
		date_eol=parse_date(get_attr(element, "date_eol"), "release@date_eol"),
		kind=ReleaseType.from_token(get_attr(element, "type") or ReleaseType.STABLE.value),
		urgency=ReleaseUrgency.from_token(get_attr(element, "urgency")),
		sizes=_sizes(child_elements(element, "size"), "release/size"),
		description=aggregate_markup(child_elements(element, "description")),
		url=parse_url(get_text(urls[0]), "release/url") if urls else None,
		artifacts=tuple(artifacts),
	)


def parse_content_rating(element: ET.Element) -> ContentRating:
	"""Parse <content_rating>; attributes without a state are left out."""
	attributes = {}
	for attribute in child_elements(element, "content_attribute"):
		attribute_id = ContentAttribute.from_token(_required_attr(attribute, "id"))
		state = get_text(attribute)
		if state is None:
			continue
		attributes[attribute_id] = ContentState.from_token(state)

	return ContentRating(
		version=ContentRatingVersion.from_token(get_attr(element, "type")),
		attributes=MappingProxyType(attributes),
	)


def _rating_rank(rating: ContentRating) -> int:
	if isinstance(rating.version, ContentRatingVersion):
		return rating.version.rank
	return 0


def select_content_rating(elements: list[ET.Element]) -> ContentRating | None:
	"""Pick the rating with the newest known OARS version; ties keep document order."""
	best = None
	for element in elements:
		rating = parse_content_rating(element)
		if best is None or _rating_rank(rating) > _rating_rank(best):
			best = rating
	return best


def parse_custom(element: ET.Element) -> dict[str, str | None]:
	"""Parse <custom> (or legacy <metadata>) key/value pairs."""
	values = {}
	for value in child_elements(element, "value"):
		values[_required_attr(value, "key")] = get_text(value)
	return values


# =============================================================================
# Component grammar
# =============================================================================


class Phase(IntEnum):
	"""Order in which grammar rules are applied."""

	TEXT = 1
	SCALAR = 2
	MULTI = 3
	NESTED = 4


@dataclass(frozen=True)
class Rule:
	"""
	How one element tag feeds one Component field.

	`reduce` receives every sibling with the tag, in document order, and
	returns the field value. Accumulating rules extend the tuple built so far
	(several tags can feed the same field); other rules replace it.
	"""

	field: str
	phase: Phase
	reduce: Callable[[list[ET.Element]], Any]
	accumulate: bool = False

	def apply(self, elements: list[ET.Element], fields: dict[str, Any]) -> None:
		value = self.reduce(elements)
		if value is None:
			return
		if self.accumulate:
			value = fields.get(self.field, ()) + tuple(value)
		fields[self.field] = value


def _texts(elements: list[ET.Element]) -> list[str]:
	return [text for text in (get_text(element) for element in elements) if text is not None]


def _last_text(elements: list[ET.Element]) -> str | None:
	texts = _texts(elements)
	return texts[-1] if texts else None


def _license(elements: list[ET.Element]) -> License | None:
	text = _last_text(elements)
	return License(text) if text else None


def _children(child_tag: str | None, parse: Callable[[ET.Element], Any]) -> Callable:
	"""Reduce container elements by parsing their children (optionally one tag only)."""

	def reduce(containers: list[ET.Element]) -> list:
		return [parse(child) for container in containers for child in child_elements(container, child_tag)]

	return reduce


def _each(parse: Callable[[ET.Element], Any]) -> Callable:
	def reduce(elements: list[ET.Element]) -> list:
		return [parse(element) for element in elements]

	return reduce


def _child_texts(child_tag: str, convert: Callable[[str], Any] = str) -> Callable:
	def reduce(containers: list[ET.Element]) -> list:
		texts = []
		for container in containers:
			texts.extend(convert(text) for text in _texts(child_elements(container, child_tag)))
		return texts

	return reduce


def _extends(elements: list[ET.Element]) -> list[str]:
	# <extends>id</extends>, or the nested <extends><id>id</id></extends> form
	ids = []
	for element in elements:
		text = get_text(element)
		if text:
			ids.append(text)
		else:
			ids.extend(_texts(child_elements(element, "id")))
	return ids


def _metadata(elements: list[ET.Element]) -> MappingProxyType:
	values = {}
	for element in elements:
		values.update(parse_custom(element))
	return MappingProxyType(values)


def _text(field: str) -> Rule:
	return Rule(field, Phase.TEXT, aggregate_text)


def _scalar(field: str, reduce: Callable = _last_text) -> Rule:
	return Rule(field, Phase.SCALAR, reduce)


def _multi(field: str, reduce: Callable) -> Rule:
	return Rule(field, Phase.MULTI, reduce, accumulate=True)


def _nested(field: str, reduce: Callable, accumulate: bool = True) -> Rule:
	return Rule(field, Phase.NESTED, reduce, accumulate=accumulate)


COMPONENT_GRAMMAR: dict[str, Rule] = {
	# Translatable text
	"name": _text("name"),
	"summary": _text("summary"),
	"developer_name": _text("developer_name"),
	"description": Rule("description", Phase.TEXT, aggregate_markup),
	"keywords": Rule("keywords", Phase.TEXT, aggregate_keywords),
	# Scalars
	"metadata_license": _scalar("metadata_license", _license),
	"project_license": _scalar("project_license", _license),
	"project_group": _scalar("project_group"),
	"compulsory_for_desktop": _scalar("compulsory_for_desktop"),
	"update_contact": _scalar("update_contact"),
	"pkgname": _scalar("pkgname"),
	"source_pkgname": _scalar("source_pkgname"),
	"custom": _scalar("metadata", _metadata),
	# Multi-valued
	"categories": _multi("categories", _child_texts("category", Category.from_token)),
	"url": _multi("urls", _each(parse_project_url)),
	"launchable": _multi("launchables", _each(parse_launchable)),
	"provides": _multi("provides", _children(None, parse_provide)),
	"bundle": _multi("bundles", _each(parse_bundle)),
	"icon": _multi("icons", _each(parse_icon)),
	"languages": _multi("languages", _children("lang", parse_language)),
	"mimetypes": _multi("mimetypes", _child_texts("mimetype")),
	"kudos": _multi("kudos", _child_texts("kudo", Kudo.from_token)),
	"translation": _multi("translations", _each(parse_translation)),
	"extends": _multi("extends", _extends),
	"suggests": _multi("suggests", _child_texts("id")),
	"requires": _multi("requires", _children(None, parse_requirement)),
	"recommends": _multi("recommends", _children(None, parse_requirement)),
	"supports": _multi("supports", _children(None, parse_requirement)),
	# Nested entities
	"screenshots": _nested("screenshots", _children("screenshot", parse_screenshot)),
	"releases": _nested("releases", _children("release", parse_release)),
	"content_rating": _nested("content_rating", select_content_rating, accumulate=False),
}

# Tags that are read outside the grammar table
_HANDLED_TAGS = frozenset({"id"})

# Legacy spellings grouped with their current tag, in document order
_TAG_ALIASES = {"metadata": "custom"}


def _ordered_rules() -> list[tuple[str, Rule]]:
	return sorted(COMPONENT_GRAMMAR.items(), key=lambda item: item[1].phase)


def parse_component(element: ET.Element) -> Component:
	"""
	Parse a <component> element.

	The type attribute is read first (generic when absent), then the required
	<id> (last non-empty one, like other scalars), then every grammar rule
	phase by phase. Errors raised by nested
	parsers carry the component id as context.

	Raises:
		MissingRequiredFieldError: <id> or another required value is missing
		InvalidValueError: a number, date or URL could not be converted
	"""
	kind = ComponentKind.from_token(get_attr(element, "type")) or ComponentKind.GENERIC

	ids = _texts(child_elements(element, "id"))
	if not ids:
		raise MissingRequiredFieldError("id")
	component_id = ids[-1]

	grouped: dict[str, list[ET.Element]] = {}
	for child in child_elements(element):
		tag = local_name(child)
		grouped.setdefault(_TAG_ALIASES.get(tag, tag), []).append(child)

	fields: dict[str, Any] = {}
	try:
		for tag, rule in _ordered_rules():
			elements = grouped.get(tag)
			if elements:
				rule.apply(elements, fields)
	except ParseError as e:
		raise e.with_context(component_id) from None

	unknown = set(grouped) - set(COMPONENT_GRAMMAR) - _HANDLED_TAGS
	if unknown:
		logger.debug("%s: ignoring elements %s", component_id, ", ".join(sorted(unknown)))

	return Component(id=component_id, kind=kind, **fields)
