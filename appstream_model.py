#!/usr/bin/env python3
#
# Licensed under the GNU General Public License Version 2
#
# Immutable object model for AppStream metadata

"""
Typed, read-only records produced by the AppStream parser.

A Collection owns every nested entity. Relations between components
(extends, suggests, requirements) are stored as plain id strings and are
resolved by the query helpers on Collection, never as live links.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

import tldextract

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
	Unknown,
	UrlKind,
)
from appstream_errors import ParseError
from appstream_translatable import MarkupTranslatableString, TranslatableList, TranslatableString

# Offline extractor: the bundled public suffix snapshot, no downloads, no disk cache
_domain_extractor = tldextract.TLDExtract(cache_dir=None, suffix_list_urls=())

EMPTY_MAPPING: Mapping = MappingProxyType({})


def registered_domain(url: str) -> str | None:
	"""
	Registered domain of a URL ("https://www.mozilla.org/x" -> "mozilla.org").

	Returns None for hosts without a public suffix (IP addresses, localhost).
	"""
	ext = _domain_extractor(url)
	if not ext.domain or not ext.suffix:
		return None
	return f"{ext.domain}.{ext.suffix}".lower()


# =============================================================================
# Small value types
# =============================================================================


@dataclass(frozen=True)
class License:
	"""License expression, SPDX or legacy free-form; not validated."""

	value: str

	@property
	def is_custom(self) -> bool:
		return "LicenseRef-" in self.value

	@property
	def is_proprietary(self) -> bool:
		return "LicenseRef-proprietary" in self.value

	def __str__(self) -> str:
		return self.value


@dataclass(frozen=True)
class ProjectUrl:
	kind: UrlKind | Unknown
	url: str

	@property
	def registered_domain(self) -> str | None:
		return registered_domain(self.url)


@dataclass(frozen=True)
class Launchable:
	kind: LaunchableKind | Unknown
	value: str


@dataclass(frozen=True)
class Provide:
	kind: ProvideKind | Unknown
	value: str
	qualifier: str | None = None  # raw type attribute, e.g. firmware "runtime"


@dataclass(frozen=True)
class Bundle:
	kind: BundleKind | Unknown
	value: str
	runtime: str | None = None
	sdk: str | None = None


@dataclass(frozen=True)
class Icon:
	kind: IconKind | Unknown
	value: str  # stock name, cached file name, local path or remote URL
	width: int | None = None
	height: int | None = None
	scale: int | None = None


@dataclass(frozen=True)
class Translation:
	kind: TranslationKind | Unknown
	domain: str


@dataclass(frozen=True)
class Language:
	locale: str
	percentage: int | None = None


@dataclass(frozen=True)
class Requirement:
	"""An entry of <requires>, <recommends> or <supports>."""

	kind: RequirementKind | Unknown
	value: str
	compare: str | None = None
	version: str | None = None
	side: str | None = None


# =============================================================================
# Releases
# =============================================================================


@dataclass(frozen=True)
class Artifact:
	# Mapping fields are read-only but not hashable
	__hash__ = None

	kind: ArtifactKind | Unknown | None
	location: str | None = None
	platform: str | None = None
	filename: str | None = None
	sizes: Mapping[ReleaseSizeKind | Unknown, int] = field(default_factory=lambda: EMPTY_MAPPING)
	checksums: Mapping[ChecksumKind | Unknown, str] = field(default_factory=lambda: EMPTY_MAPPING)


@dataclass(frozen=True)
class Release:
	# Mapping fields are read-only but not hashable
	__hash__ = None

	version: str
	timestamp: datetime | None = None
	date_eol: datetime | None = None
	kind: ReleaseType | Unknown = ReleaseType.STABLE
	urgency: ReleaseUrgency | Unknown | None = None
	sizes: Mapping[ReleaseSizeKind | Unknown, int] = field(default_factory=lambda: EMPTY_MAPPING)
	description: MarkupTranslatableString = field(default_factory=MarkupTranslatableString)
	url: str | None = None
	artifacts: tuple[Artifact, ...] = ()


# =============================================================================
# Screenshots
# =============================================================================


@dataclass(frozen=True)
class Image:
	url: str
	kind: ImageKind | Unknown = ImageKind.SOURCE
	width: int | None = None
	height: int | None = None
	scale: int | None = None
	locale: str | None = None


@dataclass(frozen=True)
class Video:
	url: str
	width: int | None = None
	height: int | None = None
	codec: str | None = None
	container: str | None = None
	locale: str | None = None


@dataclass(frozen=True)
class Screenshot:
	kind: ScreenshotKind | Unknown = ScreenshotKind.EXTRA
	caption: TranslatableString = field(default_factory=TranslatableString)
	images: tuple[Image, ...] = ()
	videos: tuple[Video, ...] = ()

	@property
	def is_default(self) -> bool:
		return self.kind is ScreenshotKind.DEFAULT

	def source_image(self) -> Image | None:
		"""The full-size image, falling back to the first one listed."""
		for image in self.images:
			if image.kind is ImageKind.SOURCE:
				return image
		return self.images[0] if self.images else None


# =============================================================================
# Content rating
# =============================================================================


@dataclass(frozen=True)
class ContentRating:
	"""
	OARS content rating.

	Attributes not declared in the document are absent from `attributes`;
	deciding what an absent attribute means is left to the caller. Ratings are
	compared by value but are not hashable.
	"""

	__hash__ = None

	version: ContentRatingVersion | Unknown | None = None
	attributes: Mapping[ContentAttribute | Unknown, ContentState | Unknown] = field(default_factory=lambda: EMPTY_MAPPING)

	def state(self, attribute: ContentAttribute) -> ContentState | Unknown | None:
		return self.attributes.get(attribute)


# =============================================================================
# Component
# =============================================================================


@dataclass(frozen=True)
class Component:
	"""One software component (application, addon, font, driver, ...); not hashable."""

	__hash__ = None

	id: str
	kind: ComponentKind | Unknown = ComponentKind.GENERIC
	name: TranslatableString = field(default_factory=TranslatableString)
	summary: TranslatableString = field(default_factory=TranslatableString)
	description: MarkupTranslatableString = field(default_factory=MarkupTranslatableString)
	developer_name: TranslatableString = field(default_factory=TranslatableString)
	metadata_license: License | None = None
	project_license: License | None = None
	project_group: str | None = None
	compulsory_for_desktop: str | None = None
	update_contact: str | None = None
	pkgname: str | None = None
	source_pkgname: str | None = None
	categories: tuple[Category | Unknown, ...] = ()
	keywords: TranslatableList = field(default_factory=TranslatableList)
	urls: tuple[ProjectUrl, ...] = ()
	launchables: tuple[Launchable, ...] = ()
	provides: tuple[Provide, ...] = ()
	bundles: tuple[Bundle, ...] = ()
	icons: tuple[Icon, ...] = ()
	screenshots: tuple[Screenshot, ...] = ()
	releases: tuple[Release, ...] = ()
	languages: tuple[Language, ...] = ()
	mimetypes: tuple[str, ...] = ()
	kudos: tuple[Kudo | Unknown, ...] = ()
	translations: tuple[Translation, ...] = ()
	extends: tuple[str, ...] = ()
	suggests: tuple[str, ...] = ()
	requires: tuple[Requirement, ...] = ()
	recommends: tuple[Requirement, ...] = ()
	supports: tuple[Requirement, ...] = ()
	content_rating: ContentRating | None = None
	metadata: Mapping[str, str | None] = field(default_factory=lambda: EMPTY_MAPPING)

	def url(self, kind: UrlKind) -> str | None:
		"""First URL of the given kind."""
		for project_url in self.urls:
			if project_url.kind is kind:
				return project_url.url
		return None

	@property
	def homepage(self) -> str | None:
		return self.url(UrlKind.HOMEPAGE)

	@property
	def default_screenshot(self) -> Screenshot | None:
		for screenshot in self.screenshots:
			if screenshot.is_default:
				return screenshot
		return None


# =============================================================================
# Collection and query layer
# =============================================================================


@dataclass(frozen=True)
class Collection:
	"""
	A parsed AppStream catalog.

	Components keep document order. Duplicate ids are legal; lookups return
	the first match. `failures` holds the errors of components that were
	skipped in lenient mode. Collections are not hashable.
	"""

	__hash__ = None

	components: tuple[Component, ...] = ()
	version: str | None = None
	origin: str | None = None
	architecture: str | None = None
	media_baseurl: str | None = None
	failures: tuple[ParseError, ...] = ()

	def __iter__(self) -> Iterator[Component]:
		return iter(self.components)

	def __len__(self) -> int:
		return len(self.components)

	def find_by_id(self, component_id: str) -> Component | None:
		"""First component whose id matches exactly (case-sensitive)."""
		for component in self.components:
			if component.id == component_id:
				return component
		return None

	def find_all_by_id(self, component_id: str) -> tuple[Component, ...]:
		return self.filter(lambda component: component.id == component_id)

	def filter(self, predicate: Callable[[Component], bool]) -> tuple[Component, ...]:
		"""Components matching a predicate, in document order."""
		return tuple(component for component in self.components if predicate(component))

	def extending(self, component_id: str) -> tuple[Component, ...]:
		"""Components that declare they extend `component_id` (plugins, addons, ...)."""
		return self.filter(lambda component: component_id in component.extends)

	def by_category(self, *categories: Category | str) -> tuple[Component, ...]:
		"""Components in any of the given categories."""
		wanted = {str(category) for category in categories}
		return self.filter(lambda component: any(str(c) in wanted for c in component.categories))

	def categories(self) -> list[str]:
		"""Known category values used in the collection, sorted (Unknown tokens excluded)."""
		found = set()
		for component in self.components:
			found.update(category.value for category in component.categories if isinstance(category, Category))
		return sorted(found)

	def by_homepage_domain(self, domain: str) -> tuple[Component, ...]:
		"""
		Components whose homepage lives on a registered domain.

		"www.gnome.org" and "gnome.org" both match components hosted anywhere
		under gnome.org.
		"""
		wanted = registered_domain(f"http://{domain.strip().lower()}")
		if wanted is None:
			return ()

		def matches(component: Component) -> bool:
			homepage = component.homepage
			return homepage is not None and registered_domain(homepage) == wanted

		return self.filter(matches)
