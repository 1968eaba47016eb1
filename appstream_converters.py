#!/usr/bin/env python3
#
# Licensed under the GNU General Public License Version 2
#
# Scalar converters for AppStream attribute and element values

"""
Strict scalar conversions.

Numbers, dates and URLs are converted strictly: malformed content raises
InvalidValueError naming the field and the offending text. Enumerations are
the lenient counterpart and live on the enums themselves (from_token).
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import UTC, datetime
from urllib.parse import urlparse

from appstream_errors import InvalidValueError

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


# =============================================================================
# Element helpers
# =============================================================================


def local_name(element: ET.Element) -> str:
	"""Tag name without any namespace prefix."""
	tag = element.tag
	if not isinstance(tag, str):
		# Comments and processing instructions
		return ""
	return tag.rsplit("}", 1)[-1]


def child_elements(element: ET.Element, tag: str | None = None) -> list[ET.Element]:
	"""Direct child elements, optionally restricted to one tag name."""
	children = [child for child in element if local_name(child)]
	if tag is None:
		return children
	return [child for child in children if local_name(child) == tag]


def get_attr(element: ET.Element, name: str) -> str | None:
	"""Trimmed attribute value, or None when the attribute is absent."""
	value = element.get(name)
	if value is None:
		return None
	return value.strip()


def get_text(element: ET.Element | None) -> str | None:
	"""Trimmed direct text, or None when it is missing or whitespace-only."""
	if element is None or element.text is None:
		return None
	text = element.text.strip()
	return text or None


def get_locale(element: ET.Element) -> str | None:
	"""Locale of a translatable element (xml:lang, or a bare lang attribute)."""
	locale = get_attr(element, XML_LANG)
	if locale is None:
		locale = get_attr(element, "lang")
	return locale or None


# =============================================================================
# Scalars
# =============================================================================


def parse_int(raw: str | None, field: str, context: str | None = None) -> int | None:
	"""Convert a non-negative decimal integer; None passes through."""
	if raw is None:
		return None
	text = raw.strip()
	if not text.isascii() or not text.isdigit():
		raise InvalidValueError(field, raw, context, "expected a non-negative integer")
	return int(text)


def parse_date(raw: str | None, field: str, context: str | None = None) -> datetime | None:
	"""
	Convert an AppStream date.

	Accepts a UNIX timestamp ("1424116753") or an ISO 8601 date or datetime
	("2015-02-16", "2015-02-16T12:00:00Z"). Naive values are taken as UTC.
	"""
	if raw is None:
		return None
	text = raw.strip()
	if text.isascii() and text.isdigit():
		try:
			return datetime.fromtimestamp(int(text), tz=UTC)
		except (OverflowError, OSError, ValueError) as e:
			raise InvalidValueError(field, raw, context, str(e)) from e

	try:
		value = datetime.fromisoformat(text)
	except ValueError as e:
		raise InvalidValueError(field, raw, context, "expected a timestamp or ISO 8601 date") from e

	if value.tzinfo is None:
		return value.replace(tzinfo=UTC)
	return value.astimezone(UTC)


def parse_url(raw: str | None, field: str, context: str | None = None) -> str | None:
	"""Validate an absolute URL (scheme and location both present)."""
	if raw is None:
		return None
	text = raw.strip()
	try:
		parsed = urlparse(text)
	except ValueError as e:
		raise InvalidValueError(field, raw, context, str(e)) from e

	if not parsed.scheme or not (parsed.netloc or parsed.path):
		raise InvalidValueError(field, raw, context, "expected an absolute URL")
	if parsed.scheme in ("http", "https", "ftp") and not parsed.netloc:
		raise InvalidValueError(field, raw, context, "URL has no host")
	return text


# No current element uses boolean tokens; kept for callers and future boolean attributes
def parse_bool(raw: str | None, field: str, context: str | None = None) -> bool | None:
	"""Convert the "true"/"false" tokens (case-sensitive)."""
	if raw is None:
		return None
	text = raw.strip()
	if text == "true":
		return True
	if text == "false":
		return False
	raise InvalidValueError(field, raw, context, "expected 'true' or 'false'")
