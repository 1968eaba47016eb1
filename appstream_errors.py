#!/usr/bin/env python3
#
# Licensed under the GNU General Public License Version 2
#
# Error taxonomy for the AppStream collection reader

"""
Exceptions raised while turning AppStream XML into the object model.

Every error derives from ParseError so callers can catch a single type.
Unknown enumeration tokens and unknown elements are never errors; only
structural problems (broken XML, wrong root, missing required fields) and
strictly-typed values that fail conversion (dates, integers, URLs) are.
"""

from __future__ import annotations


class ParseError(Exception):
	"""Base class for all AppStream parse failures."""

	def __init__(self, message: str, context: str | None = None):
		super().__init__(message)
		self.message = message
		self.context = context

	def with_context(self, context: str | None) -> ParseError:
		"""Attach the enclosing component id unless one is already known."""
		if self.context is None and context:
			self.context = context
		return self

	def __str__(self) -> str:
		if self.context:
			return f"{self.message} (component '{self.context}')"
		return self.message


class MalformedXmlError(ParseError):
	"""The input could not be tokenized as XML at all."""

	def __init__(self, message: str, position: tuple[int, int] | None = None):
		super().__init__(f"Malformed XML: {message}")
		self.position = position


class InvalidRootError(ParseError):
	"""The document root is not the element we were asked to parse."""

	def __init__(self, expected: str, found: str):
		super().__init__(f"Expected root element <{expected}>, found <{found}>")
		self.expected = expected
		self.found = found


class MissingRequiredFieldError(ParseError):
	"""A required element or attribute is absent or empty."""

	def __init__(self, field: str, context: str | None = None):
		super().__init__(f"Missing required field '{field}'", context)
		self.field = field


class InvalidValueError(ParseError):
	"""A strictly-typed field failed conversion."""

	def __init__(self, field: str, raw_text: str, context: str | None = None, reason: str = ""):
		message = f"Invalid value {raw_text!r} for '{field}'"
		if reason:
			message = f"{message}: {reason}"
		super().__init__(message, context)
		self.field = field
		self.raw_text = raw_text
