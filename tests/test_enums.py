#!/usr/bin/env python3
"""Unit tests for appstream_enums module."""

from appstream_enums import (
	Category,
	ComponentKind,
	ContentRatingVersion,
	IconKind,
	Unknown,
	UrlKind,
)


class TestFromToken:
	"""Tests for lenient enumeration conversion."""

	def test_known_token(self):
		"""Test known tokens map to members."""
		assert ComponentKind.from_token("desktop-application") is ComponentKind.DESKTOP_APPLICATION
		assert UrlKind.from_token("bugtracker") is UrlKind.BUGTRACKER

	def test_token_is_trimmed(self):
		"""Test surrounding whitespace is ignored."""
		assert IconKind.from_token("  stock ") is IconKind.STOCK

	def test_unknown_token(self):
		"""Test unknown tokens keep their raw value."""
		kind = ComponentKind.from_token("spaceship")
		assert kind == Unknown("spaceship")
		assert kind.name == "UNKNOWN"
		assert str(kind) == "spaceship"

	def test_absent_token(self):
		"""Test None stays None."""
		assert UrlKind.from_token(None) is None

	def test_component_kind_aliases(self):
		"""Test legacy component type spellings."""
		assert ComponentKind.from_token("desktop") is ComponentKind.DESKTOP_APPLICATION
		assert ComponentKind.from_token("desktop-app") is ComponentKind.DESKTOP_APPLICATION
		assert ComponentKind.from_token("inputmethod") is ComponentKind.INPUT_METHOD
		assert ComponentKind.from_token("os") is ComponentKind.OPERATING_SYSTEM

	def test_category_is_case_sensitive(self):
		"""Test category tokens must match exactly."""
		assert Category.from_token("Network") is Category.NETWORK
		assert Category.from_token("network") == Unknown("network")

	def test_category_digit_prefix(self):
		"""Test categories starting with a digit."""
		assert Category.from_token("2DGraphics") is Category.GRAPHICS_2D

	def test_str_is_token(self):
		"""Test members print as their token."""
		assert str(Category.AUDIO_VIDEO) == "AudioVideo"


class TestContentRatingVersion:
	"""Tests for OARS version ordering."""

	def test_rank(self):
		"""Test newer versions rank higher."""
		assert ContentRatingVersion.OARS_1_1.rank > ContentRatingVersion.OARS_1_0.rank
