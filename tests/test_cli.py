#!/usr/bin/env python3
"""Unit tests for appstream_cli module."""

import tempfile
from pathlib import Path

import pytest

from appstream_cli import main

SAMPLE = str(Path(__file__).parent / "data" / "collection.xml")


def _run(argv):
	with pytest.raises(SystemExit) as exc_info:
		main(argv)
	return exc_info.value.code


class TestCli:
	"""Tests for the command line interface."""

	def test_info(self, capsys):
		"""Test collection info output."""
		assert _run(["info", SAMPLE]) == 0
		out = capsys.readouterr().out
		assert "origin: flathub" in out
		assert "components: 5" in out
		assert "failures: 1" in out

	def test_show(self, capsys):
		"""Test showing a component in a locale."""
		assert _run(["show", SAMPLE, "org.gimp.GIMP", "--locale", "de"]) == 0
		out = capsys.readouterr().out
		assert "name: GNU Bildbearbeitungsprogramm" in out
		assert "latest release: 2.10.38 (2024-05-01)" in out
		assert "GIMP ist ein Bildbearbeitungsprogramm." in out

	def test_show_missing(self, capsys):
		"""Test showing an unknown id fails."""
		assert _run(["show", SAMPLE, "org.example.Missing"]) == 1
		assert "not found" in capsys.readouterr().out

	def test_extends(self, capsys):
		"""Test listing addons."""
		assert _run(["extends", SAMPLE, "org.gimp.GIMP"]) == 0
		out = capsys.readouterr().out
		assert "org.gimp.GIMP.Plugin.GMic" in out
		assert "org.gimp.GIMP.Plugin.Resynthesizer" in out

	def test_categories(self, capsys):
		"""Test the category index."""
		assert _run(["categories", SAMPLE]) == 0
		lines = capsys.readouterr().out.splitlines()
		assert "     1  Development" in lines

	def test_domain(self, capsys):
		"""Test the domain query."""
		assert _run(["domain", SAMPLE, "gnome.org"]) == 0
		out = capsys.readouterr().out
		assert "org.gnome.Builder" in out
		assert "org.gimp.GIMP" not in out

	def test_strict_fails(self, capsys):
		"""Test strict mode exits with status 1 on a broken component."""
		assert _run(["--strict", "info", SAMPLE]) == 1
		assert "Missing required field 'id'" in capsys.readouterr().err

	def test_malformed_file(self, capsys):
		"""Test malformed XML exits with status 1."""
		with tempfile.TemporaryDirectory() as tmpdir:
			path = Path(tmpdir) / "broken.xml"
			path.write_text("<components><component>", encoding="utf-8")
			assert _run(["info", str(path)]) == 1
		assert "Malformed XML" in capsys.readouterr().err

	def test_no_command(self):
		"""Test running without a command prints help and fails."""
		assert _run([]) == 1
