#!/usr/bin/env python3
#
# Licensed under the GNU General Public License Version 2
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
#
# Copyright (C) 2025-2026 AppStream Collection Contributors

"""
Command line inspector for AppStream catalogs.

Usage:
    appstream-collection info ./flathub.xml.gz
    appstream-collection show ./flathub.xml.gz org.gimp.GIMP --locale de
    appstream-collection extends ./flathub.xml.gz org.gimp.GIMP
    appstream-collection categories ./flathub.xml.gz
    appstream-collection domain ./flathub.xml.gz gnome.org
    appstream-collection --strict info ./broken.xml
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

from appstream_collection import EntityFailurePolicy, ParseOptions, load_collection
from appstream_errors import ParseError


def _load(args):
	policy = EntityFailurePolicy.ABORT if args.strict else EntityFailurePolicy.SKIP_AND_COLLECT
	return load_collection(args.path, ParseOptions(on_entity_failure=policy))


# =============================================================================
# Commands
# =============================================================================


def cmd_info(args):
	"""Show collection-level metadata and counts."""
	collection = _load(args)

	print(f"Collection: {args.path}")
	print(f"  version: {collection.version or '-'}")
	print(f"  origin: {collection.origin or '-'}")
	print(f"  architecture: {collection.architecture or '-'}")
	print(f"  components: {len(collection)}")
	print(f"  failures: {len(collection.failures)}")
	for failure in collection.failures:
		print(f"    - {failure}")


def cmd_show(args):
	"""Show a summary of one component."""
	collection = _load(args)
	component = collection.find_by_id(args.id)

	if component is None:
		print(f"Component '{args.id}' not found")
		return 1

	locale = args.locale
	print(f"Component: {component.id}")
	print(f"  kind: {component.kind}")
	print(f"  name: {component.name.get_for_locale(locale) or '-'}")
	print(f"  summary: {component.summary.get_for_locale(locale) or '-'}")
	if component.developer_name:
		print(f"  developer: {component.developer_name.get_for_locale(locale)}")
	if component.project_license:
		print(f"  license: {component.project_license}")
	if component.homepage:
		print(f"  homepage: {component.homepage}")
	if component.categories:
		print(f"  categories: {', '.join(str(c) for c in component.categories)}")
	keywords = component.keywords.get_for_locale(locale)
	if keywords:
		print(f"  keywords: {', '.join(keywords)}")
	if component.releases:
		latest = component.releases[0]
		date = latest.timestamp.date().isoformat() if latest.timestamp else "undated"
		print(f"  latest release: {latest.version} ({date})")
	if component.extends:
		print(f"  extends: {', '.join(component.extends)}")

	description = component.description.plain_text(locale)
	if description:
		print()
		print(description)
	return 0


def cmd_extends(args):
	"""List components that extend the given id."""
	collection = _load(args)
	addons = collection.extending(args.id)

	if not addons:
		print(f"No components extend '{args.id}'")
		return
	for addon in addons:
		print(f"{addon.id}\t{addon.name.default or ''}")


def cmd_categories(args):
	"""Show the category index with component counts."""
	collection = _load(args)

	counts = Counter()
	for component in collection:
		counts.update({str(category) for category in component.categories})

	for category in collection.categories():
		print(f"{counts[category]:6d}  {category}")


def cmd_domain(args):
	"""List components whose homepage is on a registered domain."""
	collection = _load(args)
	matches = collection.by_homepage_domain(args.domain)

	if not matches:
		print(f"No components hosted on '{args.domain}'")
		return
	for component in matches:
		print(f"{component.id}\t{component.homepage}")


# =============================================================================
# Entry point
# =============================================================================


def main(argv=None):
	"""CLI entry point."""
	parser = argparse.ArgumentParser(description="Inspect AppStream collection metadata")
	parser.add_argument(
		"--strict",
		action="store_true",
		help="Abort on the first component that fails to parse",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		action="store_true",
		help="Enable debug logging",
	)
	subparsers = parser.add_subparsers(dest="command", help="Available commands")

	info_parser = subparsers.add_parser("info", help="Show collection metadata and counts")
	info_parser.add_argument("path", help="Collection XML file (plain or .gz)")
	info_parser.set_defaults(func=cmd_info)

	show_parser = subparsers.add_parser("show", help="Show one component")
	show_parser.add_argument("path", help="Collection XML file (plain or .gz)")
	show_parser.add_argument("id", help="Component id (e.g., org.gimp.GIMP)")
	show_parser.add_argument("--locale", help="Locale for translated text (e.g., de_DE)")
	show_parser.set_defaults(func=cmd_show)

	extends_parser = subparsers.add_parser("extends", help="List components extending an id")
	extends_parser.add_argument("path", help="Collection XML file (plain or .gz)")
	extends_parser.add_argument("id", help="Extended component id")
	extends_parser.set_defaults(func=cmd_extends)

	categories_parser = subparsers.add_parser("categories", help="Show the category index")
	categories_parser.add_argument("path", help="Collection XML file (plain or .gz)")
	categories_parser.set_defaults(func=cmd_categories)

	domain_parser = subparsers.add_parser("domain", help="List components hosted on a domain")
	domain_parser.add_argument("path", help="Collection XML file (plain or .gz)")
	domain_parser.add_argument("domain", help="Registered domain (e.g., gnome.org)")
	domain_parser.set_defaults(func=cmd_domain)

	args = parser.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s: %(name)s: %(message)s",
	)

	if args.command is None:
		parser.print_help()
		sys.exit(1)

	try:
		status = args.func(args)
	except (ParseError, OSError) as e:
		print(f"Error: {e}", file=sys.stderr)
		sys.exit(1)
	sys.exit(status or 0)


if __name__ == "__main__":
	main()
