"""Queries over the build-time generated class index.

Each query derives a resource path from the indexed type or package, merges
every copy of that resource visible to the loader and resolves the records it
lists. Nothing is cached: every call reads the index again.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Set

from .aggregate import read_index_file
from .loader import ModuleLoader, qualified_name
from .model import DEFAULT_LAYOUT, IndexLayout
from .resolve import check_subclasses, find_classes, find_classes_in_package
from .summary import get_class_summary


logger = logging.getLogger(__name__)


def get_subclasses(loader: ModuleLoader, supertype: Any, layout: Optional[IndexLayout] = None) -> Set[Any]:
	"""Indexed subclasses of supertype.

	supertype must be a class. Raises IndexIntegrityError if the index lists a
	type that is not a subclass of supertype.
	"""
	if not isinstance(supertype, type):
		raise TypeError(f"Expected a class, got {supertype!r}")
	layout = layout or DEFAULT_LAYOUT
	entries = read_index_file(loader, layout.subclass_index(qualified_name(supertype)))
	classes = find_classes(loader, entries)
	check_subclasses(loader, supertype, classes)
	logger.info(f"Found {len(classes)} subclasses of {qualified_name(supertype)}")
	return classes


def get_annotated(loader: ModuleLoader, marker: Any, layout: Optional[IndexLayout] = None) -> Set[Any]:
	"""Types indexed as annotated (decorated) with marker."""
	layout = layout or DEFAULT_LAYOUT
	entries = read_index_file(loader, layout.annotated_index(qualified_name(marker)))
	classes = find_classes(loader, entries)
	logger.info(f"Found {len(classes)} types annotated with {qualified_name(marker)}")
	return classes


def get_package_classes(loader: ModuleLoader, package: str, layout: Optional[IndexLayout] = None) -> Set[Any]:
	"""Types indexed as members of package.

	Bare names are resolved inside package; qualified records resolve as they are.
	"""
	layout = layout or DEFAULT_LAYOUT
	entries = read_index_file(loader, layout.package_index(package))
	classes = find_classes_in_package(loader, package, entries)
	classes |= find_classes(loader, entries)
	logger.info(f"Found {len(classes)} types in package {package}")
	return classes


class ClassIndex:
	"""Binds a loader and a layout so the queries can be called without them."""

	def __init__(self, loader: ModuleLoader, layout: Optional[IndexLayout] = None):
		self.loader = loader
		self.layout = layout or DEFAULT_LAYOUT

	def subclasses(self, supertype: Any) -> Set[Any]:
		return get_subclasses(self.loader, supertype, self.layout)

	def annotated(self, marker: Any) -> Set[Any]:
		return get_annotated(self.loader, marker, self.layout)

	def package_classes(self, package: str) -> Set[Any]:
		return get_package_classes(self.loader, package, self.layout)

	def summary(self, klass: Any) -> Optional[str]:
		return get_class_summary(self.loader, klass, self.layout)
