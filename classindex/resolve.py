from __future__ import annotations

import logging
from typing import Any, Iterable, Set

from .errors import IndexIntegrityError
from .loader import TypeResolver, qualified_name


logger = logging.getLogger(__name__)


def find_classes(loader: TypeResolver, records: Iterable[str]) -> Set[Any]:
	"""Resolve fully-qualified records, dropping the ones the loader does not know."""
	classes: Set[Any] = set()
	for record in records:
		resolution = loader.resolve_identifier(record)
		if not resolution.is_found:
			logger.debug(f"Index record {record!r} does not resolve, skipping")
			continue
		classes.add(resolution.handle)
	return classes


def find_classes_in_package(loader: TypeResolver, package: str, records: Iterable[str]) -> Set[Any]:
	"""Resolve bare type names relative to package.

	Qualified records are skipped here; they belong to another package or are
	resolved as they are by find_classes.
	"""
	bare = []
	for record in records:
		if "." in record:
			logger.debug(f"Qualified record {record!r} skipped in package {package}")
			continue
		bare.append(package + "." + record)
	return find_classes(loader, bare)


def check_subclasses(loader: TypeResolver, supertype: Any, candidates: Iterable[Any]) -> None:
	for candidate in candidates:
		if not loader.is_subtype(candidate, supertype):
			raise IndexIntegrityError(qualified_name(candidate), qualified_name(supertype))
