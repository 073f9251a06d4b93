from __future__ import annotations

import importlib
import io
import os
import sys
import zipfile
import zlib
from typing import Any, BinaryIO, Iterable, Iterator, Optional, Protocol, Tuple

from .model import Resolution, ResourceLocation


class ResourceSource(Protocol):
	def enumerate_resources(self, path: str) -> Iterable[ResourceLocation]:
		...

	def open_stream(self, location: ResourceLocation) -> Optional[BinaryIO]:
		"""Open a location for reading, or return None if it does not exist after all."""
		...


class TypeResolver(Protocol):
	def resolve_identifier(self, identifier: str) -> Resolution:
		...

	def is_subtype(self, candidate: Any, supertype: Any) -> bool:
		...


class ModuleLoader(ResourceSource, TypeResolver, Protocol):
	"""Everything the index queries need from the module system."""


def qualified_name(obj: Any) -> str:
	"""Fully-qualified identifier of a type or marker; strings pass through."""
	if isinstance(obj, str):
		return obj
	module = getattr(obj, "__module__", None)
	qualname = getattr(obj, "__qualname__", None)
	if module is None or qualname is None:
		return repr(obj)
	return f"{module}.{qualname}"


def _is_missing_module(error: ModuleNotFoundError, module_name: str) -> bool:
	# The error must be about module_name or one of its parents, not about
	# something module_name itself tried to import.
	if error.name is None:
		return False
	return module_name == error.name or module_name.startswith(error.name + ".")


class SearchPathLoader:
	"""Loader over an ordered list of import roots (directories and zip archives).

	Resources are looked up under every root; types are resolved through the
	interpreter's import system, so the roots should also be importable.
	"""

	def __init__(self, roots: Optional[Iterable[str]] = None):
		if roots is None:
			roots = list(sys.path)
		self.roots: Tuple[str, ...] = tuple(os.path.abspath(r or os.curdir) for r in roots)

	def __repr__(self) -> str:
		return f"SearchPathLoader(roots={list(self.roots)!r})"

	def enumerate_resources(self, path: str) -> Iterator[ResourceLocation]:
		# Lazy, so a first-match lookup stops at the first root that has path.
		for root in self.roots:
			if os.path.isdir(root):
				if os.path.isfile(os.path.join(root, *path.split("/"))):
					yield ResourceLocation(origin=root, path=path)
			elif zipfile.is_zipfile(root):
				if path in self._archive_names(root):
					yield ResourceLocation(origin=root, path=path)

	def open_stream(self, location: ResourceLocation) -> Optional[BinaryIO]:
		if os.path.isdir(location.origin):
			try:
				return open(os.path.join(location.origin, *location.path.split("/")), "rb")
			except FileNotFoundError:
				return None
		try:
			with zipfile.ZipFile(location.origin) as archive:
				data = archive.read(location.path)
		except (FileNotFoundError, KeyError):
			return None
		except (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError) as e:
			raise OSError(f"Corrupt archive: {location.origin}") from e
		return io.BytesIO(data)

	def resolve_identifier(self, identifier: str) -> Resolution:
		parts = identifier.split(".")
		if not all(part.isidentifier() for part in parts):
			return Resolution.missing(identifier)

		# Longest importable prefix is the module, the rest are attributes.
		for split in range(len(parts), 0, -1):
			module_name = ".".join(parts[:split])
			try:
				obj = importlib.import_module(module_name)
			except ModuleNotFoundError as e:
				if _is_missing_module(e, module_name):
					continue
				raise
			for attr in parts[split:]:
				try:
					obj = getattr(obj, attr)
				except AttributeError:
					return Resolution.missing(identifier)
			return Resolution.found(identifier, obj)
		return Resolution.missing(identifier)

	def is_subtype(self, candidate: Any, supertype: Any) -> bool:
		if not isinstance(candidate, type) or not isinstance(supertype, type):
			return False
		return issubclass(candidate, supertype)

	@staticmethod
	def _archive_names(root: str) -> frozenset:
		try:
			with zipfile.ZipFile(root) as archive:
				return frozenset(archive.namelist())
		except zipfile.BadZipFile as e:
			raise OSError(f"Corrupt archive: {root}") from e
