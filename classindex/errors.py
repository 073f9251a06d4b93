from __future__ import annotations

from typing import Optional


class ClassIndexError(RuntimeError):
	"""Base class for every error raised by classindex."""


class IndexReadError(ClassIndexError):
	"""An index or documentation resource could not be read."""

	def __init__(self, message: str, path: Optional[str] = None):
		super().__init__(message if path is None else f"{message}: {path}")
		self.path = path


class IndexIntegrityError(ClassIndexError):
	"""A type listed in a subclass index is not a subclass of the indexed type."""

	def __init__(self, candidate: str, supertype: str):
		super().__init__(f"Class '{candidate}' is not a subclass of '{supertype}'")
		self.candidate = candidate
		self.supertype = supertype


class UnknownTypeError(ClassIndexError):
	"""A type named by the caller of a query could not be resolved."""

	def __init__(self, name: str):
		super().__init__(f"Unknown type '{name}'")
		self.name = name
