from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict


class ResourceLocation(BaseModel):
	"""One physical copy of a resource, as reported by a loader."""

	model_config = ConfigDict(frozen=True)

	origin: str
	path: str


class Resolution(BaseModel):
	"""Outcome of turning an index record into a type handle."""

	identifier: str
	status: Literal["found", "missing"]
	handle: Any = None

	@classmethod
	def found(cls, identifier: str, handle: Any) -> "Resolution":
		return cls(identifier=identifier, status="found", handle=handle)

	@classmethod
	def missing(cls, identifier: str) -> "Resolution":
		return cls(identifier=identifier, status="missing")

	@property
	def is_found(self) -> bool:
		return self.status == "found"


class IndexLayout(BaseModel):
	"""Naming conventions used to locate index and documentation resources."""

	subclass_prefix: str = "META-INF/services/"
	annotated_prefix: str = "META-INF/annotations/"
	package_index_name: str = "jaxb.index"
	javadoc_prefix: str = "META-INF/javadocs/"

	def subclass_index(self, name: str) -> str:
		return self.subclass_prefix + name

	def annotated_index(self, name: str) -> str:
		return self.annotated_prefix + name

	def package_index(self, package: str) -> str:
		return package.replace(".", "/") + "/" + self.package_index_name

	def javadoc(self, name: str) -> str:
		return self.javadoc_prefix + name


DEFAULT_LAYOUT = IndexLayout()


class TypeInfo(BaseModel):
	name: str
	summary: Optional[str] = None


class QueryResult(BaseModel):
	query: Literal["subclasses", "annotated", "package"]
	target: str
	types: List[TypeInfo] = []


class SummaryResult(BaseModel):
	name: str
	summary: Optional[str] = None
