from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .errors import UnknownTypeError
from .index import get_annotated, get_package_classes, get_subclasses
from .loader import ModuleLoader, qualified_name
from .model import IndexLayout, QueryResult, SummaryResult, TypeInfo
from .summary import get_class_summary


def resolve_target(loader: ModuleLoader, name: str) -> Any:
	resolution = loader.resolve_identifier(name)
	if not resolution.is_found:
		raise UnknownTypeError(name)
	return resolution.handle


def describe_types(
	loader: ModuleLoader,
	classes: Iterable[Any],
	layout: Optional[IndexLayout] = None,
	with_summaries: bool = False,
) -> List[TypeInfo]:
	types: List[TypeInfo] = []
	for klass in classes:
		summary = get_class_summary(loader, klass, layout) if with_summaries else None
		types.append(TypeInfo(name=qualified_name(klass), summary=summary))
	return sorted(types, key=lambda t: t.name)


def run_query(
	loader: ModuleLoader,
	query: str,
	target: str,
	layout: Optional[IndexLayout] = None,
	with_summaries: bool = False,
) -> QueryResult:
	if query == "subclasses":
		supertype = resolve_target(loader, target)
		if not isinstance(supertype, type):
			raise UnknownTypeError(target)
		classes = get_subclasses(loader, supertype, layout)
	elif query == "annotated":
		# Only the marker's name is needed to locate its index.
		classes = get_annotated(loader, target, layout)
	elif query == "package":
		classes = get_package_classes(loader, target, layout)
	else:
		raise ValueError(f"Unknown query: {query}")
	return QueryResult(
		query=query,
		target=target,
		types=describe_types(loader, classes, layout, with_summaries),
	)


def summarize_type(loader: ModuleLoader, name: str, layout: Optional[IndexLayout] = None) -> SummaryResult:
	return SummaryResult(name=name, summary=get_class_summary(loader, name, layout))
