"""Run-time access to build-time generated class indexes.

Modules:
- model.py: Resource locations, resolution outcomes, index layout and result views.
- loader.py: Module-loading protocols and the import-path based loader.
- aggregate.py: Merging every copy of an index resource into one record set.
- resolve.py: Turning index records into types.
- summary.py: First-sentence summaries from stored documentation.
- index.py: The public subclass, annotation and package queries.
- report.py: Serialisable query results for the command line and HTTP API.
- errors.py: Error hierarchy.
"""

from .errors import ClassIndexError, IndexIntegrityError, IndexReadError
from .index import ClassIndex, get_annotated, get_package_classes, get_subclasses
from .loader import ModuleLoader, SearchPathLoader, qualified_name
from .model import IndexLayout, Resolution, ResourceLocation
from .summary import get_class_summary

__all__ = [
	"ClassIndex",
	"ClassIndexError",
	"IndexIntegrityError",
	"IndexLayout",
	"IndexReadError",
	"ModuleLoader",
	"Resolution",
	"ResourceLocation",
	"SearchPathLoader",
	"get_annotated",
	"get_class_summary",
	"get_package_classes",
	"get_subclasses",
	"qualified_name",
]
