from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .aggregate import open_text, text_lines
from .errors import IndexReadError
from .loader import ResourceSource, qualified_name
from .model import DEFAULT_LAYOUT, IndexLayout


logger = logging.getLogger(__name__)


def extract_summary(lines: Iterable[str]) -> str:
	"""Return the text before the first period, lines joined without separators."""
	parts: List[str] = []
	for line in lines:
		dot = line.find(".")
		if dot == -1:
			parts.append(line)
			continue
		parts.append(line[:dot])
		break
	return "".join(parts).strip()


def get_class_summary(
	loader: ResourceSource,
	klass: Any,
	layout: Optional[IndexLayout] = None,
) -> Optional[str]:
	"""Summary (first sentence) of the documentation stored for klass.

	Only the first copy of the documentation resource is read. Returns None
	when no documentation was stored for the type.
	"""
	layout = layout or DEFAULT_LAYOUT
	path = layout.javadoc(qualified_name(klass))
	try:
		location = next(iter(loader.enumerate_resources(path)), None)
		if location is None:
			return None
		stream = loader.open_stream(location)
		if stream is None:
			logger.debug(f"Documentation at {location.origin}!{path} disappeared")
			return None
		with stream, open_text(stream) as reader:
			return extract_summary(text_lines(reader))
	except OSError as e:
		raise IndexReadError("Cannot read Javadoc index", path) from e
