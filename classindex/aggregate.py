from __future__ import annotations

import io
import logging
from typing import BinaryIO, Iterator, Set, TextIO

from .errors import IndexReadError
from .loader import ResourceSource


logger = logging.getLogger(__name__)


def open_text(stream: BinaryIO) -> TextIO:
	# Malformed UTF-8 is replaced rather than rejected; \r, \n and \r\n all end a line.
	return io.TextIOWrapper(stream, encoding="utf-8", errors="replace", newline=None)


def text_lines(reader: TextIO) -> Iterator[str]:
	"""Yield the lines of reader without their line terminators."""
	for line in reader:
		yield line[:-1] if line.endswith("\n") else line


def read_index_file(loader: ResourceSource, path: str) -> Set[str]:
	"""Merge the records of every copy of the index resource at path.

	Records are kept verbatim, one per line. A location the loader reports but
	cannot open (stale entry) is skipped; any other I/O failure aborts the read.
	"""
	entries: Set[str] = set()
	try:
		for location in loader.enumerate_resources(path):
			stream = loader.open_stream(location)
			if stream is None:
				logger.debug(f"Skipping stale index location {location.origin}!{location.path}")
				continue
			with stream, open_text(stream) as reader:
				for line in text_lines(reader):
					entries.add(line)
	except OSError as e:
		raise IndexReadError("Cannot read class index", path) from e

	logger.debug(f"Read {len(entries)} records from {path}")
	return entries
