from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

import uvicorn

from classindex.errors import ClassIndexError, UnknownTypeError
from classindex.loader import SearchPathLoader
from classindex.model import IndexLayout
from classindex.report import run_query, summarize_type


def build_loader(paths: Optional[List[str]]) -> SearchPathLoader:
	if not paths:
		return SearchPathLoader()
	roots = [os.path.abspath(p) for p in paths]
	# Types listed in the index must be importable from the same roots.
	sys.path[:0] = [r for r in roots if r not in sys.path]
	return SearchPathLoader(roots)


def load_layout(path: Optional[str]) -> IndexLayout:
	if not path:
		return IndexLayout()
	with open(path, "r", encoding="utf-8") as fh:
		return IndexLayout.model_validate_json(fh.read())


def cmd_query(args: argparse.Namespace) -> None:
	loader = build_loader(args.path)
	result = run_query(loader, args.cmd, args.target, load_layout(args.layout), args.summaries)
	print(json.dumps(result.model_dump(), indent=2))


def cmd_summary(args: argparse.Namespace) -> None:
	loader = build_loader(args.path)
	result = summarize_type(loader, args.target, load_layout(args.layout))
	print(json.dumps(result.model_dump(), indent=2))


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def _add_index_options(p: argparse.ArgumentParser) -> None:
	p.add_argument(
		"--path",
		action="append",
		help="Import root to search (directory or zip archive); repeatable, defaults to sys.path",
	)
	p.add_argument("--layout", help="JSON file overriding the index naming conventions")


def make_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="classindex")
	parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
	sub = parser.add_subparsers(dest="cmd", required=True)

	for name, target_help, help_text in (
		("subclasses", "Fully-qualified name of the base class", "List indexed subclasses of a class"),
		("annotated", "Fully-qualified name of the marker", "List types indexed under a marker"),
		("package", "Package name", "List types indexed in a package"),
	):
		pq = sub.add_parser(name, help=help_text)
		pq.add_argument("target", help=target_help)
		pq.add_argument("--summaries", action="store_true", help="Attach documentation summaries")
		_add_index_options(pq)
		pq.set_defaults(func=cmd_query)

	psum = sub.add_parser("summary", help="Print the stored documentation summary of a type")
	psum.add_argument("target", help="Fully-qualified name of the type")
	_add_index_options(psum)
	psum.set_defaults(func=cmd_summary)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = make_parser().parse_args(argv)
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
		stream=sys.stderr,
	)
	try:
		args.func(args)
	except UnknownTypeError as e:
		print(f"error: {e}", file=sys.stderr)
		return 2
	except ClassIndexError as e:
		print(f"error: {e}", file=sys.stderr)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())
