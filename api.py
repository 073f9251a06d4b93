from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from classindex.errors import IndexIntegrityError, IndexReadError, UnknownTypeError
from classindex.loader import SearchPathLoader
from classindex.model import IndexLayout, QueryResult, SummaryResult
from classindex.report import run_query, summarize_type


# Requests choose the roots and layout to read from, so the server exposes
# text from any readable file; bind it to localhost only.
app = FastAPI(title="Class Index")


class IndexRequest(BaseModel):
	target: str
	roots: Optional[List[str]] = None
	layout: IndexLayout = IndexLayout()


class QueryRequest(IndexRequest):
	summaries: bool = False


def _query(query: str, req: QueryRequest) -> QueryResult:
	loader = SearchPathLoader(req.roots)
	try:
		return run_query(loader, query, req.target, req.layout, req.summaries)
	except UnknownTypeError as e:
		raise HTTPException(status_code=404, detail=str(e))
	except IndexIntegrityError as e:
		raise HTTPException(status_code=409, detail=str(e))
	except IndexReadError as e:
		raise HTTPException(status_code=500, detail=f"{e}: {e.__cause__}")


@app.post("/subclasses", response_model=QueryResult)
def subclasses(req: QueryRequest) -> QueryResult:
	return _query("subclasses", req)


@app.post("/annotated", response_model=QueryResult)
def annotated(req: QueryRequest) -> QueryResult:
	return _query("annotated", req)


@app.post("/package", response_model=QueryResult)
def package(req: QueryRequest) -> QueryResult:
	return _query("package", req)


@app.post("/summary", response_model=SummaryResult)
def summary(req: IndexRequest) -> SummaryResult:
	loader = SearchPathLoader(req.roots)
	try:
		return summarize_type(loader, req.target, req.layout)
	except IndexReadError as e:
		raise HTTPException(status_code=500, detail=f"{e}: {e.__cause__}")


def create_app() -> FastAPI:
	return app
