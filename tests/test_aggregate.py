import pytest

from classindex.aggregate import read_index_file
from classindex.errors import IndexReadError

from conftest import FakeLoader


PATH = "META-INF/services/pkg.Base"


def test_merges_records_from_all_sources():
	loader = FakeLoader(
		sources={
			"a.zip": {PATH: "pkg.A\npkg.B\n"},
			"b.zip": {PATH: "pkg.B\npkg.C"},
		}
	)
	assert read_index_file(loader, PATH) == {"pkg.A", "pkg.B", "pkg.C"}


def test_result_does_not_depend_on_source_order():
	first = FakeLoader(sources={"a": {PATH: "x\ny\n"}, "b": {PATH: "y\nz\n"}})
	second = FakeLoader(sources={"b": {PATH: "y\nz\n"}, "a": {PATH: "x\ny\n"}})
	assert read_index_file(first, PATH) == read_index_file(second, PATH)
	assert read_index_file(first, PATH) == read_index_file(first, PATH)


def test_records_are_kept_verbatim():
	loader = FakeLoader(sources={"a": {PATH: " pkg.A \n\npkg.B\r\npkg.C\rpkg.D"}})
	assert read_index_file(loader, PATH) == {" pkg.A ", "", "pkg.B", "pkg.C", "pkg.D"}


def test_missing_index_gives_empty_set():
	loader = FakeLoader(sources={"a": {"other": "pkg.A\n"}})
	assert read_index_file(loader, PATH) == set()


def test_stale_location_is_skipped():
	loader = FakeLoader(
		sources={"stale": {PATH: "pkg.Stale\n"}, "good": {PATH: "pkg.A\n"}},
		stale={"stale"},
	)
	assert read_index_file(loader, PATH) == {"pkg.A"}


def test_read_failure_is_wrapped():
	loader = FakeLoader(
		sources={"good": {PATH: "pkg.A\n"}, "bad": {PATH: "pkg.B\n"}},
		broken={"bad"},
	)
	with pytest.raises(IndexReadError) as excinfo:
		read_index_file(loader, PATH)
	assert isinstance(excinfo.value.__cause__, OSError)
	assert excinfo.value.path == PATH
	assert "Cannot read class index" in str(excinfo.value)


def test_streams_are_closed():
	loader = FakeLoader(
		sources={"good": {PATH: "pkg.A\n"}, "bad": {PATH: "pkg.B\n"}},
		broken={"bad"},
	)
	with pytest.raises(IndexReadError):
		read_index_file(loader, PATH)
	assert loader.opened
	assert all(stream.closed for stream in loader.opened)


def test_enumeration_failure_is_wrapped():
	class FailingLoader(FakeLoader):
		def enumerate_resources(self, path):
			raise PermissionError("denied")

	with pytest.raises(IndexReadError) as excinfo:
		read_index_file(FailingLoader(), PATH)
	assert isinstance(excinfo.value.__cause__, PermissionError)
