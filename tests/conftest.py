import io
import sys
import zipfile
from textwrap import dedent

import pytest

from classindex.model import Resolution, ResourceLocation


class TrackingStream(io.BytesIO):
	pass


class BrokenStream(io.BytesIO):
	def read(self, *args):
		raise OSError("disk error")

	def read1(self, *args):
		raise OSError("disk error")

	def readinto(self, *args):
		raise OSError("disk error")


class FakeLoader:
	"""In-memory loader: sources maps an origin to {path: text}."""

	def __init__(self, sources=None, types=None, stale=(), broken=()):
		self.sources = sources or {}
		self.types = types or {}
		self.stale = set(stale)
		self.broken = set(broken)
		self.opened = []
		self.resolved = []

	def enumerate_resources(self, path):
		return [ResourceLocation(origin=o, path=path) for o, files in self.sources.items() if path in files]

	def open_stream(self, location):
		if location.origin in self.stale:
			return None
		data = self.sources[location.origin][location.path].encode("utf-8")
		stream = BrokenStream(data) if location.origin in self.broken else TrackingStream(data)
		self.opened.append(stream)
		return stream

	def resolve_identifier(self, identifier):
		self.resolved.append(identifier)
		if identifier in self.types:
			return Resolution.found(identifier, self.types[identifier])
		return Resolution.missing(identifier)

	def is_subtype(self, candidate, supertype):
		return isinstance(candidate, type) and isinstance(supertype, type) and issubclass(candidate, supertype)


PLUGIN_PACKAGE = "ci_sample_plugins"

PLUGIN_SOURCE = dedent(
	"""
	class Base:
		pass

	class Alpha(Base):
		pass

	class Beta(Base):
		class Nested(Base):
			pass

	class NotAPlugin:
		pass

	def marker(cls):
		return cls
	"""
)


@pytest.fixture
def plugin_roots(tmp_path, monkeypatch):
	"""An importable directory root and a zip root, both carrying index files."""
	src = tmp_path / "src"
	pkg = src / PLUGIN_PACKAGE
	pkg.mkdir(parents=True)
	(pkg / "__init__.py").write_text(PLUGIN_SOURCE)

	services = src / "META-INF" / "services"
	services.mkdir(parents=True)
	(services / f"{PLUGIN_PACKAGE}.Base").write_text(
		f"{PLUGIN_PACKAGE}.Alpha\n{PLUGIN_PACKAGE}.Gone\n"
	)
	(services / f"{PLUGIN_PACKAGE}.NotAPlugin").write_text(f"{PLUGIN_PACKAGE}.Alpha\n")
	annotations = src / "META-INF" / "annotations"
	annotations.mkdir(parents=True)
	(annotations / f"{PLUGIN_PACKAGE}.marker").write_text(f"{PLUGIN_PACKAGE}.Beta\n")
	(pkg / "jaxb.index").write_text(f"Alpha\nBeta\nother.Thing\n{PLUGIN_PACKAGE}.NotAPlugin\n")
	javadocs = src / "META-INF" / "javadocs"
	javadocs.mkdir(parents=True)
	(javadocs / f"{PLUGIN_PACKAGE}.Alpha").write_text("The first\nplugin. Loaded eagerly.\n")

	archive = tmp_path / "extra.zip"
	with zipfile.ZipFile(archive, "w") as zf:
		zf.writestr(
			f"META-INF/services/{PLUGIN_PACKAGE}.Base",
			f"{PLUGIN_PACKAGE}.Alpha\r\n{PLUGIN_PACKAGE}.Beta\r\n{PLUGIN_PACKAGE}.Beta.Nested\r\n",
		)
		zf.writestr(f"META-INF/javadocs/{PLUGIN_PACKAGE}.Alpha", "Shadowed copy.\n")

	monkeypatch.syspath_prepend(str(src))
	sys.modules.pop(PLUGIN_PACKAGE, None)
	yield str(src), str(archive)
	sys.modules.pop(PLUGIN_PACKAGE, None)
