"""Asset definitions and the read-only bundle they are served from."""

import enum
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from typing import BinaryIO, Protocol

# Python package whose directory holds the bundled static/ folder
BUNDLE_PACKAGE = "speaker_webui"


class AssetKind(enum.Enum):
    """Content kind of an asset: its media type plus placeholder markup."""

    HTML = ("text/html", "<html><body><h1>{}</h1></body></html>")
    CSS = ("text/css", "/* {} */")
    JS = ("application/javascript", "// {}")

    def __init__(self, media_type: str, template: str):
        self.media_type = media_type
        self.template = template

    def placeholder(self, text: str) -> str:
        """Wrap ``text`` in this kind's comment or markup syntax."""
        return self.template.format(text)


@dataclass(frozen=True)
class Asset:
    name: str
    kind: AssetKind
    routes: tuple[str, ...]
    resource: str


INDEX = Asset(
    name="index",
    kind=AssetKind.HTML,
    routes=("/", "/index.html", "/home", "/ui"),
    resource="static/index.html",
)
STYLESHEET = Asset(
    name="stylesheet",
    kind=AssetKind.CSS,
    routes=("/style.css",),
    resource="static/style.css",
)
SCRIPT = Asset(
    name="script",
    kind=AssetKind.JS,
    routes=("/script.js",),
    resource="static/script.js",
)

ASSETS: tuple[Asset, ...] = (INDEX, STYLESHEET, SCRIPT)


class AssetBundle(Protocol):
    def exists(self, name: str) -> bool: ...

    def open(self, name: str) -> BinaryIO: ...


class PackageBundle:
    """Assets shipped inside a Python package, read via importlib.resources.

    Resource names are ``/``-separated paths relative to the package root.
    The bundle holds no open handles; each ``open`` returns a fresh one that
    the caller must close.
    """

    def __init__(self, package: str = BUNDLE_PACKAGE):
        self._root = resources.files(package)

    def _locate(self, name: str) -> Traversable:
        node = self._root
        for part in name.split("/"):
            node = node / part
        return node

    def exists(self, name: str) -> bool:
        return self._locate(name).is_file()

    def open(self, name: str) -> BinaryIO:
        return self._locate(name).open("rb")


_bundle = PackageBundle()


def get_bundle() -> AssetBundle:
    """Dependency that returns the process-wide packaged bundle."""
    return _bundle
