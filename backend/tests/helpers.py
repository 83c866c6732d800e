"""In-memory asset bundle and sample asset contents shared by the tests."""

import io

INDEX_HTML = "<p>hi</p>"
STYLE_CSS = "body { color: #222; }\n"
SCRIPT_JS = "console.log('café ♫');\n"


class FaultyStream(io.BytesIO):
    """Binary stream whose read() raises the given exception."""

    def __init__(self, exc: Exception):
        super().__init__()
        self.exc = exc

    def read(self, size=-1):
        raise self.exc


class MemoryBundle:
    """Asset bundle backed by a dict, with optional per-resource read faults."""

    def __init__(self, files=None, faults=None):
        self.files = dict(files or {})
        self.faults = dict(faults or {})
        self.opened: list[io.BytesIO] = []

    def exists(self, name):
        return name in self.files or name in self.faults

    def open(self, name):
        if name in self.faults:
            stream = FaultyStream(self.faults[name])
        else:
            stream = io.BytesIO(self.files[name])
        self.opened.append(stream)
        return stream
