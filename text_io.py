import os
from pathlib import Path

from errors import MalformedInputError, MissingResourceError

ENCODING = os.environ.get("GLOSSARY_ENCODING", "utf-8")


# -----------------------------
# LINE SOURCES
# -----------------------------

class StringLineSource:
    """
    Serve lines from text already held in memory.
    Accepts either one string (split on line breaks) or a list of lines.
    """

    def __init__(self, text):
        if isinstance(text, str):
            text = text.splitlines()
        self._lines = list(text)
        self._pos = 0

    def at_end(self):
        return self._pos >= len(self._lines)

    def next_line(self):
        """Return the next line, or "" once the source is exhausted."""
        if self.at_end():
            return ""
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def close(self):
        self._pos = len(self._lines)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class FileLineSource:
    """
    Serve the lines of a text file, without their line terminators.
    The file handle stays open until close() so the source behaves like a reader.
    """

    def __init__(self, path, encoding=ENCODING):
        self.path = str(path)
        self.encoding = encoding
        try:
            self._handle = open(self.path, "r", encoding=encoding)
        except OSError as e:
            raise MissingResourceError(f"Cannot read input file '{self.path}': {e.strerror or e}") from e
        self._pending = None

    def at_end(self):
        if self._handle is None:
            return True
        if self._pending is None:
            try:
                line = self._handle.readline()
            except UnicodeDecodeError as e:
                raise MalformedInputError(f"Input file '{self.path}' is not valid {self.encoding} text: {e.reason}") from e
            except OSError as e:
                raise MissingResourceError(f"Cannot read input file '{self.path}': {e.strerror or e}") from e
            if line == "":
                return True
            self._pending = line.rstrip("\r\n")
        return False

    def next_line(self):
        if self.at_end():
            return ""
        line, self._pending = self._pending, None
        return line

    def close(self):
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


# -----------------------------
# OUTPUT
# -----------------------------

class TextSink:
    """
    Write text to one output file.
    Used as a context manager so the file is flushed and closed on every exit path.
    """

    def __init__(self, path, encoding=ENCODING):
        self.path = str(path)
        try:
            self._handle = open(self.path, "w", encoding=encoding)
        except OSError as e:
            raise MissingResourceError(f"Cannot write '{self.path}': {e.strerror or e}") from e

    @property
    def closed(self):
        return self._handle is None

    def write(self, text):
        self._handle.write(text)

    def writeline(self, text=""):
        self._handle.write(text + "\n")

    def close(self):
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class Directory:
    """A named output folder that pages are written into."""

    def __init__(self, path):
        self.path = Path(path)

    def create(self):
        """
        Make the output folder itself. Its parent must already exist;
        a missing parent or a path that isn't a folder is fatal.
        """
        if self.path.is_dir():
            return self.path
        try:
            os.mkdir(self.path)
        except OSError as e:
            raise MissingResourceError(f"Cannot create output folder '{self.path}': {e.strerror or e}") from e
        return self.path

    def path_for(self, name):
        return os.path.join(self.path, name)

    def sink(self, name) -> TextSink:
        return TextSink(self.path_for(name))

    def listing(self):
        try:
            return sorted(p.name for p in self.path.iterdir() if p.is_file())
        except OSError as e:
            raise MissingResourceError(f"Cannot list output folder '{self.path}': {e.strerror or e}") from e
