"""
Destinations for rendered documents.
"""

from __future__ import annotations
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO


log = logging.getLogger(__name__)


class Sink(ABC):
    @abstractmethod
    def write(self, text: str) -> bool:
        """Writes the whole text. Returns False when the write fails."""
        pass


class FileSink(Sink):
    """
    Writes to a file, opening and closing it around a single write.

    The text is encoded before the file is opened, so a document that can't
    be encoded leaves an existing file untouched.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)

    def write(self, text: str) -> bool:
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as e:
            log.warning("Cannot encode document for %s: %s", self.path, e)
            return False

        try:
            with open(self.path, "wb") as fp:
                fp.write(data)
        except OSError as e:
            log.warning("Cannot write %s: %s", self.path, e)
            return False

        log.debug("Wrote %d bytes to %s", len(data), self.path)
        return True

    def __repr__(self) -> str:
        return f"FileSink({str(self.path)!r})"


class StreamSink(Sink):
    """Writes to an already open text stream, which is left open."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, text: str) -> bool:
        try:
            self.stream.write(text)
        except (ValueError, OSError) as e:
            # ValueError covers closed streams and encoding failures
            log.warning("Cannot write to %r: %s", self.stream, e)
            return False

        return True

    def __repr__(self) -> str:
        return f"StreamSink({self.stream!r})"


def open_sink(target: str | os.PathLike | TextIO | Sink) -> Sink:
    """Paths become file sinks, streams become stream sinks, sinks pass through."""
    if isinstance(target, Sink):
        return target

    if isinstance(target, (str, os.PathLike)):
        return FileSink(target)

    return StreamSink(target)
