"""Line-by-line reading of word list files."""

import logging
from pathlib import Path
from typing import Iterator

from core.errors import SourceMissingError, SourceUnreadableError

log = logging.getLogger("syswords.line_loader")


class LineLoader:
    """Reads a word list file as a sequence of lines.

    A path that does not exist raises SourceMissingError before any line is
    produced. A path that exists but cannot be opened or read raises
    SourceUnreadableError. File content never fails a read: bytes that are
    invalid in the encoding are kept as lone surrogates (surrogateescape),
    so such lines still round-trip to their original bytes.
    """

    def __init__(self, encoding: str = "utf-8"):
        """Initialize loader.

        Args:
            encoding: Text encoding of the files
        """
        self.encoding = encoding

    def lines(self, path: str) -> Iterator[str]:
        """Yield the lines of a file with the line terminator removed.

        Lines end at '\\n' only. The '\\n' and then one trailing '\\r' are
        removed, so CRLF files read cleanly while a '\\r' inside a line is
        kept. Blank lines are yielded as empty strings.

        Args:
            path: File path, '~' is expanded

        Yields:
            Lines of the file

        Raises:
            SourceMissingError: If the path does not exist
            SourceUnreadableError: If the file cannot be opened or read
        """
        file_path = Path(path).expanduser()
        try:
            f = open(
                file_path,
                "r",
                encoding=self.encoding,
                errors="surrogateescape",
                newline="\n",
            )
        except (FileNotFoundError, NotADirectoryError) as e:
            raise SourceMissingError(path) from e
        except OSError as e:
            log.debug(f"Cannot open word list {path}: {e}")
            raise SourceUnreadableError(path, str(e)) from e

        with f:
            try:
                for line in f:
                    if line.endswith("\n"):
                        line = line[:-1]
                    if line.endswith("\r"):
                        line = line[:-1]
                    yield line
            except OSError as e:
                log.debug(f"Error reading word list {path}: {e}")
                raise SourceUnreadableError(path, str(e)) from e


__all__ = ["LineLoader"]
