from __future__ import annotations

from typing import TextIO


def write_line(stream: TextIO, text: str) -> None:
    """Write `text` plus a newline, keeping undecodable filename bytes.

    Manifest filenames are decoded with surrogateescape. A strict text stream
    cannot encode those surrogates, so the line goes to the underlying byte
    buffer with the original bytes restored.
    """

    line = text + "\n"
    try:
        stream.write(line)
        return
    except UnicodeEncodeError:
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            raise

    encoding = getattr(stream, "encoding", None) or "utf-8"
    try:
        data = line.encode(encoding, "surrogateescape")
    except UnicodeEncodeError:
        data = line.encode(encoding, "backslashreplace")
    stream.flush()
    buffer.write(data)
