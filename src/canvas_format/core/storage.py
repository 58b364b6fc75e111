"""Read and write canvas files.

Canvas text fields may arrive with raw newlines inside JSON strings, which
strict JSON forbids. ``escape_literal_newlines`` rewrites those to ``\\n``
before parsing; ``restore_literal_newlines`` turns them back into raw
newlines for consumers that expect them that way.
"""

import json
from pathlib import Path

from loguru import logger

from canvas_format.config import JSON_INDENT
from canvas_format.core.codec.json_reader import decode_canvas
from canvas_format.core.codec.json_writer import encode_canvas
from canvas_format.errors import DecodeError
from canvas_format.models.canvas import Canvas

_LITERAL_TO_ESCAPE = {"\n": "\\n", "\r": "\\r"}
_ESCAPE_TO_LITERAL = {"n": "\n", "r": "\r"}


def escape_literal_newlines(text: str) -> str:
    """Replace raw CR/LF characters inside JSON string literals with escapes.

    Newlines between tokens are left alone, so indented documents keep parsing.
    """
    out: list[str] = []
    in_string = False
    escaped = False
    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            elif ch in _LITERAL_TO_ESCAPE:
                out.append(_LITERAL_TO_ESCAPE[ch])
                continue
        elif ch == '"':
            in_string = True
        out.append(ch)
    return "".join(out)


def restore_literal_newlines(text: str) -> str:
    """Reverse ``escape_literal_newlines``: ``\\n``/``\\r`` escapes in strings become raw.

    An escaped backslash followed by ``n`` is a literal backslash and an ``n``,
    and stays as it is.
    """
    out: list[str] = []
    in_string = False
    i = 0
    while i < len(text):
        ch = text[i]
        if in_string:
            if ch == "\\":
                pair = text[i : i + 2]
                out.append(_ESCAPE_TO_LITERAL.get(pair[1:], pair))
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        out.append(ch)
        i += 1
    return "".join(out)


def loads(text: str, *, strict: bool = False) -> Canvas:
    """Parse canvas file contents.

    Raises:
        DecodeError: If the text is not JSON or not a valid canvas.
    """
    try:
        data = json.loads(escape_literal_newlines(text))
    except json.JSONDecodeError as e:
        raise DecodeError("$", f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    return decode_canvas(data, strict=strict)


def dumps(canvas: Canvas, *, literal_newlines: bool = False) -> str:
    """Serialize a canvas to file contents.

    Raises:
        EdgeEncodeError: If an edge is not bound at both ends.
    """
    contents = json.dumps(encode_canvas(canvas), indent=JSON_INDENT, ensure_ascii=False) + "\n"
    if literal_newlines:
        contents = restore_literal_newlines(contents)
    return contents


def load(path: str | Path, *, strict: bool = False) -> Canvas:
    path = Path(path)
    logger.debug("Reading canvas {}", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("$", f"file is not UTF-8: {e.reason}") from e
    return loads(text, strict=strict)


def save(canvas: Canvas, path: str | Path, *, literal_newlines: bool = False) -> bool:
    """Write a canvas to ``path`` unless the file already has the same contents.

    The canvas is fully encoded before the file is touched, so an encoding
    error never leaves a partial file behind.

    Returns:
        True if the file was written, False if it was already up to date.
    """
    path = Path(path)
    contents = dumps(canvas, literal_newlines=literal_newlines)
    try:
        if path.read_text(encoding="utf-8") == contents:
            logger.debug("Unchanged, not writing {}", path)
            return False
    except (FileNotFoundError, UnicodeDecodeError):
        pass

    logger.debug("Writing canvas {}", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    return True
