r"""
Post file parser.

A post file starts with a header block delimited by ``---`` lines, holding
one ``key: value`` pair per line, followed by an optional blank separator
line and the markdown body::

    ---
    layout: post
    title: Example Post
    date: 2017-01-01 00:00:00
    description: An example
    tags: ruby, rails
    ---

    Hello world.

Header keys may come in any order and ``description``, ``tags`` and
``layout`` may be left out. Values are stripped of surrounding whitespace and
of every double quote character. A value runs from the first colon to the
end of the line, so ``title: Notes: Part 1`` keeps its inner colon.

Dates and tags are not validated here: a header that is well formed but
carries nonsense values produces a document with those values.

Lines are split on ``\n`` only. A file with CRLF line endings parses the
same, but each body line keeps its trailing ``\r``.
"""

from logging import getLogger
from re import compile as re_compile
from re import split

from blogsite.configs import file_logger
from blogsite.errors.ingestion import MalformedDocumentError
from blogsite.schemas.post import PostDocument

logger = file_logger(getLogger(__name__))

HEADER_MARKER = "---"
MIN_DOCUMENT_LINES = 2
REQUIRED_KEYS = ("title", "date")
HEADER_LINE = re_compile(r"^(?P<key>[\w-]+):(?P<value>.*)$")
TAG_SEPARATOR = r",\s+"


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    # trailing newlines at end of file are not part of the body
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def _is_marker(line: str) -> bool:
    return line.strip() == HEADER_MARKER


def clean_value(raw: str) -> str:
    """Strip whitespace and double quotes from a header value."""
    return raw.replace('"', "").strip()


def split_tags(value: str) -> list[str]:
    """Split a ``tags`` header value on comma plus whitespace."""
    if not value:
        return []
    return [tag for tag in split(TAG_SEPARATOR, value) if tag]


def _read_header(lines: list[str]) -> tuple[dict[str, str], int]:
    """
    Read header pairs after the start marker.

    Returns:
        The header fields and the index of the closing marker.
    """
    fields: dict[str, str] = {}
    for index in range(1, len(lines)):
        line = lines[index]
        if _is_marker(line):
            return fields, index
        if not line.strip():
            continue

        match = HEADER_LINE.match(line)
        if match is None:
            mssg = f"Header line is not a 'key: value' pair: {line!r}"
            raise MalformedDocumentError(mssg, line=index)

        key = match["key"]
        if key in fields:
            mssg = f"Duplicate header key {key!r}"
            raise MalformedDocumentError(mssg, line=index)
        fields[key] = clean_value(match["value"])

    mssg = f"Header block is not closed with {HEADER_MARKER!r}"
    raise MalformedDocumentError(mssg)


def parse_document(text: str) -> PostDocument:
    """
    Parse the contents of a post file.

    Args:
        text: Whole file contents.

    Returns:
        PostDocument: Header fields and body. The body never contains the
        header block and always ends with exactly one newline.

    Raises:
        MalformedDocumentError: If the header block is missing, unterminated,
            contains a line that is not a ``key: value`` pair, or lacks the
            ``title`` or ``date`` key.
    """
    lines = _split_lines(text)
    if len(lines) < MIN_DOCUMENT_LINES:
        mssg = "Document is too short to contain a header block"
        raise MalformedDocumentError(mssg)
    if not _is_marker(lines[0]):
        mssg = f"Document does not start with {HEADER_MARKER!r}"
        raise MalformedDocumentError(mssg, line=0)

    fields, end = _read_header(lines)

    if missing := [key for key in REQUIRED_KEYS if key not in fields]:
        mssg = f"Header is missing required keys: {', '.join(missing)}"
        raise MalformedDocumentError(mssg)

    body_start = end + 1
    if body_start < len(lines) and not lines[body_start].strip():
        body_start += 1
    body = "\n".join(lines[body_start:]) + "\n"

    document = PostDocument(
        title=fields.pop("title"),
        date=fields.pop("date"),
        description=fields.pop("description", ""),
        tags=split_tags(fields.pop("tags", "")),
        layout=fields.pop("layout", None),
        body=body,
        extra=fields,
    )
    logger.debug(f"Parsed post {document.title!r} with {len(document.tags)} tags")
    return document


def _header_line(key: str, value: str) -> str:
    return f"{key}: {value}" if value else f"{key}:"


def render_document(document: PostDocument) -> str:
    """
    Serialize a document back into the post file format.

    The header is written in the conventional order (``layout``, ``title``,
    ``date``, ``description``, ``tags``, then any extra keys) followed by a
    blank separator line and the body.
    """
    header = [HEADER_MARKER]
    if document.layout is not None:
        header.append(_header_line("layout", document.layout))
    header.extend(
        [
            _header_line("title", document.title),
            _header_line("date", document.date),
            _header_line("description", document.description),
            _header_line("tags", ", ".join(document.tags)),
        ],
    )
    header.extend(_header_line(key, value) for key, value in document.extra.items())
    header.extend([HEADER_MARKER, ""])
    return "\n".join(header) + "\n" + document.body
