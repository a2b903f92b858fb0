"""Newline-delimited JSON stream parsing.

Turns the raw byte chunks of a streamed chat response into text fragments.

Each line of the decoded body is an independent JSON object such as
``{"response": "Hi "}``. Lines are parsed on their own; a line that does not
parse is skipped and the stream carries on.

Framing:
    By default each network chunk is split and parsed on its own, so a JSON
    object that straddles two chunks is dropped. With ``line_buffering`` the
    incomplete tail of a chunk is held back and completed by the next one.
"""

import codecs
import logging
from collections.abc import AsyncIterable, AsyncIterator

from pydantic import ValidationError

from src.models.schemas import StreamFragment

logger = logging.getLogger(__name__)


def parse_fragment(line: str) -> str | None:
    """Extract the text fragment carried by one stream line.

    Args:
        line: A single decoded line of the response body.

    Returns:
        The fragment text, or None if the line is blank, unparseable,
        or has no (or an empty) ``response`` field.
    """
    if not line.strip():
        return None

    try:
        fragment = StreamFragment.model_validate_json(line)
    except ValidationError as e:
        logger.debug(f"Skipping unparseable stream line {line!r}: {e.errors()[0]['msg']}")
        return None

    return fragment.response or None


def _fragments_in(lines: list[str]) -> list[str]:
    return [text for line in lines if (text := parse_fragment(line)) is not None]


async def iter_fragments(
    chunks: AsyncIterable[bytes],
    *,
    line_buffering: bool = False,
) -> AsyncIterator[str]:
    """Yield text fragments from a chunked NDJSON byte stream.

    Multi-byte UTF-8 characters split across chunks are decoded correctly;
    invalid bytes are replaced rather than raised.

    Args:
        chunks: Raw body chunks in arrival order.
        line_buffering: Hold back an incomplete trailing line until the
            next chunk completes it.

    Yields:
        Fragment texts in arrival order.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    pending = ""

    async for chunk in chunks:
        text = decoder.decode(chunk)
        if not text:
            continue

        lines = (pending + text).split("\n")
        if line_buffering:
            pending = lines.pop()

        for fragment in _fragments_in(lines):
            yield fragment

    # Flush whatever the decoder and line buffer still hold
    tail = pending + decoder.decode(b"", final=True)
    for fragment in _fragments_in(tail.split("\n")):
        yield fragment
