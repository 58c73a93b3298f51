"""HTML-to-text sanitization for scraped price fragments.

sanitize() never raises: None and empty input yield "".

Cost is linear in input length. Angle brackets are paired in a single
scan and entity chains ("&amp;amp;euro;") decode in one regex pass, so
neither nesting depth nor unclosed '<' runs multiply the work.

Thread-safe. Module-level patterns are compiled once and never mutated.

Python 3.13+.
"""

import re

from priceparse.constants import HTML_ENTITIES

__all__ = ["sanitize"]

_ANGLE_BRACKET = re.compile(r"[<>]")

# "&" + any number of "amp;" layers + one table entity. Decoding layer by
# layer ends on the innermost entity, so the whole chain decodes at once.
_ENTITY_CHAIN_PATTERN = re.compile(
    "&(?:amp;)*("
    + "|".join(re.escape(entity[1:-1]) for entity in HTML_ENTITIES)
    + ");"
)

_WHITESPACE_RUN = re.compile(r"\s+")

_NO_BREAK_SPACES = str.maketrans({
    "\u00a0": " ",  # No-break space
    "\u202f": " ",  # Narrow no-break space
})


def _decode_entity_chain(match: re.Match[str]) -> str:
    return HTML_ENTITIES[f"&{match.group(1)};"]


def _strip_tags(text: str) -> str:
    """Replace every paired '<' ... '>' region with a single space.

    Brackets pair like parentheses: nested markup ("<<b>>") is one region
    and unpaired brackets stay as text. Afterwards no '<' precedes a '>'
    it could pair with, so a second call changes nothing.
    """
    openings: list[int] = []
    regions: list[tuple[int, int]] = []
    for match in _ANGLE_BRACKET.finditer(text):
        position = match.start()
        if match.group() == "<":
            openings.append(position)
        elif openings:
            start = openings.pop()
            # Regions closed earlier inside this one are absorbed.
            while regions and regions[-1][0] > start:
                regions.pop()
            regions.append((start, position + 1))

    if not regions:
        return text

    parts: list[str] = []
    cursor = 0
    for start, end in regions:
        parts.append(text[cursor:start])
        parts.append(" ")
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def _strip_markup(text: str) -> str:
    """Remove tags, decode entities, then remove tags the decoding produced.

    Entities are decoded after the first tag pass so attribute values
    cannot close a tag early. Decoded output never contains letters, and
    removed tags become spaces, so no new entity can appear afterwards.
    """
    text = _strip_tags(text)
    text = _ENTITY_CHAIN_PATTERN.sub(_decode_entity_chain, text)
    return _strip_tags(text)


def sanitize(text: str | None, *, collapse_whitespace: bool = False) -> str:
    """Convert an HTML fragment into plain text.

    This function:
    - removes all HTML tags (each tag becomes a single space)
    - decodes the fixed entity table (&nbsp;, &euro;, &amp;, ...)
    - converts no-break and narrow no-break spaces to regular spaces
    - trims leading/trailing whitespace
    - optionally collapses interior whitespace runs into one space

    Idempotent: sanitize(sanitize(x)) == sanitize(x) for every x.

    Args:
        text: HTML or plain text, possibly None
        collapse_whitespace: Collapse interior whitespace runs to one space

    Returns:
        Plain text ("" for None or empty input)

    Examples:
        >>> sanitize("  <span>16,85&nbsp;&euro;</span>  ")
        '16,85 €'
        >>> sanitize("<b>1</b>\\n\\n<i>000</i>", collapse_whitespace=True)
        '1 000'
        >>> sanitize("12&amp;amp;euro;")
        '12€'
        >>> sanitize(None)
        ''
    """
    if not text:
        return ""

    text = _strip_markup(text).translate(_NO_BREAK_SPACES).strip()

    if collapse_whitespace:
        text = _WHITESPACE_RUN.sub(" ", text)

    return text
