"""reStructuredText heading scanning."""

from typing import Optional

from .markdown import HeadingRecord


# RST underline characters, in common convention order.
# Actual level is determined by document order of appearance.
RST_UNDERLINE_CHARS = set('=-~^"+`:#\'._*')


def _is_rst_underline(line: str) -> Optional[str]:
    """Check if a line is an RST section underline. Returns the char or None."""
    stripped = line.rstrip()
    if len(stripped) < 2:
        return None
    char = stripped[0]
    if char not in RST_UNDERLINE_CHARS:
        return None
    if all(c == char for c in stripped):
        return char
    return None


def scan_rst_headings(content: str) -> list[HeadingRecord]:
    """
    Scan reStructuredText content for section titles.

    RST titles are text lines followed (and optionally preceded) by an
    adornment line of a single repeated punctuation character. Overlined
    and underline-only styles count as distinct, and the level of each
    style is the order in which it first appears in the document.
    Line numbers are 1-based and point at the title text.
    """
    lines = content.split('\n')
    records: list[HeadingRecord] = []
    style_to_level: dict[str, int] = {}

    i = 0
    while i < len(lines):
        # Overline + title + underline
        overline = _is_rst_underline(lines[i])
        if (overline is not None
                and i + 2 < len(lines)
                and lines[i + 1].strip()
                and _is_rst_underline(lines[i + 2]) == overline
                and len(lines[i].rstrip()) >= len(lines[i + 1].rstrip())):
            style = f"overline-{overline}"
            if style not in style_to_level:
                style_to_level[style] = len(style_to_level) + 1
            records.append(HeadingRecord(
                level=style_to_level[style],
                title=lines[i + 1].strip(),
                line=i + 2,
            ))
            i += 3
            continue

        # Title + underline
        if (i + 1 < len(lines)
                and lines[i].strip()
                and not lines[i].startswith(' ')
                and _is_rst_underline(lines[i]) is None
                and _is_rst_underline(lines[i + 1]) is not None
                and len(lines[i + 1].rstrip()) >= len(lines[i].rstrip())):
            style = _is_rst_underline(lines[i + 1])
            if style not in style_to_level:
                style_to_level[style] = len(style_to_level) + 1
            records.append(HeadingRecord(
                level=style_to_level[style],
                title=lines[i].strip(),
                line=i + 1,
            ))
            i += 2
            continue

        i += 1

    return records
