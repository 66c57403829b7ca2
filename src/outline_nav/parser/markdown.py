"""Markdown heading scanning."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class HeadingRecord:
    """A raw heading as found in the document, before tree building."""
    level: int
    title: str
    line: int


HEADER_PATTERN = re.compile(r'^(#{1,6})\s+(.+?)\s*$')
FENCE_PATTERN = re.compile(r'^\s{0,3}(`{3,}|~{3,})')
CLOSING_HASHES = re.compile(r'\s+#+$')


def slugify(text: str) -> str:
    """Convert text to a URL-friendly slug."""
    text = text.lower().strip()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[-\s]+', '-', text)
    return text


def _front_matter_end(lines: list[str]) -> int:
    """
    Index of the first line after YAML front-matter.

    Returns 0 when the document has no (closed) front-matter block.
    """
    if not lines or lines[0].rstrip() != '---':
        return 0
    for index in range(1, len(lines)):
        if lines[index].rstrip() == '---':
            return index + 1
    return 0


def preprocess_mdx(content: str) -> str:
    """
    Preprocess MDX content to standard markdown.

    Blanks out JSX import/export lines and strips component tags
    (preserving text children). Line count is preserved so heading
    line numbers still point into the original file.
    """
    lines = content.split('\n')
    result: list[str] = []
    for line in lines:
        if re.match(r'^(import|export)\s+', line):
            result.append('')
            continue
        # Self-closing: <Component prop="value" />
        line = re.sub(r'<[A-Z][a-zA-Z]*\b[^>]*/>', '', line)
        # Opening: <Component prop="value">
        line = re.sub(r'<[A-Z][a-zA-Z]*\b[^>]*>', '', line)
        # Closing: </Component>
        line = re.sub(r'</[A-Z][a-zA-Z]*>', '', line)
        result.append(line)
    return '\n'.join(result)


def scan_markdown_headings(content: str) -> list[HeadingRecord]:
    """
    Scan markdown content for ATX headings (H1-H6).

    Headings inside fenced code blocks and YAML front-matter are ignored.
    Line numbers are 1-based and refer to the original content.
    """
    lines = content.split('\n')
    records: list[HeadingRecord] = []
    fence: str = ''

    for index in range(_front_matter_end(lines), len(lines)):
        line = lines[index]

        fence_match = FENCE_PATTERN.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if not fence:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = ''
            continue
        if fence:
            continue

        match = HEADER_PATTERN.match(line)
        if not match:
            continue
        title = CLOSING_HASHES.sub('', match.group(2)).strip()
        if not title or set(title) == {'#'}:
            continue
        records.append(HeadingRecord(level=len(match.group(1)), title=title, line=index + 1))

    return records
