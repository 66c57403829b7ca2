"""Load a document from a local path or URL and scan its headings."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import httpx

from .exceptions import DocumentLoadError
from .parser.hierarchy import Outline, build_outline
from .parser.markdown import HeadingRecord, preprocess_mdx, scan_markdown_headings
from .parser.rst import scan_rst_headings

logger = logging.getLogger(__name__)

DEFAULT_HTTP_TIMEOUT = 30.0

# Credential files never read, whatever their extension
SECRET_FILENAMES = frozenset({".netrc", ".npmrc", ".pypirc", "credentials.json"})
SECRET_SUFFIXES = (".pem", ".key")


@dataclass
class Document:
    """Raw text of a document plus where it came from."""
    source: str
    name: str
    text: str

    @property
    def extension(self) -> str:
        return Path(self.name).suffix.lower()


def is_remote(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def _local_only() -> bool:
    return os.environ.get('OUTLINE_NAV_LOCAL_ONLY', '').lower() in ('true', '1', 'yes')


def _http_timeout() -> float:
    raw = os.environ.get("OUTLINE_NAV_HTTP_TIMEOUT", "")
    try:
        return float(raw) if raw else DEFAULT_HTTP_TIMEOUT
    except ValueError:
        logger.warning("Ignoring invalid OUTLINE_NAV_HTTP_TIMEOUT=%r", raw)
        return DEFAULT_HTTP_TIMEOUT


async def fetch_remote(url: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """Fetch raw document text over HTTP."""
    headers = {"User-Agent": "outline-nav"}
    try:
        async with httpx.AsyncClient(
            timeout=_http_timeout(),
            follow_redirects=True,
            transport=transport,
        ) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            return response.text
    except httpx.HTTPError as e:
        raise DocumentLoadError(f"Could not fetch {url}: {e}") from e


def is_secret_file(path: Path) -> bool:
    """True for dotenv files, private keys, and known credential stores."""
    name = path.name.lower()
    if name == ".env" or name.startswith(".env."):
        return True
    return name in SECRET_FILENAMES or name.endswith(SECRET_SUFFIXES)


def read_local(source: str) -> str:
    """Read a local document, refusing sensitive files and paths outside OUTLINE_NAV_ROOT."""
    path = Path(source).expanduser().resolve()

    if is_secret_file(path):
        logger.warning("Refusing sensitive file: %s", source)
        raise DocumentLoadError(f"Refusing to open sensitive file: {source}")

    base = os.environ.get("OUTLINE_NAV_ROOT")
    if base and not path.is_relative_to(Path(base).expanduser().resolve()):
        logger.warning("Path escapes OUTLINE_NAV_ROOT, refusing: %s", source)
        raise DocumentLoadError(f"Path is outside the allowed root: {source}")

    if not path.exists():
        raise DocumentLoadError(f"Path does not exist: {source}")
    if not path.is_file():
        raise DocumentLoadError(f"Path is not a file: {source}")

    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DocumentLoadError(f"Could not read {source}: {e}") from e


async def load_document(source: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> Document:
    """Resolve ``source`` (path or http(s) URL) to a Document."""
    if is_remote(source):
        if _local_only():
            raise DocumentLoadError(
                "Remote sources disabled in local-only mode. Set OUTLINE_NAV_LOCAL_ONLY=false or unset to enable."
            )
        text = await fetch_remote(source, transport=transport)
        name = Path(urlparse(source).path).name or source
        return Document(source=source, name=name, text=text)

    text = read_local(source)
    return Document(source=source, name=Path(source).name, text=text)


def scan_document(document: Document) -> list[HeadingRecord]:
    """Dispatch to the heading scanner matching the document's extension."""
    ext = document.extension
    if ext == '.rst':
        return scan_rst_headings(document.text)
    if ext == '.mdx':
        return scan_markdown_headings(preprocess_mdx(document.text))
    return scan_markdown_headings(document.text)


async def load_outline(source: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> Outline:
    """Load, scan, and build the outline of a document."""
    document = await load_document(source, transport=transport)
    records = scan_document(document)
    logger.debug("Scanned %d headings from %s", len(records), document.source)
    return build_outline(records, name=document.name)
