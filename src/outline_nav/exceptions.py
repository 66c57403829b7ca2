"""Custom exceptions for outline-nav."""


class OutlineNavError(Exception):
    """Base exception for outline-nav operations."""


class MalformedHeadingError(OutlineNavError, ValueError):
    """Heading record with a level below 1."""


class UnresolvableSelectionError(OutlineNavError, RuntimeError):
    """Selection provider returned a label it was never offered."""


class SelectionCancelled(OutlineNavError):
    """User abandoned the selection prompt."""


class DocumentLoadError(OutlineNavError):
    """Document source could not be read, fetched, or was refused."""


class JumpError(OutlineNavError):
    """Jumper could not reveal the target line."""
