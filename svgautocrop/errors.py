"""Exception taxonomy for the autocrop pass.

Structural input problems, unhandled constructs, colour conflicts escalated by
policy and renderer contract violations each get their own class so callers can
decide whether to skip a document or fail the whole run.
"""

from __future__ import annotations


class AutocropError(Exception):
    """Base error. Carries enough context to locate the offending markup."""

    def __init__(
        self,
        message: str,
        *,
        element: str | None = None,
        attribute: str | None = None,
        value: str | None = None,
        source_path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.element = element
        self.attribute = attribute
        self.value = value
        self.source_path = source_path

    def __str__(self) -> str:
        parts = [self.message]
        if self.element:
            parts.append(f"element: {self.element}")
        if self.source_path:
            parts.append(f"file: {self.source_path}")
        return "\n".join(parts)


class DocumentStructureError(AutocropError):
    """Malformed document: missing/multiple root <svg>, bad viewBox, non-numeric required value."""


class UnhandledConstructError(AutocropError):
    """Element, attribute or node the rewrite whitelist does not know how to translate."""


class ColorConflictError(AutocropError):
    """More than one colour found while recoloring with ``setColorIssue="fail"``."""


class RenderError(AutocropError):
    """Rasterizer contract violation (buffer shape, render size, nothing visible)."""


class InvalidParameterError(AutocropError, ValueError):
    """Invalid pass parameter or padding callback result."""
