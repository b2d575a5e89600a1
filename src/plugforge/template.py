"""Literal placeholder substitution for template files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .schema import ReplacementMap

__all__ = [
    "PlaceholderSubstitutor",
    "substitute",
]


def substitute(text: str, replacements: ReplacementMap) -> str:
    """Replace every placeholder token in ``text``.

    Tokens are matched as plain text, so braces or other characters inside a
    token carry no pattern meaning. Each token is replaced globally in a
    single pass; text containing no token is returned unchanged.
    """

    for token, value in replacements.items():
        text = text.replace(token, value)
    return text


@dataclass(slots=True)
class PlaceholderSubstitutor:
    """Rewrite template strings and files with a :class:`ReplacementMap`."""

    encoding: str = "utf-8"

    def render_string(self, template: str, replacements: ReplacementMap) -> str:
        return substitute(template, replacements)

    def render_file(self, path: str | Path, replacements: ReplacementMap) -> bool:
        """Substitute placeholders inside ``path`` in place.

        Returns ``False`` when the file cannot be decoded as text; its bytes
        are then left exactly as they were. Any other I/O error propagates.
        """

        path = Path(path)
        raw = path.read_bytes()
        try:
            text = raw.decode(self.encoding)
        except UnicodeDecodeError:
            return False

        rendered = self.render_string(text, replacements)
        if rendered != text:
            path.write_bytes(rendered.encode(self.encoding))
        return True
