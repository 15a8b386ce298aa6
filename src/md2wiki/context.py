"""Per-call conversion state.

A :class:`ConversionContext` lives for exactly one ``convert`` call.  It
holds the protected-span placeholders and the state of the two line
folds (list stack, table flag).  Nothing in here is shared between calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Private-use code points contain none of the characters the emphasis,
# list or table patterns react to.  Any already in the input are escaped.
_SENTINEL_OPEN = "\ue000"
_SENTINEL_CLOSE = "\ue001"
_SENTINEL_CHAR_RE = re.compile(f"[{_SENTINEL_OPEN}{_SENTINEL_CLOSE}]")


class Placeholders:
    """Ordered sentinel substitution for protected text spans.

    Each call to :meth:`protect` appends the original text and returns a
    unique token.  :meth:`restore` puts every token back by its position
    in the list, so two spans with identical text never get mixed up.
    """

    def __init__(self, tag: str = "P") -> None:
        self._tag = tag
        self._spans: list[str] = []
        self._token_re = re.compile(
            re.escape(_SENTINEL_OPEN + tag) + r"(\d+)" + re.escape(_SENTINEL_CLOSE)
        )

    def __len__(self) -> int:
        return len(self._spans)

    def protect(self, original: str) -> str:
        """Store *original* and return the sentinel token replacing it."""
        token = f"{_SENTINEL_OPEN}{self._tag}{len(self._spans)}{_SENTINEL_CLOSE}"
        self._spans.append(original)
        return token

    def protect_all(self, pattern: re.Pattern[str], text: str) -> str:
        """Replace every match of *pattern* in *text* with a token."""
        return pattern.sub(lambda m: self.protect(m.group(0)), text)

    def escape(self, text: str) -> str:
        """Protect sentinel characters already present in *text*.

        Afterwards every sentinel in *text* belongs to a real token, so
        input that happens to look like a token comes back verbatim.
        """
        return self.protect_all(_SENTINEL_CHAR_RE, text)

    def restore(self, text: str) -> str:
        """Substitute every token in *text* with its original span.

        A span may hold tokens protected before it; those are expanded too.
        """
        if not self._spans:
            return text
        return self._expand(text, len(self._spans))

    def _expand(self, text: str, limit: int) -> str:
        def _lookup(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index < limit:
                return self._expand(self._spans[index], index)
            return match.group(0)

        return self._token_re.sub(_lookup, text)


@dataclass
class ConversionContext:
    """State created at pipeline start and discarded at its end."""

    placeholders: Placeholders = field(default_factory=Placeholders)
    list_stack: tuple[str, ...] = ()
    in_table: bool = False
