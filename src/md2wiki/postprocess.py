"""Post-processing passes run on finished wiki markup."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

CHECKMARK = "\u2713"
CHECKMARK_EMOJI = "\u2705"

# Wiki headings as written by the header stage, coloured or not.
_HEADING_RE = re.compile(
    r"^(?P<equals>={1,6})(?:<span[^>]*>)?(?P<title>.*?)(?:</span>)?(?P=equals)[ \t]*$",
    re.MULTILINE,
)


def reverse_changelog(text: str) -> str:
    """Reverse the order of the version sections in a changelog.

    The changelog is the first heading whose title contains ``Changelog``.
    Its versions are the level-4 headings starting with ``Version`` up to
    the next heading of level 1 to 3.  Text before the first version
    stays where it is.
    """
    headings = list(_HEADING_RE.finditer(text))

    changelog_idx = next(
        (i for i, h in enumerate(headings) if "Changelog" in h.group("title")),
        None,
    )
    if changelog_idx is None:
        return text

    region_end = len(text)
    versions: list[re.Match[str]] = []
    for heading in headings[changelog_idx + 1:]:
        level = len(heading.group("equals"))
        if level <= 3:
            region_end = heading.start()
            break
        if level == 4 and heading.group("title").strip().startswith("Version"):
            versions.append(heading)

    if not versions:
        return text

    starts = [v.start() for v in versions] + [region_end]
    chunks = [text[start:end] for start, end in zip(starts, starts[1:])]

    region = text[starts[0]:region_end]
    reordered = "".join(
        chunk if chunk.endswith("\n") else chunk + "\n" for chunk in reversed(chunks)
    )
    if not region.endswith("\n"):
        reordered = reordered[:-1]

    logger.debug("Reversed %d changelog versions", len(chunks))
    return text[:starts[0]] + reordered + text[region_end:]


def prettify_checkmarks(text: str) -> str:
    """Replace plain check marks with the check mark emoji."""
    return text.replace(CHECKMARK, CHECKMARK_EMOJI)
