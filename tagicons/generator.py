"""Render the tag replacement stylesheet from tag/icon pairs."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from jinja2 import Environment, PackageLoader, StrictUndefined

from .settings import TagIconPair

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "tags.css"

# Characters that would end the selector or the quoted href value early.
_UNSAFE_TAG_CHARS = re.compile(r"[\s#\"\\]")


class MalformedTagError(ValueError):
    """Raised when a tag is not of the form ``category/name``."""

    def __init__(self, tag: str, position: int) -> None:
        super().__init__(
            f"Tag {tag!r} at position {position + 1} must look like 'category/name'"
        )
        self.tag = tag
        self.position = position


@dataclass(frozen=True, slots=True)
class TagParts:
    """A validated tag split into the pieces the selectors need."""

    tag: str
    category: str
    name: str
    icon: str

    @property
    def clean_tag(self) -> str:
        # Editor token classes drop the separator: task/inbox -> taskinbox.
        return f"{self.category}{self.name}"

    @property
    def has_continuations(self) -> bool:
        # Underscored names are rendered as several adjacent spans.
        return "_" in self.name


@dataclass(frozen=True, slots=True)
class IconRule:
    selector: str
    icon: str


def split_tag(tag: str, position: int = 0) -> tuple[str, str]:
    """Return ``(category, name)`` or raise :class:`MalformedTagError`."""

    segments = tag.split("/")
    if len(segments) != 2 or not all(segments):
        raise MalformedTagError(tag, position)
    if any(_UNSAFE_TAG_CHARS.search(segment) for segment in segments):
        raise MalformedTagError(tag, position)
    return segments[0], segments[1]


def parse_pairs(
    pairs: Iterable[TagIconPair], *, skip_malformed: bool = False
) -> list[TagParts]:
    """Validate pairs, dropping blank rows and (optionally) malformed tags."""

    parsed: list[TagParts] = []
    for position, pair in enumerate(pairs):
        tag = pair.tag.strip()
        if not tag:
            logger.debug("Skipping blank row at position %d", position + 1)
            continue
        try:
            category, name = split_tag(tag, position)
        except MalformedTagError as exc:
            if not skip_malformed:
                raise
            logger.warning("Skipping pair: %s", exc)
            continue
        parsed.append(TagParts(tag=tag, category=category, name=name, icon=pair.icon))
    return parsed


def tag_selectors(parts: TagParts) -> list[str]:
    """Selectors matching the rendered link and the editor token of one tag."""

    token = f".cm-tag-{parts.clean_tag}"
    selectors = [f'.tag[href="#{parts.tag}"]', token]
    if parts.has_continuations:
        selectors.append(f"{token} + span.cm-hashtag")
        selectors.append(f"{token} + span.cm-hashtag + .cm-hashtag")
    return selectors


def _join(selectors: Iterable[str]) -> str:
    return ",\n".join(selectors)


def suppress_selectors(parsed: list[TagParts]) -> str:
    return _join(sel for parts in parsed for sel in tag_selectors(parts))


def after_selectors(parsed: list[TagParts]) -> str:
    return _join(f"{sel}:after" for parts in parsed for sel in tag_selectors(parts))


def active_selectors(parsed: list[TagParts]) -> str:
    return _join(
        f".cm-active {sel}" for parts in parsed for sel in tag_selectors(parts)
    )


def icon_rules(parsed: list[TagParts]) -> list[IconRule]:
    return [
        IconRule(
            selector=_join(
                (
                    f'.tag[href="#{parts.tag}"]:after',
                    f".cm-hashtag-begin.cm-tag-{parts.clean_tag}:after",
                )
            ),
            icon=parts.icon,
        )
        for parts in parsed
    ]


@lru_cache(maxsize=1)
def _environment() -> Environment:
    # Icons go into the stylesheet verbatim, so nothing is escaped.
    return Environment(
        loader=PackageLoader("tagicons", "templates"),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def generate_css(
    pairs: Iterable[TagIconPair], *, skip_malformed: bool = False
) -> str:
    """Return the stylesheet replacing each tag's text with its icon.

    The output holds three shared rule groups (collapse the tag text, size
    the ``:after`` glyph, keep that size on the active editor line) followed
    by one icon rule per pair, each block followed by a blank line. An empty
    pair list renders an empty string.

    Raises
    ------
    MalformedTagError
        If a tag is not ``category/name`` and ``skip_malformed`` is false.
    """

    parsed = parse_pairs(pairs, skip_malformed=skip_malformed)
    if not parsed:
        return ""

    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(
        suppress=suppress_selectors(parsed),
        after=after_selectors(parsed),
        active=active_selectors(parsed),
        icons=icon_rules(parsed),
    )


__all__ = [
    "MalformedTagError",
    "TagParts",
    "generate_css",
    "parse_pairs",
    "split_tag",
    "tag_selectors",
]
