"""
HTML and URL string primitives.

Entity encode/decode for HTML text and href contexts, whitespace
preservation for collapsed runs, and start/end tag assembly.

Invariants:
- encode_html and encode_link are idempotent (decode before encode)
- No function raises; None or empty input yields an empty string
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import NamedTuple


class TagAttr(NamedTuple):
    """A single key or key="value" pair in a start tag."""

    key: str
    value: str | None = None


AttrPair = tuple[str, "str | None"]


class EncodeTarget(Enum):
    HTML = "html"
    URL = "url"


# Order matters: '&' must be encoded first and decoded first.
ENCODE_MAPPINGS: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
    ("/", "&#x2F;"),
    ("(", "&#40;"),
    (")", "&#41;"),
)

SELF_CLOSING_TAGS = frozenset(["img", "br"])

NBSP = "&nbsp;"
_WHITESPACE_RUN = re.compile(r"[\u00a0 ][\u00a0 ]+")
_LEADING_WHITESPACE = re.compile(r"^[\u00a0 ]+")
_TRAILING_WHITESPACE = re.compile(r"[\u00a0 ]+\Z")


def encode_mappings(target: EncodeTarget) -> list[tuple[str, str]]:
    """
    Entity pairs for an encoding context.

    HTML text keeps the slash entity and leaves parentheses alone;
    URLs need their slashes intact but get parentheses escaped.
    """
    if target is EncodeTarget.HTML:
        return [(char, entity) for char, entity in ENCODE_MAPPINGS if char not in "()"]
    return [(char, entity) for char, entity in ENCODE_MAPPINGS if char != "/"]


def _encode(text: str, mappings: Iterable[tuple[str, str]]) -> str:
    for char, entity in mappings:
        text = text.replace(char, entity)
    return text


def _decode(text: str, mappings: Iterable[tuple[str, str]]) -> str:
    for char, entity in mappings:
        text = text.replace(entity, char)
    return text


# --- Tags ---


def _as_tag_attr(entry: object) -> TagAttr | None:
    if isinstance(entry, TagAttr):
        return entry
    if isinstance(entry, str):
        return TagAttr(entry)
    if isinstance(entry, tuple) and 1 <= len(entry) <= 2 and isinstance(entry[0], str):
        return TagAttr(*entry)
    return None


def _tag_attrs(attrs: object) -> list[TagAttr]:
    # A lone (key, value) pair is one attribute, not a list of them
    single = _as_tag_attr(attrs) if isinstance(attrs, tuple) else None
    if single is not None:
        return [single]
    if not isinstance(attrs, Iterable) or isinstance(attrs, (str, bytes)):
        return []
    pairs = []
    for entry in attrs:
        attr = _as_tag_attr(entry)
        if attr is not None:
            pairs.append(attr)
    return pairs


def make_start_tag(
    tag: str | None,
    attrs: TagAttr | AttrPair | Iterable[TagAttr | AttrPair] | None = None,
) -> str:
    """
    Build an opening tag.

    Attributes render as `key` or `key="value"`; values are emitted as
    given, so callers encode them first.
    """
    if not tag:
        return ""

    attrs_str = ""
    if attrs:
        pairs = _tag_attrs(attrs)
        attrs_str = " ".join(
            f'{attr.key}="{attr.value}"' if attr.value else attr.key for attr in pairs
        )

    closing = "/>" if tag in SELF_CLOSING_TAGS else ">"
    if attrs_str:
        return f"<{tag} {attrs_str}{closing}"
    return f"<{tag}{closing}"


def make_end_tag(tag: str | None = "") -> str:
    """Build a closing tag, or an empty string when there is no tag."""
    return f"</{tag}>" if tag else ""


# --- HTML text ---


def decode_html(text: str | None) -> str:
    """Replace HTML entities from the encoding table with their literals."""
    if not text:
        return ""
    return _decode(text, encode_mappings(EncodeTarget.HTML))


def encode_html(text: str | None, prevent_double_encoding: bool = True) -> str:
    """
    Escape & < > " ' and / for insertion into HTML text or attributes.

    With prevent_double_encoding the input is decoded first, so already
    escaped text comes out unchanged instead of gaining another &amp;.
    """
    if not text:
        return ""
    if prevent_double_encoding:
        text = decode_html(text)
    return _encode(text, encode_mappings(EncodeTarget.HTML))


def encode_link(text: str | None) -> str:
    """Idempotent entity encoding for href/src values."""
    if not text:
        return ""
    mappings = encode_mappings(EncodeTarget.URL)
    return _encode(_decode(text, mappings), mappings)


# --- Whitespace ---


def _replace_whitespace_run(match: re.Match[str]) -> str:
    length = len(match.group(0))
    if length <= 2:
        return NBSP * length
    if length % 2 == 0:
        return NBSP + f"{NBSP} " * ((length - 2) // 2) + NBSP
    return f"{NBSP} " + f"{NBSP} " * ((length - 2) // 2) + NBSP


def encode_whitespaces(text: str | None) -> str:
    """
    Keep runs of spaces visible after HTML whitespace collapsing.

    Runs alternate &nbsp; with literal spaces; a lone leading or
    trailing space becomes a single &nbsp;.
    """
    if not text:
        return ""
    text = _WHITESPACE_RUN.sub(_replace_whitespace_run, text)
    text = _LEADING_WHITESPACE.sub(_replace_whitespace_run, text)
    text = _TRAILING_WHITESPACE.sub(_replace_whitespace_run, text)
    return text
