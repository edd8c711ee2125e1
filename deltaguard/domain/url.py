"""
Default URL sanitizer used when no caller hook takes over.

Values that do not start with an allowed scheme, a fragment, a path or an
inline image are prefixed with `unsafe:` so a renderer never emits an
executable scheme at the start of an href.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

DEFAULT_ALLOWED_SCHEMES: tuple[str, ...] = (
    "http",
    "https",
    "ftp",
    "sftp",
    "file",
    "blob",
    "mailto",
    "tel",
)

UNSAFE_PREFIX = "unsafe:"

_LEADING_WHITESPACE_PER_LINE = re.compile(r"^\s*", re.MULTILINE)


def _allow_pattern(allowed_schemes: Iterable[str]) -> re.Pattern[str]:
    schemes = "|".join(re.escape(scheme) for scheme in allowed_schemes)
    prefixes = [r"#", r"/", r"data:image/"]
    if schemes:
        prefixes.insert(0, f"(?:{schemes}):")
    return re.compile(f"^(?:{'|'.join(prefixes)})")


_DEFAULT_ALLOW_PATTERN = _allow_pattern(DEFAULT_ALLOWED_SCHEMES)


def _strip_leading_whitespace(url: str) -> str:
    return _LEADING_WHITESPACE_PER_LINE.sub("", url)


def is_allowed_url(
    url: str,
    allowed_schemes: Iterable[str] = DEFAULT_ALLOWED_SCHEMES,
) -> bool:
    """Check whether a URL starts with an allowed scheme or a safe prefix."""
    pattern = (
        _DEFAULT_ALLOW_PATTERN
        if allowed_schemes is DEFAULT_ALLOWED_SCHEMES
        else _allow_pattern(allowed_schemes)
    )
    return pattern.match(_strip_leading_whitespace(url)) is not None


def sanitize_url(
    url: str,
    allowed_schemes: Iterable[str] = DEFAULT_ALLOWED_SCHEMES,
) -> str:
    """
    Neutralize URLs with unknown or script-executing schemes.

    Leading whitespace is removed from every line first, since browsers
    ignore it when resolving the scheme.

    Returns:
        The whitespace-stripped URL, prefixed with `unsafe:` unless allowed.
    """
    value = _strip_leading_whitespace(url)
    if is_allowed_url(value, allowed_schemes):
        return value
    return UNSAFE_PREFIX + value
