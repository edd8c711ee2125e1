"""
Link sanitization shared by the attribute and mention policies.

A caller-supplied hook gets the first say; a string result is trusted
verbatim. Anything else falls back to the default scheme check followed
by href entity encoding, so a link is never dropped and never left raw.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from deltaguard.domain.html import encode_link
from deltaguard.domain.url import sanitize_url

logger = logging.getLogger(__name__)

UrlSanitizerFn = Callable[[str], "str | None"]

MAX_HEADER_LEVEL = 6


@dataclass(frozen=True)
class SanitizerOptions:
    """Per-call sanitizer configuration."""

    # Returns a replacement URL, or None for no opinion
    url_sanitizer: UrlSanitizerFn | None = None
    # Also apply the format predicates to font/size/width/height/target/rel
    strict: bool = False
    max_header_level: int = MAX_HEADER_LEVEL


DEFAULT_OPTIONS = SanitizerOptions()


def sanitize_link(link: str, options: SanitizerOptions | None = None) -> str:
    """
    Sanitize a link through the configured hook or the default policy.

    Exceptions raised by the hook propagate to the caller.
    """
    hook = options.url_sanitizer if options is not None else None
    if callable(hook):
        result = hook(link)
        if isinstance(result, str):
            return result
        logger.debug("URL hook had no opinion on %.50s, using default policy", link)

    return encode_link(sanitize_url(link))
