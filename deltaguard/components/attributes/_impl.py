"""
AttributeSanitizer - Allow-list filtering for delta op attributes.

Each recognised attribute name is bound to exactly one rule kind in
ATTRIBUTE_RULES. That table is the security boundary: names outside it
are copied through untouched, so extension attributes are the caller's
responsibility.

Functional Core - pure business logic.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from deltaguard.components.mentions import DEFAULT_MENTION_POLICY, MentionPolicyPort
from deltaguard.domain.links import DEFAULT_OPTIONS, SanitizerOptions, sanitize_link

from .models import AttributeRejection

logger = logging.getLogger(__name__)

# --- Format Predicates ---

HEX_COLOR_PATTERN = re.compile(r"#(?:[0-9A-F]{6}|[0-9A-F]{3})", re.IGNORECASE | re.ASCII)
COLOR_LITERAL_PATTERN = re.compile(r"[a-z]{1,50}", re.IGNORECASE | re.ASCII)
_RGB_CHANNEL = r"(?:0|25[0-5]|2[0-4]\d|1\d\d|0?\d?\d)"
RGB_COLOR_PATTERN = re.compile(
    rf"rgb\((?:{_RGB_CHANNEL},\s*){{2}}{_RGB_CHANNEL}\)",
    re.IGNORECASE | re.ASCII,
)
FONT_NAME_PATTERN = re.compile(r"[a-z\s0-9\- ]{1,30}", re.IGNORECASE)
SIZE_PATTERN = re.compile(r"[a-z0-9\-]{1,20}", re.IGNORECASE)
WIDTH_PATTERN = re.compile(r"[0-9]*(?:px|em|%)?")
TARGET_PATTERN = re.compile(r"[_a-zA-Z0-9\-]{1,50}")
REL_PATTERN = re.compile(r"[a-zA-Z\s\-]{1,250}")
LIST_PATTERN = re.compile(r"bullet|ordered(?::[aAiI1])?")

# Numeric string forms accepted by Number()
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
RADIX_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
INFINITY_PATTERN = re.compile(r"[+-]?Infinity")

SCRIPT_SUB = "sub"
SCRIPT_SUPER = "super"


def _matches(pattern: re.Pattern[str], value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_valid_hex_color(value: Any) -> bool:
    return _matches(HEX_COLOR_PATTERN, value)


def is_valid_color_literal(value: Any) -> bool:
    return _matches(COLOR_LITERAL_PATTERN, value)


def is_valid_rgb_color(value: Any) -> bool:
    return _matches(RGB_COLOR_PATTERN, value)


def is_valid_color(value: Any) -> bool:
    """Hex, bare color name, or rgb(r, g, b) with channels in 0-255."""
    text = str(value)
    return is_valid_hex_color(text) or is_valid_color_literal(text) or is_valid_rgb_color(text)


def is_valid_font_name(value: Any) -> bool:
    return _matches(FONT_NAME_PATTERN, value)


def is_valid_size(value: Any) -> bool:
    return _matches(SIZE_PATTERN, value)


def is_valid_width(value: Any) -> bool:
    return _matches(WIDTH_PATTERN, value)


def is_valid_target(value: Any) -> bool:
    return _matches(TARGET_PATTERN, value)


def is_valid_rel(value: Any) -> bool:
    return _matches(REL_PATTERN, value)


def is_valid_list(value: Any) -> bool:
    """bullet, ordered, or ordered:<a|A|i|I|1>."""
    return _matches(LIST_PATTERN, value)


def is_valid_script(value: Any) -> bool:
    return value in (SCRIPT_SUB, SCRIPT_SUPER)


# --- Rule Table ---


class RuleKind(Enum):
    BOOLEAN = "boolean"
    COLOR = "color"
    PASSTHROUGH = "passthrough"
    ENUM = "enum"
    NUMERIC_CLAMP = "numeric_clamp"
    LINK = "link"
    COMPOSITE = "composite"


@dataclass(frozen=True)
class AttributeRule:
    """How one recognised attribute is validated."""

    kind: RuleKind
    validator: Callable[[Any], bool] | None = None
    # Only applied when SanitizerOptions.strict is set
    strict_validator: Callable[[Any], bool] | None = None


_BOOLEAN = AttributeRule(RuleKind.BOOLEAN)
_COLOR = AttributeRule(RuleKind.COLOR, validator=is_valid_color)
_PASSTHROUGH = AttributeRule(RuleKind.PASSTHROUGH)
_COMPOSITE = AttributeRule(RuleKind.COMPOSITE)

ATTRIBUTE_RULES: Mapping[str, AttributeRule] = MappingProxyType(
    {
        "bold": _BOOLEAN,
        "italic": _BOOLEAN,
        "underline": _BOOLEAN,
        "strike": _BOOLEAN,
        "code": _BOOLEAN,
        "blockquote": _BOOLEAN,
        "code-block": _BOOLEAN,
        "renderAsBlock": _BOOLEAN,
        "background": _COLOR,
        "color": _COLOR,
        "font": AttributeRule(RuleKind.PASSTHROUGH, strict_validator=is_valid_font_name),
        "size": AttributeRule(RuleKind.PASSTHROUGH, strict_validator=is_valid_size),
        "width": AttributeRule(RuleKind.PASSTHROUGH, strict_validator=is_valid_width),
        "height": AttributeRule(RuleKind.PASSTHROUGH, strict_validator=is_valid_width),
        "alt": _PASSTHROUGH,
        "target": AttributeRule(RuleKind.PASSTHROUGH, strict_validator=is_valid_target),
        "rel": AttributeRule(RuleKind.PASSTHROUGH, strict_validator=is_valid_rel),
        "list": AttributeRule(RuleKind.ENUM, validator=is_valid_list),
        "link": AttributeRule(RuleKind.LINK),
        "script": AttributeRule(RuleKind.ENUM, validator=is_valid_script),
        "header": AttributeRule(RuleKind.NUMERIC_CLAMP),
        "align": _PASSTHROUGH,
        "direction": _PASSTHROUGH,
        "indent": _PASSTHROUGH,
        "mentions": _COMPOSITE,
        "mention": _COMPOSITE,
    }
)


# --- Value Helpers ---


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def to_number(value: Any) -> float:
    """
    Numeric coercion with JavaScript Number() semantics.

    Blank strings and None become 0; anything unparsable becomes NaN.
    Integers too large for a float become +/-inf.
    """
    if isinstance(value, (bool, int)):
        return _int_to_float(int(value))
    if isinstance(value, float):
        return value
    if value is None:
        return 0.0
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if not text:
        return 0.0
    if INFINITY_PATTERN.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    if DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    if RADIX_PATTERN.fullmatch(text):
        # 0x / 0o / 0b prefixes
        return _int_to_float(int(text, 0))
    return math.nan


def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _clamp_header(value: Any, max_level: int) -> int | float | None:
    number = to_number(value)
    if not number or math.isnan(number):
        return None
    level = min(number, float(max_level))
    return int(level) if level.is_integer() else level


# --- Sanitization ---


def sanitize_with_report(
    raw: Any,
    options: SanitizerOptions | None = None,
    mention_policy: MentionPolicyPort | None = None,
) -> tuple[dict[str, Any], list[AttributeRejection]]:
    """
    Sanitize an attribute map and describe what was dropped.

    Returns:
        Tuple of (clean attributes, rejections). Falsy values count as
        absent and are not reported.
    """
    clean: dict[str, Any] = {}
    rejections: list[AttributeRejection] = []

    if not isinstance(raw, Mapping):
        return clean, rejections

    options = options or DEFAULT_OPTIONS
    policy = mention_policy or DEFAULT_MENTION_POLICY

    def reject(name: str, code: str, message: str) -> None:
        logger.debug("Dropped attribute %s: %s", name, message)
        rejections.append(AttributeRejection(code=code, message=message, path=name))

    for name, rule in ATTRIBUTE_RULES.items():
        value = raw.get(name)
        if not value or rule.kind is RuleKind.COMPOSITE:
            continue

        if rule.kind is RuleKind.BOOLEAN:
            clean[name] = True

        elif rule.kind is RuleKind.COLOR or rule.kind is RuleKind.ENUM:
            if rule.validator is not None and rule.validator(value):
                clean[name] = value
            else:
                reject(name, f"invalid_{name}", f"Value {str(value)[:50]!r} is not allowed")

        elif rule.kind is RuleKind.PASSTHROUGH:
            if options.strict and rule.strict_validator is not None:
                if not rule.strict_validator(_as_text(value)):
                    reject(name, "invalid_format", f"Value {str(value)[:50]!r} fails format check")
                    continue
            clean[name] = value

        elif rule.kind is RuleKind.LINK:
            clean[name] = sanitize_link(str(value), options)

        elif rule.kind is RuleKind.NUMERIC_CLAMP:
            level = _clamp_header(value, options.max_header_level)
            if level is None:
                reject(name, f"invalid_{name}", f"Value {str(value)[:50]!r} is not a number")
            else:
                clean[name] = level

    mentions, mention = raw.get("mentions"), raw.get("mention")
    if mentions and mention:
        if policy.sanitize(mention, options):
            clean["mentions"] = True
            clean["mention"] = mention
        else:
            reject("mention", "invalid_mention", "Mention failed the mention policy")

    # Unrecognised extension attributes pass through unchanged
    for name, value in raw.items():
        if name not in ATTRIBUTE_RULES:
            clean[name] = value

    return clean, rejections


def sanitize_attributes(
    raw: Any,
    options: SanitizerOptions | None = None,
    *,
    mention_policy: MentionPolicyPort | None = None,
) -> dict[str, Any]:
    """
    Reduce a raw attribute map to its safe subset.

    Never raises for malformed attribute data and never mutates `raw`.
    Only the URL hook in `options` may raise.
    """
    clean, _ = sanitize_with_report(raw, options, mention_policy)
    return clean


# --- Attribute Sanitizer ---


class AttributeSanitizer:
    """
    Attribute sanitizer service.

    Binds options and a mention policy for repeated use.
    """

    def __init__(
        self,
        options: SanitizerOptions | None = None,
        mention_policy: MentionPolicyPort | None = None,
    ) -> None:
        self._options = options or DEFAULT_OPTIONS
        self._mention_policy = mention_policy or DEFAULT_MENTION_POLICY

    @property
    def options(self) -> SanitizerOptions:
        return self._options

    def sanitize(self, raw: Any) -> dict[str, Any]:
        """Sanitize an attribute map."""
        return sanitize_attributes(raw, self._options, mention_policy=self._mention_policy)

    def sanitize_with_report(
        self, raw: Any
    ) -> tuple[dict[str, Any], list[AttributeRejection]]:
        """Sanitize an attribute map and report dropped attributes."""
        return sanitize_with_report(raw, self._options, self._mention_policy)

    def sanitize_link(self, link: str) -> str:
        return sanitize_link(link, self._options)
