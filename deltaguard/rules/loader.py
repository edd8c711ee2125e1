import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from deltaguard.domain.html import encode_link
from deltaguard.domain.links import SanitizerOptions, UrlSanitizerFn
from deltaguard.domain.url import DEFAULT_ALLOWED_SCHEMES, sanitize_url
from deltaguard.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "rules.yaml"
RULES_PATH_ENV = "DELTAGUARD_RULES"


class RulesError(ValueError):
    """Raised when the rules file is not valid YAML or fails the schema."""


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def _strip_code_fence(content: str) -> str:
    # Rules may be kept inside a ```yaml block of a markdown file
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def resolve_rules_path(path: Path | str | None = None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)
    return _find_project_root() / DEFAULT_RULES_PATH


def load_rules(path: Path | str | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises RulesError if YAML or schema invalid.
    """
    rules_path = resolve_rules_path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found at: {rules_path}")

    with open(rules_path) as f:
        content = _strip_code_fence(f.read())

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise RulesError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data or {})
    except ValidationError as e:
        raise RulesError(f"Rules validation failed:\n{e}") from e

    logger.debug("Loaded rules from %s", rules_path)
    return rules


def _scheme_restricted_sanitizer(schemes: list[str]) -> UrlSanitizerFn:
    allowed = tuple(schemes)

    def url_sanitizer(url: str) -> str:
        return encode_link(sanitize_url(url, allowed))

    return url_sanitizer


def options_from_rules(
    rules: Rules,
    url_sanitizer: UrlSanitizerFn | None = None,
    strict: bool | None = None,
) -> SanitizerOptions:
    """
    Build per-call sanitizer options from loaded rules.

    A non-default scheme list becomes a URL hook unless the caller
    supplies its own; `strict` overrides the rules' strict_validation.
    """
    sanitizer_rules = rules.sanitizer
    schemes = sanitizer_rules.allowed_link_schemes
    if url_sanitizer is None and tuple(schemes) != DEFAULT_ALLOWED_SCHEMES:
        url_sanitizer = _scheme_restricted_sanitizer(schemes)

    return SanitizerOptions(
        url_sanitizer=url_sanitizer,
        strict=sanitizer_rules.strict_validation if strict is None else strict,
        max_header_level=sanitizer_rules.max_header_level,
    )
