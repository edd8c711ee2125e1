from pathlib import Path
from typing import Any

import pytest

from deltaguard.domain.links import SanitizerOptions


class RejectingMentionPolicy:
    """Mention policy that validates nothing."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def sanitize(self, mention: Any, options: SanitizerOptions | None = None) -> dict[str, Any]:
        self.calls.append(mention)
        return {}


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def options() -> SanitizerOptions:
    """Default options: no hook, lenient passthrough."""
    return SanitizerOptions()


@pytest.fixture
def strict_options() -> SanitizerOptions:
    return SanitizerOptions(strict=True)


@pytest.fixture
def safe_hook_options() -> SanitizerOptions:
    """Options whose URL hook replaces every link."""
    return SanitizerOptions(url_sanitizer=lambda url: "https://safe")


@pytest.fixture
def rejecting_mention_policy() -> RejectingMentionPolicy:
    return RejectingMentionPolicy()
