from pydantic import BaseModel, ConfigDict, Field, field_validator

from deltaguard.domain.url import DEFAULT_ALLOWED_SCHEMES


class SanitizerRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Apply font/size/width/height/target/rel format checks
    strict_validation: bool = False
    allowed_link_schemes: list[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_SCHEMES))
    max_header_level: int = Field(default=6, ge=1, le=6)

    @field_validator("allowed_link_schemes")
    @classmethod
    def schemes_are_bare_names(cls, value: list[str]) -> list[str]:
        for scheme in value:
            if not scheme or not scheme.replace("+", "").replace("-", "").replace(".", "").isalnum():
                raise ValueError(f"Invalid scheme name: {scheme!r}")
            if scheme != scheme.lower():
                raise ValueError(f"Scheme names must be lowercase: {scheme!r}")
        return value


class Rules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sanitizer: SanitizerRules = Field(default_factory=SanitizerRules)
