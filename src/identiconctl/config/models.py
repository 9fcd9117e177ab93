"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``identiconctl.toml`` only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from identiconctl.domain.color import RGBColor, parse_color
from identiconctl.domain.compositor import MAX_SIZE
from identiconctl.domain.identicon import DEFAULT_BACKGROUND, DEFAULT_SIZE


class IdenticonConfig(BaseModel):
    """[identicon] section."""

    model_config = {"frozen": True}

    size: int = Field(default=DEFAULT_SIZE, ge=1, le=MAX_SIZE)
    background: str = str(DEFAULT_BACKGROUND)

    @field_validator("background")
    @classmethod
    def _check_background(cls, value: str) -> str:
        parse_color(value)
        return value

    @property
    def background_color(self) -> RGBColor:
        return parse_color(self.background)


class IdenticonctlConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    identicon: IdenticonConfig = Field(default_factory=IdenticonConfig)
