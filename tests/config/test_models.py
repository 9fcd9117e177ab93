"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from identiconctl.config.models import IdenticonConfig, IdenticonctlConfig
from identiconctl.domain.color import RGBColor
from identiconctl.domain.compositor import MAX_SIZE


class TestIdenticonConfig:
    def test_defaults(self) -> None:
        cfg = IdenticonConfig()
        assert cfg.size == 60
        assert cfg.background == "240,240,240"
        assert cfg.background_color == RGBColor(240, 240, 240)

    def test_frozen(self) -> None:
        cfg = IdenticonConfig()
        with pytest.raises(ValidationError):
            cfg.size = 2  # type: ignore[misc]

    @pytest.mark.parametrize("size", [0, -1, MAX_SIZE + 1])
    def test_size_bounds(self, size: int) -> None:
        with pytest.raises(ValidationError):
            IdenticonConfig(size=size)

    def test_max_size_allowed(self) -> None:
        assert IdenticonConfig(size=MAX_SIZE).size == MAX_SIZE

    @pytest.mark.parametrize("background", ["", "1,2", "300,0,0", "white"])
    def test_invalid_background(self, background: str) -> None:
        with pytest.raises(ValidationError):
            IdenticonConfig(background=background)


class TestRootConfig:
    def test_model_validate_sparse(self) -> None:
        cfg = IdenticonctlConfig.model_validate({"identicon": {"size": 3}})
        assert cfg.identicon.size == 3
        assert cfg.identicon.background == "240,240,240"
