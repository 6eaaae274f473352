"""Tests for configuration loading."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from imgbb_batch.config import DEFAULT_TIMEOUT, load_config
from imgbb_batch.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def no_dotenv() -> Iterator[MagicMock]:
    """Keep a developer's .env file out of the tests."""
    with patch("imgbb_batch.config.load_dotenv") as mock:
        yield mock


class TestLoadConfig:
    """Tests for load_config."""

    def test_reads_api_key(self, api_key_env: str, tmp_path: Path) -> None:
        """Test that the key and defaults are resolved."""
        config = load_config(source_dir=tmp_path)

        assert config.api_key == api_key_env
        assert config.source_dir == tmp_path.resolve()
        assert config.output_dir == Path(".")
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.expiration is None

    def test_default_source_dir(self, api_key_env: str) -> None:
        """Test that ./images is used when no folder is given."""
        config = load_config()

        assert config.source_dir == Path("./images").resolve()

    def test_loads_dotenv(self, api_key_env: str, no_dotenv: MagicMock) -> None:
        """Test that the .env file is consulted."""
        load_config()

        no_dotenv.assert_called_once()

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_api_key(self, monkeypatch: pytest.MonkeyPatch, value: str | None) -> None:
        """Test that a missing or blank key is a configuration error."""
        if value is None:
            monkeypatch.delenv("IMGBB_API_KEY", raising=False)
        else:
            monkeypatch.setenv("IMGBB_API_KEY", value)

        with pytest.raises(ConfigurationError, match="export IMGBB_API_KEY="):
            load_config()

    def test_invalid_timeout(self, api_key_env: str) -> None:
        with pytest.raises(ConfigurationError, match="Timeout"):
            load_config(timeout=0)

    @pytest.mark.parametrize("expiration", [59, 15552001])
    def test_invalid_expiration(self, api_key_env: str, expiration: int) -> None:
        with pytest.raises(ConfigurationError, match="Expiration"):
            load_config(expiration=expiration)

    def test_config_is_read_only(self, api_key_env: str) -> None:
        """Test that the resolved configuration cannot be changed."""
        config = load_config(timeout=10, expiration=3600, verbose=True)

        assert (config.timeout, config.expiration, config.verbose) == (10, 3600, True)
        with pytest.raises(AttributeError):
            config.api_key = "other"  # type: ignore[misc]
