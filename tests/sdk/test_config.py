import os
from pathlib import Path
from unittest.mock import patch

import pydantic
import pytest

from restpipe import Config


class TestConfig:
    def test_defaults(self):
        config = Config()

        assert config.timeout == 60.0
        assert config.follow_redirects is True
        assert config.logging_enabled is True
        assert config.debug is False

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("RESTPIPE_TIMEOUT", "15")
        monkeypatch.setenv("RESTPIPE_LOGGING_ENABLED", "false")

        config = Config.from_env(dotenv_path=str(tmp_path / "missing.env"))

        assert config.timeout == 15.0
        assert config.logging_enabled is False
        assert config.debug is False

    def test_from_dotenv_file(self, tmp_path: Path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("RESTPIPE_TIMEOUT=5\nRESTPIPE_DEBUG=true\n")

        with patch.dict(os.environ, {}):
            config = Config.from_env(dotenv_path=str(dotenv))

        assert config.timeout == 5.0
        assert config.debug is True

    def test_environment_wins_over_dotenv(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ):
        monkeypatch.setenv("RESTPIPE_TIMEOUT", "30")
        dotenv = tmp_path / ".env"
        dotenv.write_text("RESTPIPE_TIMEOUT=5\n")

        with patch.dict(os.environ, {}):
            config = Config.from_env(dotenv_path=str(dotenv))

        assert config.timeout == 30.0

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("RESTPIPE_TIMEOUT", "soon")

        with pytest.raises(pydantic.ValidationError):
            Config.from_env(dotenv_path=str(tmp_path / "missing.env"))
