from __future__ import annotations

from pathlib import Path

import pytest

from areacodekit.config import AreaCodeSettings, load_settings

_ENV_KEYS = (
    "AREACODEKIT_CONFIG",
    "AREACODEKIT_DATA_DIR",
    "AREACODEKIT_PARALLEL_LOADING",
    "AREACODEKIT_SUGGESTION_LIMIT",
    "AREACODEKIT_LOG_LEVEL",
    "AREACODEKIT_JSON_LOGGING",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    settings = load_settings()
    assert settings == AreaCodeSettings()
    assert settings.data_dir is None
    assert settings.suggestion_limit == 10


def test_yaml_then_dotenv_then_os_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    yaml_path = tmp_path / "areacodekit.yaml"
    yaml_path.write_text(
        "suggestion_limit: 3\nlog_level: DEBUG\nparallel_loading: false\nunknown_key: 1\n",
        encoding="utf-8",
    )
    env_path = tmp_path / "custom.env"
    env_path.write_text(
        "AREACODEKIT_SUGGESTION_LIMIT=5\nAREACODEKIT_JSON_LOGGING=true\n", encoding="utf-8"
    )
    monkeypatch.setenv("AREACODEKIT_LOG_LEVEL", "WARNING")

    settings = load_settings(yaml_path=yaml_path, env_path=env_path)

    assert settings.suggestion_limit == 5
    assert settings.json_logging is True
    assert settings.log_level == "WARNING"
    assert settings.parallel_loading is False


def test_config_path_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    yaml_path = tmp_path / "cfg.yaml"
    yaml_path.write_text(f"data_dir: {tmp_path}\n", encoding="utf-8")
    monkeypatch.setenv("AREACODEKIT_CONFIG", str(yaml_path))

    assert load_settings().data_dir == tmp_path


def test_default_dotenv_in_working_directory(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("AREACODEKIT_DATA_DIR=/srv/area-codes\n", encoding="utf-8")
    assert load_settings().data_dir == Path("/srv/area-codes")


def test_negative_suggestion_limit_is_rejected() -> None:
    with pytest.raises(ValueError):
        AreaCodeSettings(suggestion_limit=-1)
