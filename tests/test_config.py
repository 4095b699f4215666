"""
Tests for codec configuration loading.
"""
import pytest
from pydantic import ValidationError

from tket_pass_json.compiler_pass.config import CodecConfig, get_config, reset_config
from tket_pass_json.compiler_pass.pass_codec.defs import DEFAULT_MAX_DEPTH


def test_defaults(tmp_path):
    config = CodecConfig.from_yaml_and_env(config_path=tmp_path / "missing.yml", env_dir=tmp_path)
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert config.allow_extra_fields is False
    assert config.json_indent is None


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("TKET_PASS_MAX_DEPTH", "32")
    monkeypatch.setenv("TKET_PASS_ALLOW_EXTRA_FIELDS", "true")
    monkeypatch.setenv("TKET_PASS_JSON_INDENT", "2")

    config = CodecConfig.from_yaml_and_env(config_path=tmp_path / "missing.yml", env_dir=tmp_path)
    assert config.max_depth == 32
    assert config.allow_extra_fields is True
    assert config.json_indent == 2


def test_env_file_is_loaded(tmp_path, monkeypatch):
    # registered with monkeypatch so the value loaded from the file is undone after the test
    monkeypatch.setenv("TKET_PASS_MAX_DEPTH", "1")
    (tmp_path / ".env.dev").write_text("TKET_PASS_MAX_DEPTH=64\n", encoding="utf-8")

    config = CodecConfig.from_yaml_and_env(config_path=tmp_path / "missing.yml", env="dev", env_dir=tmp_path)
    assert config.max_depth == 64


def test_yaml_section_for_environment(tmp_path):
    config_file = tmp_path / "codec.yml"
    config_file.write_text(
        "local:\n  max_depth: 16\n  json_indent: 4\nprd:\n  max_depth: 1024\n",
        encoding="utf-8",
    )

    local = CodecConfig.from_yaml_and_env(config_path=config_file, env="local", env_dir=tmp_path)
    assert (local.max_depth, local.json_indent) == (16, 4)

    prd = CodecConfig.from_yaml_and_env(config_path=config_file, env="prd", env_dir=tmp_path)
    assert (prd.max_depth, prd.json_indent) == (1024, None)


def test_env_wins_over_yaml(tmp_path, monkeypatch):
    config_file = tmp_path / "codec.yml"
    config_file.write_text("acc:\n  max_depth: 16\n", encoding="utf-8")
    monkeypatch.setenv("TKET_PASS_MAX_DEPTH", "8")

    config = CodecConfig.from_yaml_and_env(config_path=config_file, env="acc", env_dir=tmp_path)
    assert config.max_depth == 8


def test_invalid_environment():
    with pytest.raises(ValueError, match="Invalid environment"):
        CodecConfig.from_yaml_and_env(env="staging")


@pytest.mark.parametrize("value", [0, -5])
def test_max_depth_must_be_positive(value):
    with pytest.raises(ValidationError):
        CodecConfig(max_depth=value)


@pytest.mark.parametrize("flag, expected", [("1", True), ("yes", True), ("ON", True), ("false", False), ("0", False)])
def test_flag_spellings(flag, expected):
    assert CodecConfig(allow_extra_fields=flag).allow_extra_fields is expected


def test_singleton(monkeypatch):
    monkeypatch.setenv("TKET_PASS_MAX_DEPTH", "12")
    first = get_config()
    assert first.max_depth == 12
    assert get_config() is first

    reset_config()
    assert get_config() is not first
