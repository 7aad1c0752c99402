import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from link_scout.config import DEFAULT_USER_AGENTS, ScannerConfig, load_config, read_config_file


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("base_url: http://example.com\nconcurrency: 2", ".yaml", None),
        (json.dumps({"base_url": "http://example.com", "concurrency": 2}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yml", TypeError),
        ("{broken json", ".json", ValueError),
        ("base_url = 'http://example.com'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, ScannerConfig)
        assert cfg.base_url == "http://example.com"
        assert cfg.concurrency == 2


def test_defaults():
    cfg = ScannerConfig(base_url="https://x.test")
    assert cfg.concurrency == 4
    assert cfg.timeout == 10.0
    assert cfg.user_agents == DEFAULT_USER_AGENTS
    assert cfg.report_file == Path("report.txt")


def test_overrides_win_and_none_is_ignored(tmp_path):
    cfg_path = write_file(tmp_path, "base_url: http://example.com\nconcurrency: 2", ".yaml")
    cfg = load_config(cfg_path, concurrency=8, timeout=None)
    assert cfg.concurrency == 8
    assert cfg.timeout == 10.0


def test_report_file_can_be_disabled(tmp_path):
    cfg_path = write_file(tmp_path, "base_url: http://example.com\nreport_file: null", ".yaml")
    assert load_config(cfg_path).report_file is None


@pytest.mark.parametrize(
    "field,value",
    [
        ("concurrency", 0),
        ("timeout", 0),
        ("user_agents", []),
        ("user_agents", ["  "]),
        ("base_url", "not a url"),
        ("base_url", "ftp://x.test/"),
    ],
)
def test_invalid_values(field, value):
    data = {"base_url": "https://x.test", field: value}
    with pytest.raises(ValidationError):
        ScannerConfig(**data)


def test_unknown_keys_rejected():
    with pytest.raises(ValidationError):
        ScannerConfig(base_url="https://x.test", max_depth=3)


def test_default_file_missing_is_empty(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert read_config_file(None) == {}
    cfg = load_config(None, base_url="https://x.test")
    assert cfg.base_url == "https://x.test"


def test_default_file_is_used(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "base_url: https://x.test\nconcurrency: 6", encoding="utf-8"
    )
    assert load_config(None).concurrency == 6


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")
