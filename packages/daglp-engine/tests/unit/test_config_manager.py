from pathlib import Path

from pydaglp.engine.config import ConfigManager


def write_config(work_dir: Path, text: str):
    config_dir = work_dir / ".daglp"
    config_dir.mkdir()
    (config_dir / "config.yml").write_text(text, encoding="utf-8")


def test_defaults_without_file(tmp_path):
    config = ConfigManager(tmp_path)
    assert config.get("git.rev") == "HEAD"
    assert config.get("git.timestamp") == "author"
    assert config.get("output.format") == "text"


def test_user_value_overrides_default(tmp_path):
    write_config(tmp_path, "git:\n  rev: main\n  timestamp: committer\n")
    config = ConfigManager(tmp_path)
    assert config.get("git.rev") == "main"
    assert config.get("git.timestamp") == "committer"
    # 未覆盖的键回落到默认值
    assert config.get("output.format") == "text"


def test_fallback_for_unknown_key(tmp_path):
    config = ConfigManager(tmp_path)
    assert config.get("no.such.key", "fallback") == "fallback"


def test_invalid_yaml_is_ignored(tmp_path, caplog):
    write_config(tmp_path, "git: [unclosed\n")
    config = ConfigManager(tmp_path)
    assert config.user_config == {}
    assert config.get("git.rev") == "HEAD"
    assert "config.yml" in caplog.text


def test_non_mapping_document_is_ignored(tmp_path):
    write_config(tmp_path, "- just\n- a list\n")
    config = ConfigManager(tmp_path)
    assert config.user_config == {}


def test_empty_file(tmp_path):
    write_config(tmp_path, "")
    assert ConfigManager(tmp_path).user_config == {}
