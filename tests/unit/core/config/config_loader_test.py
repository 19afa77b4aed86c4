# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import pytest

from seqcommit.context import GlobalConfig
from seqcommit.core.config.config_loader import ConfigLoader
from seqcommit.core.exceptions import ConfigurationError
from seqcommit.core.logging.logging import setup_logger


@pytest.fixture
def paths(tmp_path):
    local = tmp_path / "project" / "seqcommit.toml"
    global_ = tmp_path / "user_config" / "seqcommit.toml"
    local.parent.mkdir()
    global_.parent.mkdir()
    return local, global_


def _load(paths, input_args=None, custom=None):
    local, global_ = paths
    return ConfigLoader.get_full_config(
        GlobalConfig,
        input_args or {},
        local,
        "SEQCOMMIT_",
        global_,
        custom,
    )


def test_defaults_with_empty_global_config(paths):
    _, global_ = paths
    global_.write_text("")

    config, used, used_defaults = _load(paths)

    assert config == GlobalConfig()
    assert used == []
    assert used_defaults is True


def test_local_config_is_read(paths):
    local, _ = paths
    local.write_text("check_remote = true\nremote_name = \"upstream\"\n")

    config, used, _ = _load(paths)

    assert config.check_remote is True
    assert config.remote_name == "upstream"
    assert used == ["Local Config"]


def test_priority_order(paths, tmp_path, monkeypatch):
    local, global_ = paths
    custom = tmp_path / "custom.toml"
    custom.write_text("remote_name = \"custom\"\n")
    local.write_text("remote_name = \"local\"\nverbose = true\n")
    global_.write_text("remote_name = \"global\"\nsilent = true\ncheck_remote = false\n")
    monkeypatch.setenv("SEQCOMMIT_CHECK_REMOTE", "true")

    config, used, used_defaults = _load(paths, {"remote_name": "args"}, custom)

    assert config.remote_name == "args"
    assert config.verbose is True
    # env beats global
    assert config.check_remote is True
    assert config.silent is True
    assert used == ["Input Args", "Local Config", "Environment Variables", "Global Config"]
    assert used_defaults is False


def test_custom_config_beats_local(paths, tmp_path):
    local, _ = paths
    custom = tmp_path / "custom.toml"
    custom.write_text("check_remote = false\n")
    local.write_text("check_remote = true\n")

    config, used, _ = _load(paths, custom=custom)

    assert config.check_remote is False
    assert used == ["Custom Config"]


def test_missing_custom_config_is_fatal(paths, tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        _load(paths, custom=tmp_path / "nope.toml")

    assert "does not exist" in exc_info.value.message


def test_malformed_toml_is_fatal(paths):
    local, _ = paths
    local.write_text("check_remote = = yes\n")

    with pytest.raises(ConfigurationError) as exc_info:
        _load(paths)

    assert str(local) in exc_info.value.message


def test_invalid_value_is_fatal(paths):
    local, _ = paths
    local.write_text("check_remote = \"sometimes\"\n")

    with pytest.raises(ConfigurationError) as exc_info:
        _load(paths)

    assert exc_info.value.message == "invalid configuration"
    assert "check_remote" in exc_info.value.details


def test_unknown_keys_are_ignored(paths):
    local, _ = paths
    local.write_text("model = \"gpt\"\ncheck_remote = true\n")

    config, _, _ = _load(paths)

    assert config.check_remote is True


def test_load_env_strips_prefix_and_lowercases(monkeypatch):
    monkeypatch.setenv("SEQCOMMIT_REMOTE_NAME", "mirror")
    monkeypatch.setenv("OTHER_REMOTE_NAME", "ignored")

    data = ConfigLoader.load_env("SEQCOMMIT_")

    assert data["remote_name"] == "mirror"
    assert "other_remote_name" not in data


def test_load_toml_missing_file_is_empty(tmp_path):
    assert ConfigLoader.load_toml(tmp_path / "missing.toml") == {}


def test_no_config_file_at_all_is_fatal(paths, monkeypatch):
    local, global_ = paths
    monkeypatch.setenv("SEQCOMMIT_CHECK_REMOTE", "true")

    with pytest.raises(ConfigurationError) as exc_info:
        _load(paths, {"check_remote": True})

    assert exc_info.value.message == "failed to load config: no configuration file found"
    assert str(local) in exc_info.value.details
    assert str(global_) in exc_info.value.details


def test_global_config_alone_is_enough(paths):
    _, global_ = paths
    global_.write_text("remote_name = \"upstream\"\n")

    config, used, _ = _load(paths)

    assert config.remote_name == "upstream"
    assert used == ["Global Config"]


def test_source_values_with_brackets_are_logged(paths, capsys):
    local, _ = paths
    local.write_text("remote_name = \"[/x]\"\n")
    setup_logger("config", debug=True)

    config, _, _ = _load(paths)

    assert config.remote_name == "[/x]"
    captured = capsys.readouterr()
    assert "[/x]" in captured.out
    assert "Logging error" not in captured.err
