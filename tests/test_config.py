# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

import allure
import pytest
import yaml
from pytest_check import check
from shadowreport.utils.config import (
    DEFAULT_TEAM_NAMES,
    DEFAULT_TEST_TYPES,
    ReportConfig,
    build_report_config,
    find_config_file,
    get_environment_config,
    load_report_config,
    load_yaml_config,
    merge_configs,
)
from shadowreport.utils.core import ReportConfigError, SourceFormat


@allure.feature("Configuration")
@allure.title("Defaults cover vocabularies, layout labels and the cell limit")
def test_default_config():
    config = ReportConfig()

    with check:
        assert config.test_types == DEFAULT_TEST_TYPES
    with check:
        assert config.max_cell_length == 500
    with check:
        assert config.footer_row == "- END -"
    with check:
        assert config.columns_for(SourceFormat.FORMAT_A)[0] == "area"
    with check:
        assert config.columns_for(SourceFormat.FORMAT_B)[0] == "browser"
    with check:
        assert config.relocated_columns() == ["test name", "state"]


@allure.feature("Configuration")
def test_config_validation():
    with pytest.raises(ReportConfigError):
        ReportConfig(formula_keys=["only one"])
    with pytest.raises(ReportConfigError):
        ReportConfig(max_cell_length=-1)
    with pytest.raises(ReportConfigError):
        ReportConfig(week_start="someday")
    with pytest.raises(ReportConfigError):
        ReportConfig(team_names=["raptors", 3])
    with check:
        assert ReportConfig(week_start="Sunday").week_start == "sunday"


@allure.feature("Configuration")
@allure.title("Unknown keys are kept aside and empty vocabularies use the defaults")
def test_build_report_config():
    config = build_report_config({"team_names": [], "columns": ["a", "state"], "spreadsheet_id": "abc"})

    with check:
        assert config.team_names == DEFAULT_TEAM_NAMES
    with check:
        assert config.columns_for(SourceFormat.FORMAT_B) == ["a", "state"]
    with check:
        assert config.extra == {"spreadsheet_id": "abc"}
    with pytest.raises(ReportConfigError):
        build_report_config({"test_types": "api"})
    with pytest.raises(ReportConfigError):
        build_report_config(["api"])


@allure.feature("Configuration")
def test_merge_configs():
    merged = merge_configs({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})

    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}


@allure.feature("Configuration")
def test_environment_config(monkeypatch):
    monkeypatch.setenv("SHADOW_REPORT_TEAM_NAMES", "alpha, beta,")
    monkeypatch.setenv("SHADOW_REPORT_MAX_CELL_LENGTH", "100")
    monkeypatch.setenv("SHADOW_REPORT_WEEKLY_SUMMARY_ENABLED", "no")

    env_config = get_environment_config()

    assert env_config == {"team_names": ["alpha", "beta"], "max_cell_length": 100, "weekly_summary_enabled": False}

    monkeypatch.setenv("SHADOW_REPORT_MAX_CELL_LENGTH", "lots")
    with pytest.raises(ReportConfigError):
        get_environment_config()


@allure.feature("Configuration")
@allure.title("File values are loaded and environment variables override them")
def test_load_report_config(tmp_path, monkeypatch):
    config_file = tmp_path / "shadow-report.yaml"
    config_file.write_text(
        yaml.safe_dump({"team_names": ["raptors"], "max_cell_length": 200, "week_start": "Sunday"}),
        encoding="utf-8",
    )
    monkeypatch.setenv("SHADOW_REPORT_MAX_CELL_LENGTH", "50")

    config = load_report_config(str(config_file))

    with check:
        assert config.team_names == ("raptors",)
    with check:
        assert config.max_cell_length == 50
    with check:
        assert config.week_start == "sunday"


@allure.feature("Configuration")
def test_find_config_file(tmp_path, monkeypatch):
    with check:
        assert find_config_file(search_paths=[str(tmp_path)]) is None

    (tmp_path / "shadow-report.yaml").write_text("{}", encoding="utf-8")
    with check:
        assert find_config_file(search_paths=[str(tmp_path)]) == str(tmp_path / "shadow-report.yaml")

    monkeypatch.setenv("SHADOW_REPORT_CONFIG_PATH", "/etc/custom.yaml")
    with check:
        assert find_config_file(search_paths=[str(tmp_path)]) == "/etc/custom.yaml"


@allure.feature("Configuration")
def test_load_yaml_config_errors(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    broken = tmp_path / "broken.yaml"
    broken.write_text("team_names: [raptors", encoding="utf-8")

    with check:
        assert load_yaml_config(str(empty)) == {}
    with pytest.raises(yaml.YAMLError):
        load_yaml_config(str(broken))
    with pytest.raises(FileNotFoundError):
        load_yaml_config(str(tmp_path / "missing.yaml"))
