import pytest

import main
from Calculator import config_manager


@pytest.fixture(autouse=True)
def default_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "config.json")


def test_run_once_prints_result(capsys):
    assert main.run_once("2 + 3 * 4") == 0
    assert capsys.readouterr().out.strip() == "14"


def test_run_once_prints_error(capsys):
    assert main.run_once("5/0") == 1
    assert capsys.readouterr().out.strip() == "Error: Division by zero"


def test_main_joins_arguments(capsys):
    assert main.main(["1", "/", "3"]) == 0
    assert capsys.readouterr().out.strip() == "0.33333333"


def test_required_files_exist():
    main.check_files_exist()
