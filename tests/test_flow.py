"""Tests for the YAML flow loader (menus and messages)."""

import pytest

from cli.flow_loader import format_message, get_flow_path, load_flow


def test_load_flow():
    path = get_flow_path()
    assert path.name == "phonebook.yaml"
    flow = load_flow(path)
    assert flow["start_menu"] == "menu"
    assert set(flow["menus"]) == {"menu", "list", "search", "record"}
    assert flow["menus"]["menu"]["commands"] == ["add", "list", "search", "count", "exit"]
    assert "invalid_command" in flow["messages"]


def test_flow_path_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("PHONEBOOK_FLOW_PATH", str(tmp_path / "custom.yaml"))
    assert get_flow_path() == (tmp_path / "custom.yaml").resolve()


def test_load_flow_invalid_start_menu(tmp_path):
    yaml_content = """
start_menu: missing
menus:
  - id: menu
    commands: [exit]
"""
    (tmp_path / "flow.yaml").write_text(yaml_content)
    with pytest.raises(ValueError, match="start_menu.*must be a menu id"):
        load_flow(tmp_path / "flow.yaml")


def test_load_flow_menu_without_commands(tmp_path):
    yaml_content = """
start_menu: menu
menus:
  - id: menu
    commands: []
"""
    (tmp_path / "flow.yaml").write_text(yaml_content)
    with pytest.raises(ValueError, match="non-empty 'commands'"):
        load_flow(tmp_path / "flow.yaml")


def test_load_flow_not_a_dict(tmp_path):
    (tmp_path / "flow.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="must be a dict"):
        load_flow(tmp_path / "flow.yaml")


def test_format_message_fills_placeholders():
    flow = load_flow()
    assert format_message(flow, "count", count=3) == "The Phone Book has 3 records."
    assert format_message(flow, "not_found", query="zz") == 'No record with "zz" can be found!'
    assert (
        format_message(flow, "menu_prompt", menu="list", commands="[number], back")
        == "[list] Enter action ([number], back): "
    )


def test_format_message_unknown_id_falls_back_to_id():
    assert format_message({"messages": {}}, "no_such_message") == "no_such_message"
