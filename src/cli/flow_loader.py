"""Load and validate the YAML flow definition (menus and messages). Used by the shell."""

import os
from pathlib import Path

import yaml


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def get_flow_path() -> Path:
    """Return path to the flow YAML (PHONEBOOK_FLOW_PATH env or flows/phonebook.yaml)."""
    default = _repo_root() / "flows" / "phonebook.yaml"
    path = os.environ.get("PHONEBOOK_FLOW_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def load_flow(path: Path | None = None) -> dict:
    """Load flow YAML and return the flow dict. Validates minimal structure."""
    if path is None:
        path = get_flow_path()
    raw = path.read_text(encoding="utf-8")
    flow = yaml.safe_load(raw)
    if not isinstance(flow, dict):
        raise ValueError("Flow YAML must be a dict")
    if "menus" not in flow or not flow["menus"]:
        raise ValueError("Flow must have a non-empty 'menus' list")
    if "start_menu" not in flow:
        raise ValueError("Flow must have 'start_menu'")
    menus: dict[str, dict] = {}
    for menu in flow["menus"]:
        if not isinstance(menu, dict) or not menu.get("id"):
            raise ValueError("Every menu must have 'id'")
        if not menu.get("commands"):
            raise ValueError(f"Menu '{menu['id']}' must have a non-empty 'commands' list")
        menus[menu["id"]] = menu
    if flow["start_menu"] not in menus:
        raise ValueError(f"start_menu '{flow['start_menu']}' must be a menu id")
    flow["menus"] = menus
    if not flow.get("messages"):
        flow["messages"] = {}
    return flow


def format_message(flow: dict, message_id: str, **template_vars: object) -> str:
    """Return the message text with {name} placeholders filled. Unknown ids fall back to the id."""
    text = flow["messages"].get(message_id) or message_id
    for k, v in template_vars.items():
        text = text.replace("{" + k + "}", str(v) if v is not None else "")
    return text


# Module-level cache for loaded flow
_flow_cache: dict | None = None


def get_flow(cache: bool = True) -> dict:
    """Load flow (cached by default). Pass cache=False to reload."""
    global _flow_cache
    if cache and _flow_cache is not None:
        return _flow_cache
    _flow_cache = load_flow()
    return _flow_cache
