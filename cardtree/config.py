"""Widget options and persistent JSON preferences.

Options passed programmatically are validated and rejected when wrongly
typed. Persisted preferences fall back to defaults when missing or malformed.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .errors import InvalidOption

logger = logging.getLogger(__name__)

APP_NAME = "cardtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_OPTION_KEYS: dict[str, tuple[str, ...]] = {
    "filter_element_id": ("filterElementId", "filter_element_id"),
    "multi_selection": ("multiSelection", "multi_selection"),
}


@dataclass(frozen=True)
class TreeViewOptions:
    """Recognized widget options."""

    filter_element_id: str = ""
    multi_selection: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> TreeViewOptions:
        """Build options from camelCase or snake_case keys.

        Raises ``InvalidOption`` for values of the wrong type. Unknown keys are
        ignored.
        """
        values: dict[str, object] = {}
        for field_name, keys in _OPTION_KEYS.items():
            for key in keys:
                if key in data:
                    values[field_name] = data[key]
                    break

        filter_element_id = values.get("filter_element_id", "")
        if filter_element_id is None:
            filter_element_id = ""
        if not isinstance(filter_element_id, str):
            raise InvalidOption(f"filterElementId must be a string, got {filter_element_id!r}")
        multi_selection = values.get("multi_selection", False)
        if not isinstance(multi_selection, bool):
            raise InvalidOption(f"multiSelection must be a boolean, got {multi_selection!r}")
        return cls(filter_element_id=filter_element_id, multi_selection=multi_selection)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_multi_selection() -> bool:
    """Return the persisted default selection mode; only explicit booleans count."""
    value = load_config().get("multi_selection")
    return value if isinstance(value, bool) else False


def _store_preference(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def save_multi_selection(multi_selection: bool) -> None:
    _store_preference("multi_selection", bool(multi_selection))


def load_theme_name() -> str | None:
    """Persisted UI theme name, or ``None`` when unset or blank."""
    value = load_config().get("theme")
    return (value.strip() or None) if isinstance(value, str) else None


def save_theme_name(theme_name: str) -> None:
    """Remember ``theme_name``; blank names leave the stored theme untouched."""
    name = str(theme_name).strip()
    if name:
        _store_preference("theme", name)


def load_options() -> TreeViewOptions:
    """Return widget options from persisted preferences.

    Only the selection mode is persisted; the search-field id is always
    supplied by the embedding surface.
    """
    return TreeViewOptions(multi_selection=load_multi_selection())
