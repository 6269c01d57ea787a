from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple, Union


@dataclass
class WindowConfig:
    title: str = "Adding/Deleting Rows in a TableView"
    min_width: int = 500
    min_height: int = 350
    resizable: bool = False
    spacing: int = 5
    border_color: str = "blue"

    def style_sheet(self, object_name: str = "root") -> str:
        # Scoped by object name so child widgets keep their own frames.
        return (
            f"#{object_name} {{"
            "padding: 10px;"
            "margin: 5px;"
            "border-style: solid;"
            "border-width: 2px;"
            "border-radius: 5px;"
            f"border-color: {self.border_color};"
            "}"
        )


@dataclass
class TableConfig:
    multi_select: bool = True
    show_event_log: bool = True


@dataclass
class AppConfig:
    window: WindowConfig = field(default_factory=WindowConfig)
    table: TableConfig = field(default_factory=TableConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_mapping(self, data: Dict[str, Any]) -> None:
        """Merge settings from a nested mapping into the config."""
        for section_name, section_values in data.items():
            section = getattr(self, section_name, None)
            if section is None:
                continue
            if not isinstance(section_values, dict):
                continue
            for key, value in section_values.items():
                if hasattr(section, key):
                    setattr(section, key, value)

    def iter_sections(self) -> Iterable[Tuple[str, Any]]:
        yield "window", self.window
        yield "table", self.table


DEFAULT_CONFIG = AppConfig()


def load_config(path: Union[str, Path]) -> AppConfig:
    """Read a JSON file of section overrides on top of the defaults."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a JSON object")
    config = AppConfig()
    config.update_from_mapping(data)
    return config
