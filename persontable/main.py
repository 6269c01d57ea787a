from __future__ import annotations

import argparse
import sys
from typing import Sequence

from PySide6.QtWidgets import QApplication

from persontable.core import AppConfig, get_person_list, load_config
from persontable.ui import MainWindow


def create_application(argv: Sequence[str]) -> QApplication:
    app = QApplication(list(argv))
    app.setApplicationName("Person Table")
    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Add and delete rows in a table of people")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON file overriding window/table settings",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(argv if argv is not None else sys.argv)
    parser = build_parser()
    args, qt_args = parser.parse_known_args(argv[1:])
    qt_argv = [argv[0], *qt_args]

    config = AppConfig()
    if args.config:
        try:
            config = load_config(args.config)
        except ValueError as exc:
            parser.error(str(exc))

    app = create_application(qt_argv)
    rows = get_person_list()
    window = MainWindow(rows, config)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
