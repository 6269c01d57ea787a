# SPDX-License-Identifier: MIT
"""
Domain model, row model and editing controller for the person table.
"""

from .config import AppConfig, DEFAULT_CONFIG, TableConfig, WindowConfig, load_config  # noqa: F401
from .controller import PersonEditorController, PersonForm  # noqa: F401
from .person import AgeCategory, Person, PersonSequence, person_sequence  # noqa: F401
from .person_table import (  # noqa: F401
    COLUMNS,
    ColumnSpec,
    PersonTableModel,
    get_person_list,
    seed_persons,
)
