# SPDX-License-Identifier: MIT
"""
Qt user interface components for the person table application.
"""

from .main_window import MainWindow  # noqa: F401
from .person_form import OptionalDateEdit, PersonFormWidget  # noqa: F401
