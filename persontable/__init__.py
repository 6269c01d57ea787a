# SPDX-License-Identifier: MIT
"""
Desktop table editor for a list of people.

`persontable.core` hosts the domain model, the observable row model and the
editing controller, while `persontable.ui` contains the Qt widgets and
windows. The `persontable.main` module is the entry point that wires
everything together.
"""

__all__ = ["main"]
