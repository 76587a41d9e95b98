"""
Test Helpers
============

Domain doubles and markup helpers shared by the test suite.
"""

import re
from typing import Any, List


class Option:
    """Domain object exposing optional checked/disabled capabilities."""

    def __init__(self, value: Any, name: str, selected: bool = False, inactive: bool = False) -> None:
        self.value = value
        self.name = name
        self.selected = selected
        self.inactive = inactive

    def checked(self) -> bool:
        return self.selected

    @property
    def disabled(self) -> bool:
        return self.inactive

    def label(self) -> str:
        return self.name.upper()

    def __repr__(self) -> str:
        return f"Option({self.value!r})"


class PlainOption:
    """Domain object without checked/disabled capabilities."""

    def __init__(self, value: Any, name: str) -> None:
        self.value = value
        self.name = name


def input_types(html: str) -> List[str]:
    """Types of the input elements in markup, in document order."""
    return re.findall(r'<input[^>]* type="([a-z]+)"', html)


def label_targets(html: str) -> List[str]:
    """``for`` targets of the labels in markup, in document order."""
    return re.findall(r'<label[^>]* for="([^"]*)"', html)
