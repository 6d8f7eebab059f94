"""
Standard specimen templates.
"""

from .templates import STANDARD_TEMPLATES, get_standard_template, list_standards

__all__ = [
    "STANDARD_TEMPLATES",
    "get_standard_template",
    "list_standards",
]
