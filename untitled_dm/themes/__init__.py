"""
untitled-dm

Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import OneColors, get_one_theme

__all__ = [
    "OneColors",
    "get_one_theme",
]
