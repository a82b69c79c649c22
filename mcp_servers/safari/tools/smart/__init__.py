"""
Smart Safari automation tools.

High-level AI-friendly interactions using natural language.
"""

from .click import ClickResult, click_element

__all__ = ["ClickResult", "click_element"]
