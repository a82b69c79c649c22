"""
Keyboard and scroll input tools for Safari automation.

Provides:
- DOM input: type text into fields, dispatch key presses
- Scroll operations: scroll to a viewport page, scroll by pixels
"""

from .dom import press_key, type_text
from .scroll import scroll_by, scroll_to_page

__all__ = [
    "press_key",
    "type_text",
    "scroll_by",
    "scroll_to_page",
]
