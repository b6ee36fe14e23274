# make_theme/font/source.py
from typing import Any, Dict, Optional


class FontSource:
    """
    Base class for a source of font choices (Google, system stacks, ...).

    Subclasses fill in ``data``: font name -> metadata dict.
    """

    id = ""
    label = ""
    priority = 10

    def __init__(self, context):
        self.context = context
        self.hooks = context.hooks
        self.data: Dict[str, Dict[str, Any]] = {}

    def get_label(self) -> str:
        return self.label

    def get_priority(self) -> int:
        return self.priority

    def get_font_data(self, font: Optional[str] = None):
        if font is None:
            return self.data
        return self.data.get(font, {})

    def has_font(self, font: str) -> bool:
        return font in self.get_font_data()

    def get_font_choices(self) -> Dict[str, str]:
        choices = {}
        for font, data in sorted(self.get_font_data().items()):
            choices[font] = data.get("label", font)
        return choices

    def get_font_stack(self, font: str, default_stack: str = "sans-serif") -> str:
        data = self.get_font_data(font)
        return data.get("stack", default_stack)
