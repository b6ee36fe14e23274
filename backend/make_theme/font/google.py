# make_theme/font/google.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote_plus

from make_theme.utils.sanitize import sanitize_key

from .source import FontSource

DATA_FILE = Path(__file__).with_name("google-data.json")

GOOGLE_FONTS_CSS_URL = "//fonts.googleapis.com/css"

# CSS font stacks for Google's font categories
CATEGORY_STACKS = {
    "serif": 'Georgia,Times,"Times New Roman",serif',
    "sans-serif": '"Helvetica Neue",Helvetica,Arial,sans-serif',
    "display": "Copperplate,Copperplate Gothic Light,fantasy",
    "handwriting": "Brush Script MT,cursive",
    "monospace": 'Monaco,"Lucida Sans Typewriter","Lucida Typewriter","Courier New",Courier,monospace',
}


def _unique(items: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


class GoogleFontSource(FontSource):
    """
    Google Fonts: static font metadata plus stylesheet/loader URL building.

    The data file is read on first access, not at construction.
    """

    id = "google"
    label = "Google Fonts"
    priority = 20

    def __init__(self, context, compatibility, data_file: Optional[Path] = None):
        super().__init__(context)
        self.compatibility = compatibility
        self.data_file = Path(data_file) if data_file else DATA_FILE
        self.stacks = dict(CATEGORY_STACKS)
        self._subsets: List[str] = []
        self._loaded = False

    # -------------------------------
    # Data loading
    # -------------------------------
    def load(self):
        if self.data_file.is_file():
            with self.data_file.open(encoding="utf-8") as fh:
                self.load_font_data(json.load(fh))

        self._loaded = True

    def is_loaded(self) -> bool:
        return self._loaded

    def load_font_data(self, data: Dict[str, Dict[str, Any]]):
        self.data = dict(data)
        self._subsets = []

    def get_font_data(self, font: Optional[str] = None):
        if not self.is_loaded():
            self.load()

        return super().get_font_data(font)

    # -------------------------------
    # Stacks
    # -------------------------------
    def get_font_stack(self, font: str, default_stack: str = "sans-serif") -> str:
        """
        Append the category stack to the font name. Unknown fonts (or
        categories without a stack) get the default stack.
        """
        data = self.get_font_data(font)
        category = data.get("category")

        category_stack = self.get_category_stack(category) if category else ""
        if category_stack:
            return f'"{font}",{category_stack}'

        return default_stack

    def get_category_stack(self, category: str) -> str:
        stack = self.stacks.get(category, "")
        return self.hooks.apply_filters("make_font_google_stack", stack, category)

    # -------------------------------
    # URLs
    # -------------------------------
    def build_url(self, fonts: Iterable[str], subsets: Iterable[str] = ()) -> str:
        """
        Stylesheet URL for the given fonts, e.g.
        //fonts.googleapis.com/css?family=Open+Sans%3Aregular%2Citalic%2C700&subset=latin
        """
        url = ""
        family = []

        for font in _unique(fonts):
            if not self.has_font(font):
                continue
            variants = self.get_font_data(font).get("variants", [])
            family.append(quote_plus(f"{font}:{','.join(self.choose_font_variants(font, variants))}"))

        if family:
            url = f"{GOOGLE_FONTS_CSS_URL}?family={'|'.join(family)}"

            subsets = [sanitize_key(s) for s in subsets]
            if subsets:
                url += f"&subset={','.join(subsets)}"

        return self.hooks.apply_filters("make_get_google_font_uri", url)

    def build_loader_array(self, fonts: Iterable[str], subsets: Iterable[str] = ()) -> Dict[str, Any]:
        """
        Configuration for the Web Font Loader, e.g.
        {"google": {"families": ["Open+Sans:regular,italic,700:latin"]}}
        """
        data: Dict[str, Any] = {}
        families = []
        subsets = [sanitize_key(s) for s in subsets]

        for font in _unique(fonts):
            if not self.has_font(font):
                continue
            variants = self.get_font_data(font).get("variants", [])
            families.append(
                f"{quote_plus(font)}:{','.join(self.choose_font_variants(font, variants))}:{','.join(subsets)}"
            )

        if families:
            data["google"] = {"families": families}

        return data

    def choose_font_variants(self, font: str, available_variants: List[str]) -> List[str]:
        chosen = []

        # Without a "regular" variant, fall back to the first one available.
        if "regular" not in available_variants and len(available_variants) >= 1:
            chosen.append(available_variants[0])
        else:
            chosen.append("regular")

        if "italic" in available_variants:
            chosen.append("italic")

        if "700" in available_variants:
            chosen.append("700")

        chosen = _unique(chosen)

        if self.hooks.has_filter("make_font_variants"):
            self.compatibility.deprecated_hook(
                "make_font_variants",
                "1.7.0",
                "Use the make_font_google_variants hook instead.",
            )
            chosen = self.hooks.apply_filters("make_font_variants", chosen, font, available_variants)

        return self.hooks.apply_filters("make_font_google_variants", chosen, font, available_variants)

    # -------------------------------
    # Subsets
    # -------------------------------
    def collect_subsets(self, font_data: Dict[str, Dict[str, Any]]) -> List[str]:
        subsets = set()
        for data in font_data.values():
            if "subsets" in data:
                subsets.update(data["subsets"])
        return sorted(subsets)

    def get_subsets(self) -> List[str]:
        if not self._subsets:
            self._subsets = self.collect_subsets(self.get_font_data())

        if self.hooks.has_filter("make_get_google_font_subsets"):
            self.compatibility.deprecated_hook("make_get_google_font_subsets", "1.7.0")

        return list(self._subsets)

    def sanitize_subset(self, value: Any, default: str = "") -> str:
        if value in self.get_subsets():
            return value
        return default
