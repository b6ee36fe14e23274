# make_theme/settings/customizer.py
from typing import Any, Dict, List, Optional


class CustomizerRegistry:
    """
    Registration records for Customizer panels, sections, settings and
    controls. Rendering happens client side; this only keeps the records.
    """

    def __init__(self):
        self.panels: Dict[str, Dict[str, Any]] = {}
        self.sections: Dict[str, Dict[str, Any]] = {}
        self.settings: Dict[str, Dict[str, Any]] = {}
        self.controls: Dict[str, Dict[str, Any]] = {}

    def add_panel(self, panel_id: str, **args):
        args.setdefault("priority", 160)
        self.panels[panel_id] = args
        return args

    def add_section(self, section_id: str, **args):
        args.setdefault("priority", 160)
        self.sections[section_id] = args
        return args

    def add_setting(self, setting_id: str, **args):
        self.settings[setting_id] = args
        return args

    def add_control(self, control_id: str, **args):
        args.setdefault("priority", 10)
        args.setdefault("type", "text")
        self.controls[control_id] = args
        return args

    def get_panel(self, panel_id: str) -> Optional[Dict[str, Any]]:
        return self.panels.get(panel_id)

    def get_section(self, section_id: str) -> Optional[Dict[str, Any]]:
        return self.sections.get(section_id)

    def get_section_controls(self, section_id: str) -> List[Dict[str, Any]]:
        return [c for c in self.controls.values() if c.get("section") == section_id]

    def get_last_priority(self, controls: List[Dict[str, Any]]) -> int:
        if not controls:
            return 0
        return max(c.get("priority", 0) for c in controls)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "panels": self.panels,
            "sections": self.sections,
            "settings": {
                setting_id: {k: v for k, v in args.items() if not callable(v)}
                for setting_id, args in self.settings.items()
            },
            "controls": self.controls,
        }
