# make_theme/settings/thememod.py
import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from make_theme.utils.sanitize import absint, sanitize_key, sanitize_text_field, wp_validate_boolean

logger = logging.getLogger(__name__)


SANITIZERS: Dict[str, Callable[[Any], Any]] = {
    "wp_validate_boolean": wp_validate_boolean,
    "sanitize_text_field": sanitize_text_field,
    "sanitize_key": sanitize_key,
    "absint": absint,
}


class ThemeModSettings:
    """
    Theme mod definitions (default + sanitize callback) and their values.

    Stored values come from ``stored_values``: a dict, or a callable that
    returns one. They are read once and pass through the
    `make_settings_thememod_stored_values` filter.
    """

    name = "settings.thememod"

    def __init__(self, context, stored_values=None):
        self.context = context
        self.hooks = context.hooks
        self._source = stored_values
        self._values: Optional[Dict[str, Any]] = None
        self.settings: Dict[str, Dict[str, Any]] = {}
        self._loaded = False

    def load(self):
        if self._loaded:
            return
        self._loaded = True
        self.hooks.do_action("make_settings_thememod_loaded", self)

    def is_loaded(self) -> bool:
        return self._loaded

    def add_settings(self, settings: Mapping[str, Mapping[str, Any]], defaults: Optional[Mapping[str, Any]] = None) -> bool:
        """
        Add setting definitions. ``defaults`` fills in any property a
        definition does not set itself. Existing settings are not replaced.
        """
        added = False
        for setting_id, props in settings.items():
            if setting_id in self.settings:
                logger.debug("Theme mod %s is already defined", setting_id)
                continue
            definition = dict(defaults or {})
            definition.update(props)
            self.settings[setting_id] = definition
            added = True
        return added

    def setting_exists(self, setting_id: str) -> bool:
        return setting_id in self.settings

    def get_default(self, setting_id: str) -> Any:
        return self.settings.get(setting_id, {}).get("default")

    def stored_values(self) -> Dict[str, Any]:
        if self._values is None:
            source = self._source() if callable(self._source) else self._source
            self._values = self.hooks.apply_filters(
                "make_settings_thememod_stored_values", dict(source or {})
            )
        return self._values

    def get_value(self, setting_id: str) -> Any:
        stored = self.stored_values()
        if setting_id in stored:
            return self.sanitize(setting_id, stored[setting_id])
        return self.get_default(setting_id)

    def sanitize(self, setting_id: str, value: Any) -> Any:
        callback_name = self.settings.get(setting_id, {}).get("sanitize")
        callback = SANITIZERS.get(callback_name) if callback_name else None
        if callback is None:
            return value
        return callback(value)

    def get_settings(self, ids: Optional[Iterable[str]] = None) -> Dict[str, Dict[str, Any]]:
        if ids is None:
            return dict(self.settings)
        return {i: self.settings[i] for i in ids if i in self.settings}
