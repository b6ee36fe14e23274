# make_theme/compatibility/methods.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from make_theme.context import ThemeContext

from .deprecated import DEPRECATED_SHIMS
from .hookprefixer import HookPrefixer
from .keyconverter import KeyConverter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompatibilityMode:
    # None disables the deprecated shims entirely
    deprecated: Optional[Tuple[str, ...]]
    hookprefixer: bool
    keyconverter: bool

    def to_dict(self) -> dict:
        return {
            "deprecated": list(self.deprecated) if self.deprecated is not None else False,
            "hookprefixer": self.hookprefixer,
            "keyconverter": self.keyconverter,
        }


DEFAULT_MODE = "full"

MODES: Dict[str, CompatibilityMode] = {
    "full": CompatibilityMode(deprecated=("1.5", "1.6", "1.7"), hookprefixer=True, keyconverter=True),
    "1.5": CompatibilityMode(deprecated=("1.6", "1.7"), hookprefixer=True, keyconverter=False),
    "1.6": CompatibilityMode(deprecated=("1.7",), hookprefixer=True, keyconverter=False),
    "1.7": CompatibilityMode(deprecated=None, hookprefixer=False, keyconverter=False),
    "current": CompatibilityMode(deprecated=None, hookprefixer=False, keyconverter=False),
}


def resolve_mode(name) -> str:
    """
    Unrecognised modes resolve to the default (maximum back compat).
    """
    if isinstance(name, str) and name in MODES:
        return name
    return DEFAULT_MODE


@dataclass(frozen=True)
class IncompatiblePackage:
    code: str
    message: str


class CompatibilityMethods:
    """
    Selects which back-compat pieces load and reports deprecated usage.

    The mode is resolved once, at construction, from the configured
    default passed through the `make_compatibility_mode` filter.
    """

    name = "compatibility"

    def __init__(self, context: ThemeContext):
        self.context = context
        self.hooks = context.hooks
        self.errors = context.errors
        self.modules: Dict[str, object] = {}
        self.loaded_versions: List[str] = []

        self.mode_name = self._set_mode()
        self.mode = MODES[self.mode_name]

    def _set_mode(self) -> str:
        default_mode = self.context.config.get("MAKE_COMPATIBILITY_MODE", DEFAULT_MODE)
        requested = self.hooks.apply_filters("make_compatibility_mode", default_mode)
        mode = resolve_mode(requested)

        if mode != requested:
            logger.info("Unknown compatibility mode %r, using %r", requested, mode)

        return mode

    def get_mode(self) -> str:
        return self.mode_name

    def get_mode_settings(self) -> CompatibilityMode:
        return self.mode

    # -------------------------------
    # Hooks
    # -------------------------------
    def hook(self):
        if self.is_hooked():
            return

        # Deprecated shims, then compat modules
        self.hooks.add_action("make_api_loaded", self.require_deprecated_files, 0)
        self.hooks.add_action("make_api_loaded", self.load_modules, 0)

        # Catch Make Plus uploaded as a theme
        self.hooks.add_filter("upgrader_source_selection", self.check_package, 9)

        self.context.mark_hooked(self.name)

    def is_hooked(self) -> bool:
        return self.context.is_hooked(self.name)

    def require_deprecated_files(self, api=None) -> List[str]:
        """
        Register the deprecated shims for each version the mode asks for.
        Returns the versions that were loaded.
        """
        # Only while the theme API is loading
        if self.hooks.current_action() != "make_api_loaded":
            return list(self.loaded_versions)

        if self.mode.deprecated is None:
            return []

        for version in self.mode.deprecated:
            if version in self.loaded_versions:
                continue
            shim = DEPRECATED_SHIMS.get(version)
            if shim is None:
                continue
            shim(self.context, self, api)
            self.loaded_versions.append(version)

        return list(self.loaded_versions)

    def load_modules(self, api=None) -> Dict[str, object]:
        if self.mode.hookprefixer and "hookprefixer" not in self.modules:
            prefixer = HookPrefixer(self.context, self)
            prefixer.hook()
            self.modules["hookprefixer"] = prefixer

        if self.mode.keyconverter and "keyconverter" not in self.modules:
            converter = KeyConverter(self.context, self)
            converter.hook()
            self.modules["keyconverter"] = converter

        return dict(self.modules)

    def has_module(self, name: str) -> bool:
        return name in self.modules

    def check_package(
        self,
        source: Union[str, Path, IncompatiblePackage],
        action: Optional[str] = None,
    ):
        """
        Reject a plugin archive (e.g. Make Plus) uploaded as a theme.

        A theme archive must carry a style.css in its top directory.
        """
        if action != "upload-theme":
            return source

        if isinstance(source, IncompatiblePackage):
            return source

        working_directory = Path(source)
        # If the directory can't be read, don't block the install.
        if not working_directory.is_dir():
            return source

        if not (working_directory / "style.css").exists():
            return IncompatiblePackage(
                code="incompatible_archive_theme_no_style",
                message="The uploaded package appears to be a plugin. PLEASE INSTALL AS A PLUGIN.",
            )

        return source

    # -------------------------------
    # Deprecation reporting
    # -------------------------------
    def deprecated_function(
        self,
        function: str,
        version: str,
        replacement: Optional[str] = None,
        message: Optional[str] = None,
        backtrace: bool = True,
    ) -> None:
        self.hooks.do_action("make_deprecated_function_run", function, version, replacement, message)

        if replacement is not None:
            extra = f"Use <strong>{replacement}</strong> instead."
        elif message is not None:
            extra = message
        else:
            extra = "No alternative is available."

        error_message = f"<strong>{function}</strong> is deprecated since version {version} of Make. {extra}"

        if backtrace:
            error_message += self.errors.generate_backtrace([type(self).__name__])

        self.errors.add_error("make_deprecated_function", error_message)

    def deprecated_hook(self, hook: str, version: str, message: Optional[str] = None) -> None:
        self.hooks.do_action("make_deprecated_hook_run", hook, version, message)

        if message is None:
            message = "No alternative is available."

        self.errors.add_error(
            "make_deprecated_hook",
            f"The <strong>{hook}</strong> hook is deprecated since version {version} of Make. {message}",
        )

    def doing_it_wrong(
        self,
        function: str,
        message: str,
        version: Optional[str] = None,
        backtrace: bool = True,
    ) -> None:
        self.hooks.do_action("make_doing_it_wrong_run", function, message, version)

        if version is not None:
            message = f"{message} (This message was added in version {version}.)"

        error_message = f"<strong>{function}</strong> was called incorrectly. {message}"

        if backtrace:
            error_message += self.errors.generate_backtrace([type(self).__name__])

        self.errors.add_error("make_doing_it_wrong", error_message)
