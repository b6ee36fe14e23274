# make_theme/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Set

from make_theme.error import ErrorCollector
from make_theme.hooks import HookRegistry
from make_theme.style import ScriptRegistry, StyleManager


@dataclass(frozen=True)
class PluginCapabilities:
    """
    Third-party plugins detected for this request.

    plus_version is None when Make Plus is not installed.
    yoast_breadcrumb renders breadcrumb markup: (before, after) -> str.
    """
    plus_version: Optional[str] = None
    yoast_breadcrumb: Optional[Callable[[str, str], str]] = None
    woocommerce: bool = False

    @property
    def plus(self) -> bool:
        return self.plus_version is not None

    @property
    def yoast(self) -> bool:
        return self.yoast_breadcrumb is not None


@dataclass(frozen=True)
class CurrentUser:
    id: Optional[str] = None
    role: str = "anonymous"
    capabilities: FrozenSet[str] = field(default_factory=frozenset)

    def can(self, capability: str) -> bool:
        return capability in self.capabilities

    @classmethod
    def from_claims(cls, identity: Optional[str], claims: Dict[str, Any]) -> "CurrentUser":
        return cls(
            id=identity,
            role=claims.get("role", "subscriber"),
            capabilities=frozenset(claims.get("caps") or ()),
        )


ANONYMOUS = CurrentUser()


class ThemeContext:
    """
    Per-request state shared by the theme components.

    Holds the collaborators every component may need and records which
    components have already registered their hooks, so that running the
    bootstrap twice in one request registers each handler once.
    """

    def __init__(
        self,
        *,
        config: Optional[Dict[str, Any]] = None,
        capabilities: Optional[PluginCapabilities] = None,
        user: Optional[CurrentUser] = None,
        post=None,
        view: str = "page",
    ):
        self.config: Dict[str, Any] = dict(config or {})
        self.capabilities = capabilities or PluginCapabilities()
        self.user = user or ANONYMOUS

        # The post being rendered, if any, and the current template view
        self.post = post
        self.view = view

        self.hooks = HookRegistry()
        self.errors = ErrorCollector()
        self.scripts = ScriptRegistry()
        self.style = StyleManager(self.hooks)

        # Theme support flags (add_theme_support)
        self.theme_support: Set[str] = set()

        # Callables published by deprecated shims, keyed by legacy name
        self.legacy: Dict[str, Callable[..., Any]] = {}

        # Markup echoed by hook callbacks, and registered meta boxes
        self.output: List[str] = []
        self.meta_boxes: List[Dict[str, Any]] = []

        self._hooked: Set[str] = set()

    def is_hooked(self, name: str) -> bool:
        return name in self._hooked

    def mark_hooked(self, name: str) -> None:
        self._hooked.add(name)

    def add_theme_support(self, feature: str) -> None:
        self.theme_support.add(feature)

    def current_theme_supports(self, feature: str) -> bool:
        return feature in self.theme_support

    def echo(self, html: str) -> None:
        self.output.append(html)

    def flush_output(self) -> str:
        html = "".join(self.output)
        self.output = []
        return html

    def add_meta_box(self, box_id: str, title: str, callback: Callable[..., str], screen: str,
                     context: str = "advanced", priority: str = "default") -> None:
        self.meta_boxes.append({
            "id": box_id,
            "title": title,
            "callback": callback,
            "screen": screen,
            "context": context,
            "priority": priority,
        })
