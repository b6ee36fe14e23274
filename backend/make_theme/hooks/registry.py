# make_theme/hooks/registry.py
from __future__ import annotations

from itertools import count
from typing import Any, Callable, Dict, List, Optional, Tuple

Callback = Callable[..., Any]

DEFAULT_PRIORITY = 10


class HookRegistry:
    """
    Named action/filter dispatch.

    Callbacks run in ascending priority, then in registration order.
    Actions and filters share one namespace, the same way the host CMS
    treats them: an action is a filter whose return value is ignored.
    """

    def __init__(self) -> None:
        self._hooks: Dict[str, List[Tuple[int, int, Callback, Optional[int]]]] = {}
        self._sequence = count()
        self._current: List[str] = []
        self._fired: Dict[str, int] = {}

    # -------------------------------
    # Registration
    # -------------------------------
    def add_filter(
        self,
        name: str,
        callback: Callback,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: Optional[int] = None,
    ) -> None:
        """
        accepted_args limits how many dispatch arguments reach the callback.
        None passes all of them.
        """
        entries = self._hooks.setdefault(name, [])
        entries.append((priority, next(self._sequence), callback, accepted_args))
        entries.sort(key=lambda entry: (entry[0], entry[1]))

    add_action = add_filter

    def remove_filter(self, name: str, callback: Callback, priority: int = DEFAULT_PRIORITY) -> bool:
        entries = self._hooks.get(name, [])
        for entry in entries:
            if entry[0] == priority and entry[2] == callback:
                entries.remove(entry)
                return True
        return False

    remove_action = remove_filter

    def has_filter(self, name: str, callback: Optional[Callback] = None):
        """
        Without a callback: True if anything is attached to the hook.
        With a callback: its priority, or False when it is not attached.
        """
        entries = self._hooks.get(name, [])
        if callback is None:
            return bool(entries)

        for priority, _, attached, _ in entries:
            if attached == callback:
                return priority
        return False

    has_action = has_filter

    # -------------------------------
    # Dispatch
    # -------------------------------
    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        self._current.append(name)
        try:
            for _, _, callback, accepted_args in list(self._hooks.get(name, [])):
                call_args = (value,) + args
                if accepted_args is not None:
                    call_args = call_args[:accepted_args]
                value = callback(*call_args)
        finally:
            self._current.pop()
        return value

    def do_action(self, name: str, *args: Any) -> None:
        self._fired[name] = self._fired.get(name, 0) + 1
        self._current.append(name)
        try:
            for _, _, callback, accepted_args in list(self._hooks.get(name, [])):
                call_args = args if accepted_args is None else args[:accepted_args]
                callback(*call_args)
        finally:
            self._current.pop()

    def current_filter(self) -> Optional[str]:
        return self._current[-1] if self._current else None

    current_action = current_filter

    def doing_filter(self, name: Optional[str] = None) -> bool:
        if name is None:
            return bool(self._current)
        return name in self._current

    doing_action = doing_filter

    def did_action(self, name: str) -> int:
        return self._fired.get(name, 0)

    def hook_names(self) -> List[str]:
        return sorted(name for name, entries in self._hooks.items() if entries)

    def get_callbacks(self, name: str) -> List[Callback]:
        return [entry[2] for entry in self._hooks.get(name, [])]
