# make_theme/style/scripts.py
from typing import Dict, List, Optional


class ScriptRegistry:
    """
    Registered script and style handles with their dependency lists.
    """

    def __init__(self):
        self._handles: Dict[str, Dict[str, dict]] = {"script": {}, "style": {}}
        self._enqueued: List[str] = []

    def register(self, handle: str, src: str = "", deps: Optional[List[str]] = None, kind: str = "script"):
        self._handles[kind][handle] = {"src": src, "deps": list(deps or [])}

    def is_registered(self, handle: str, kind: str = "script") -> bool:
        return handle in self._handles[kind]

    def add_dependency(self, handle: str, dependency: str, kind: str = "script") -> bool:
        """
        Append a dependency to a registered handle. Adding the same
        dependency twice is a no-op. Returns False for unknown handles.
        """
        entry = self._handles[kind].get(handle)
        if entry is None:
            return False
        if dependency not in entry["deps"]:
            entry["deps"].append(dependency)
        return True

    def get_dependencies(self, handle: str, kind: str = "script") -> List[str]:
        entry = self._handles[kind].get(handle)
        return list(entry["deps"]) if entry else []

    def enqueue(self, handle: str):
        if handle not in self._enqueued:
            self._enqueued.append(handle)

    def enqueued(self) -> List[str]:
        return list(self._enqueued)
