from .registry import HookRegistry, DEFAULT_PRIORITY
