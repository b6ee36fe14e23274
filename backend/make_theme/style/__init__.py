from .css import CSSCollector, CSSRule
from .manager import StyleManager
from .scripts import ScriptRegistry
