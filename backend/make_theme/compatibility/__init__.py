from .methods import (
    CompatibilityMethods,
    CompatibilityMode,
    IncompatiblePackage,
    DEFAULT_MODE,
    MODES,
    resolve_mode,
)
