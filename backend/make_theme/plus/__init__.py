from .methods import PlusMethods, PLUS_LINK, version_lte
