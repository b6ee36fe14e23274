from .collector import ErrorCollector, ThemeError
