# make_theme/error/collector.py
import logging
import traceback
from dataclasses import dataclass
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeError:
    code: str
    message: str

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class ErrorCollector:
    """
    Side channel for soft warnings (deprecations, incorrect calls).

    Nothing here raises: errors are stored for the admin screens and
    logged as warnings.
    """

    def __init__(self) -> None:
        self._errors: List[ThemeError] = []

    def add_error(self, code: str, message: str) -> ThemeError:
        error = ThemeError(code=code, message=message)
        self._errors.append(error)
        logger.warning("%s: %s", code, message)
        return error

    def has_errors(self) -> bool:
        return bool(self._errors)

    def get_errors(self, code: Optional[str] = None) -> List[ThemeError]:
        if code is None:
            return list(self._errors)
        return [e for e in self._errors if e.code == code]

    def get_codes(self) -> List[str]:
        codes: List[str] = []
        for error in self._errors:
            if error.code not in codes:
                codes.append(error.code)
        return codes

    def generate_backtrace(self, ignore_class_names: Iterable[str] = ()) -> str:
        """
        Render the current call stack, outermost call first.

        Frames executing methods of an ignored class (or of the collector
        itself) are left out.
        """
        ignored = set(ignore_class_names) | {type(self).__name__}

        lines = []
        for frame, lineno in traceback.walk_stack(None):
            owner = frame.f_locals.get("self")
            if owner is not None and type(owner).__name__ in ignored:
                continue
            code = frame.f_code
            lines.append(f"{code.co_name} ({code.co_filename}:{lineno})")

        if not lines:
            return ""

        lines.reverse()
        return "\nBacktrace:\n" + "\n".join(f"  {line}" for line in lines)
