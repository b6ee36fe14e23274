from .thememod import ThemeModSettings, SANITIZERS, wp_validate_boolean
from .customizer import CustomizerRegistry
from .notice import NoticeRegistry, AdminNotice
