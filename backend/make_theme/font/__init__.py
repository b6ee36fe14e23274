from .source import FontSource
from .google import GoogleFontSource, CATEGORY_STACKS, GOOGLE_FONTS_CSS_URL
