"""md2wiki -- convert Markdown documents to themed MediaWiki markup."""

from md2wiki.converter import DEFAULT_CONFIG, ConversionConfig, Converter, convert
from md2wiki.theme_manager import THEME_NAMES, Theme, get_theme, list_themes

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ConversionConfig",
    "Converter",
    "THEME_NAMES",
    "Theme",
    "__version__",
    "convert",
    "get_theme",
    "list_themes",
]
