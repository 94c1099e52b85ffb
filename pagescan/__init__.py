"""pagescan: tag, text and table extraction from raw HTML bytes."""

__version__ = "0.1.0"

from .config import ScanOptions
from .extract import PageExtract, extract_page

__all__ = ["__version__", "ScanOptions", "PageExtract", "extract_page"]
