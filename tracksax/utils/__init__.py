# tracksax/utils/__init__.py
"""
Utility subpackage for tracksax.

Includes:
- logging: consistent logging to console (stderr) and optionally to file
- config: YAML run-configuration loading
- paths: small path helpers for output / log / figure locations
"""

from .logging import get_logger, configure_logging, log_run_header
from .config import load_yaml, get_section
from .paths import as_path, ensure_dir, region_filename

__all__ = [
    "get_logger",
    "configure_logging",
    "log_run_header",
    "load_yaml",
    "get_section",
    "as_path",
    "ensure_dir",
    "region_filename",
]
