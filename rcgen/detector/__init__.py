"""Project convention detection.

Locates the workspace root and scans it to decide whether new components
should be typed (TypeScript) and whether they should use Sass stylesheets.
"""

from rcgen.detector.locator import find_root
from rcgen.detector.scanner import (
    EXCLUDED_DIRS,
    contains_match,
    detect_sass,
    detect_typescript,
)

__all__ = [
    "EXCLUDED_DIRS",
    "contains_match",
    "detect_sass",
    "detect_typescript",
    "find_root",
]
