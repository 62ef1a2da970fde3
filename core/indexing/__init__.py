# Path: core/indexing/__init__.py
# Purpose: Package initializer for task discovery utilities.
# Layer: core/indexing.
# Details: Exposes directory listing and per-root scanning helpers.

from .lister import DirectoryLister, DirectoryListingError, FileSystemDirectoryLister
from .scanner import SUPPORTED_EXTENSIONS, ScanResult, capitalize, collect_script_files, scan_user_dir, task_sort_key

__all__ = [
    "DirectoryLister",
    "DirectoryListingError",
    "FileSystemDirectoryLister",
    "SUPPORTED_EXTENSIONS",
    "ScanResult",
    "capitalize",
    "collect_script_files",
    "scan_user_dir",
    "task_sort_key",
]
