"""YAML data file adapter."""

from __future__ import annotations

from .loader import DataFileError, iter_data_files, load_datafile, parse_project_dir
from .schema import FileBag

__all__ = [
    "DataFileError",
    "FileBag",
    "iter_data_files",
    "load_datafile",
    "parse_project_dir",
]
