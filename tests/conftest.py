from __future__ import annotations

import pytest

from cdmpy.adapters.datafile import FileBag
from cdmpy.domain.model import Library
from cdmpy.domain.resolution import build_library, keep_first
from tests.helpers.datafiles import library_tables, make_bag


@pytest.fixture
def library_bag() -> FileBag:
    return make_bag("library.yaml", **library_tables())


@pytest.fixture
def library(library_bag: FileBag) -> Library:
    return build_library([library_bag], keep_first)


@pytest.fixture(autouse=True)
def isolated_library_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    # never pick up libraries installed for the current user
    monkeypatch.setenv("CDMPY_LIBRARY_DIR", str(tmp_path_factory.mktemp("no-default-libraries")))
