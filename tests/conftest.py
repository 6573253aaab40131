"""Shared test configuration and fixtures."""

import pytest

from mdtable import config
from mdtable.interaction.state import EditorState
from mdtable.table.schema import Alignment, TableModel


@pytest.fixture(autouse=True)
def default_shape(monkeypatch):
    """Pin the startup table to 3 columns x 2 rows whatever the local .env says."""
    monkeypatch.setattr(config, "DEFAULT_COLUMNS", 3)
    monkeypatch.setattr(config, "DEFAULT_ROWS", 2)


@pytest.fixture
def small_table() -> TableModel:
    """2 columns x 2 rows with distinct text in every cell."""
    return TableModel(
        headers=["A", "B"],
        rows=[["1", "2"], ["3", "4"]],
        alignments=[Alignment.LEFT, Alignment.RIGHT],
    )


@pytest.fixture
def state(small_table) -> EditorState:
    return EditorState(table=small_table)
