"""Shared test fixtures."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

SAMPLE_DOC: dict[str, Any] = {
    "nodes": [
        {
            "id": "1a2b",
            "type": "text",
            "x": 0,
            "y": 0,
            "width": 250,
            "height": 60,
            "text": "# Plan\nfirst line",
        },
        {
            "id": "3c4d",
            "type": "file",
            "x": 300,
            "y": -40,
            "width": 400,
            "height": 400,
            "color": "4",
            "file": "notes/ideas.md",
            "subpath": "#Open questions",
        },
        {
            "id": "5e6f",
            "type": "link",
            "x": -200,
            "y": 120,
            "width": 200,
            "height": 100,
            "url": "https://example.com",
        },
        {
            "id": "7a8b",
            "type": "group",
            "x": -250,
            "y": -100,
            "width": 1000,
            "height": 600,
            "color": "#ff8800",
            "label": "Inbox",
        },
    ],
    "edges": [
        {
            "id": "9c0d",
            "fromNode": "1a2b",
            "fromSide": "right",
            "toNode": "3c4d",
            "toSide": "left",
        },
        {
            "id": "abcd",
            "fromNode": "3c4d",
            "fromSide": "bottom",
            "toNode": "5e6f",
            "toSide": "top",
            "color": "1",
            "label": "see also",
        },
    ],
}


@pytest.fixture
def sample_doc() -> dict[str, Any]:
    """Return a fresh copy of a canvas document using every node type."""
    return copy.deepcopy(SAMPLE_DOC)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write the sample document to a .canvas file and return its path."""
    path = tmp_path / "board.canvas"
    path.write_text(json.dumps(SAMPLE_DOC, indent="\t"), encoding="utf-8")
    return path
