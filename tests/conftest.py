"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
from pathlib import Path
from typing import Any

import pytest


def write_json(path: Path, data: Any) -> Path:
    """Write compact JSON to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def bestiary_document() -> dict[str, Any]:
    """Bestiary document mixing official and Unearthed Arcana creatures."""
    return {
        "creature": [
            {"name": "Goblin", "source": "MM"},
            {"name": "Test Beast", "source": "Unearthed Arcana"},
        ]
    }


@pytest.fixture
def sample_tree(tmp_path: Path, bestiary_document: dict[str, Any]) -> Path:
    """Input tree with JSON, non-JSON, blocked and malformed entries.

    Layout::

        input/
            bestiary/bestiary-mm.json
            bestiary/fluff-mm.json
            homebrew/extra.json
            spells/spells-phb.json
            spells/playtest-spells.json
            img/goblin.png
            bad.json
            readme.txt
    """
    root = tmp_path / "input"
    write_json(root / "bestiary" / "bestiary-mm.json", bestiary_document)
    write_json(
        root / "bestiary" / "fluff-mm.json",
        {"monsterFluff": [{"name": "Goblin", "source": "MM", "entries": ["Small and wicked."]}]},
    )
    write_json(root / "homebrew" / "extra.json", {"creature": [{"name": "X", "source": "MM"}]})
    write_json(
        root / "spells" / "spells-phb.json",
        {
            "spell": [
                {"name": "Fireball", "source": "PHB", "level": 3},
                {"name": "Wild Surge", "source": "PlayTest Material", "level": 1},
            ]
        },
    )
    write_json(root / "spells" / "playtest-spells.json", {"spell": []})
    (root / "img").mkdir(parents=True)
    (root / "img" / "goblin.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\xffbinary")
    (root / "bad.json").write_text('{"creature": [', encoding="utf-8")
    (root / "readme.txt").write_text("Official data only.\n", encoding="utf-8")
    return root
