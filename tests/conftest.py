"""Pytest fixtures for fuzzy-index tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from fuzzy_index.config import defaults, reset_config
from fuzzy_index.search import FieldDefinition, SearchIndex, SearchResult

AGENCIES = {
    1: "Egged",
    2: "Dan",
    3: "Metropoline",
}

BUS_LINES: list[dict[str, Any]] = [
    {
        "routeShortName": "74",
        "agencyId": 1,
        "cities": ["Tel Aviv - Yafo", "Rishon LeZion", "Azor"],
    },
    {
        "routeShortName": "201",
        "agencyId": 1,
        "cities": ["Tel Aviv - Yafo", "Azor", "Rishon LeZion", "Rehovot", "Nes Ziona"],
    },
    {
        "routeShortName": "1",
        "agencyId": 2,
        "cities": ["Bat Yam", "Tel Aviv - Yafo", "Ramat Gan", "Bney Brak", "Petah Tikva"],
    },
    {
        "routeShortName": "25",
        "agencyId": 2,
        "cities": ["Holon", "Bat Yam", "Tel Aviv - Yafo"],
    },
    {
        "routeShortName": "24",
        "agencyId": 3,
        "cities": ["Ramat HaSharon", "Tel Aviv - Yafo"],
    },
]


def compare_by_score_then_code(a: SearchResult[Any], b: SearchResult[Any]) -> float:
    """Sort by score, breaking ties alphabetically on the route code."""
    if a.score == b.score:
        return (a.obj["routeShortName"] > b.obj["routeShortName"]) - (
            a.obj["routeShortName"] < b.obj["routeShortName"]
        )
    return a.score - b.score


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def bus_lines() -> list[dict[str, Any]]:
    """Sample bus lines dataset."""
    return [dict(line) for line in BUS_LINES]


@pytest.fixture
def bus_fields() -> list[FieldDefinition[dict[str, Any]]]:
    """Route code, agency name and cities, weighted 1 / 0.1 / 0.1."""
    return [
        FieldDefinition(lambda line: line["routeShortName"], weight=1, name="code"),
        FieldDefinition(lambda line: AGENCIES.get(line["agencyId"], ""), weight=0.1, name="agency"),
        FieldDefinition(lambda line: line["cities"], weight=0.1, name="cities"),
    ]


@pytest.fixture
def bus_index(
    bus_lines: list[dict[str, Any]],
    bus_fields: list[FieldDefinition[dict[str, Any]]],
) -> SearchIndex[dict[str, Any]]:
    """Search index over the bus lines dataset."""
    return SearchIndex(bus_lines, bus_fields, sort_compare=compare_by_score_then_code)


@pytest.fixture(autouse=True)
def isolated_config(
    temp_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Point the default config at an empty temp location and reset the singleton."""
    monkeypatch.setattr(defaults, "DEFAULT_CONFIG_FILE", temp_dir / "missing-config.toml")
    for name in (
        "FUZZY_INDEX_CONFIG",
        "FUZZY_INDEX_LOG_LEVEL",
        "FUZZY_INDEX_THRESHOLD",
        "FUZZY_INDEX_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Create a test config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""
[search]
threshold = 0.25
multiplier_for_match_close_to_start = 0.5
space_characters = [" ", "-"]

[output]
default_format = "plain"
limit = 5

[logging]
level = "ERROR"
""")
    return config_path
