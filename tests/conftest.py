"""
Shared fixtures for the gymnotes parser test suite.

Everything here is offline: the AI fallback is never configured, and tests
that exercise it inject stand-in clients.
"""

import sys
from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import gymnotes_parser...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from gymnotes_parser.catalog import ExerciseCatalog
from gymnotes_parser.main import app
from gymnotes_parser.models import ExerciseDefinition
from gymnotes_parser.normalizer import ExerciseNormalizer
from gymnotes_parser.parsers.line_parser import LineParser
from gymnotes_parser.parsers.plan_parser import PlanParser


# ---------------------------------------------------------------------------
# Core objects
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def catalog() -> ExerciseCatalog:
    return ExerciseCatalog.load_default()


@pytest.fixture
def normalizer(catalog) -> ExerciseNormalizer:
    return ExerciseNormalizer(catalog)


@pytest.fixture
def line_parser(catalog) -> LineParser:
    return LineParser(catalog=catalog)


@pytest.fixture
def plan_parser(line_parser) -> PlanParser:
    return PlanParser(line_parser=line_parser)


@pytest.fixture
def tiny_catalog() -> ExerciseCatalog:
    """Hand-built catalog with deliberately overlapping aliases."""
    definitions: List[ExerciseDefinition] = [
        ExerciseDefinition(
            key="front_lever", name="Front Lever", category="core",
            equipment="bodyweight", aliases=("front lever", "press"),
        ),
        ExerciseDefinition(
            key="reverse_lever", name="Reverse Lever", category="core",
            equipment="bodyweight", aliases=("lever front", "press"),
        ),
        ExerciseDefinition(
            key="log_press", name="Log Press", category="shoulders",
            equipment="barbell", aliases=("log",),
        ),
    ]
    return ExerciseCatalog(definitions)


# ---------------------------------------------------------------------------
# API client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def two_day_plan_text() -> str:
    return """Push Pull Program
Day 1: Push
3x10 Bench Press @60kg
Overhead Press 3x8 40kg
3x12 Tricep Pushdown
Day 2: Pull
Deadlift 3x5 @100kg
Barbell Row 4x8 60kg
"""
