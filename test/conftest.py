"""
Shared fixtures: small ARFF files written into temporary directories.
"""

from pathlib import Path

import pytest
from sklearn.datasets import load_iris

from classifierTournament.core.engine import TournamentEngine
from classifierTournament.data.loader import DataLoader

WEATHER_ROWS = [
    "sunny,85,85,FALSE,no",
    "sunny,80,90,TRUE,no",
    "overcast,83,86,FALSE,yes",
    "rainy,70,96,FALSE,yes",
    "rainy,68,80,FALSE,yes",
    "rainy,65,70,TRUE,no",
    "overcast,64,65,TRUE,yes",
    "sunny,72,95,FALSE,no",
    "sunny,69,70,FALSE,yes",
    "rainy,75,80,FALSE,yes",
    "sunny,75,70,TRUE,yes",
    "overcast,72,90,TRUE,yes",
    "overcast,81,75,FALSE,yes",
    "rainy,71,91,TRUE,no",
]

IRIS_LABELS = ("Iris-setosa", "Iris-versicolor", "Iris-virginica")


def write_arff(path: Path, relation: str, attributes, rows) -> Path:
    """Write an ARFF file from (name, type) pairs and pre-formatted data rows."""
    lines = [f"@relation {relation}", ""]
    lines += [f"@attribute {name} {kind}" for name, kind in attributes]
    lines += ["", "@data"]
    lines += list(rows)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def iris_rows():
    iris = load_iris()
    for features, target in zip(iris.data, iris.target):
        yield ",".join(f"{value:g}" for value in features) + "," + IRIS_LABELS[target]


def write_iris(directory: Path) -> Path:
    return write_arff(
        directory / "iris.arff",
        "iris",
        [
            ("sepallength", "numeric"),
            ("sepalwidth", "numeric"),
            ("petallength", "numeric"),
            ("petalwidth", "numeric"),
            ("class", "{" + ",".join(IRIS_LABELS) + "}"),
        ],
        iris_rows(),
    )


@pytest.fixture(scope="session")
def iris_arff(tmp_path_factory) -> Path:
    return write_iris(tmp_path_factory.mktemp("iris"))


@pytest.fixture(scope="session")
def iris_dataset(iris_arff):
    return DataLoader().load(iris_arff)


@pytest.fixture(scope="session")
def iris_engine(iris_arff):
    """Engine with iris loaded and one tournament completed; treat as read-only."""
    engine = TournamentEngine()
    engine.load(iris_arff)
    engine.run_tournament()
    return engine


@pytest.fixture
def weather_arff(tmp_path) -> Path:
    return write_arff(
        tmp_path / "weather.arff",
        "weather",
        [
            ("outlook", "{sunny,overcast,rainy}"),
            ("temperature", "numeric"),
            ("humidity", "numeric"),
            ("windy", "{TRUE,FALSE}"),
            ("play", "{yes,no}"),
        ],
        WEATHER_ROWS,
    )


@pytest.fixture
def weather_dataset(weather_arff):
    return DataLoader().load(weather_arff)


@pytest.fixture
def zero_attribute_arff(tmp_path) -> Path:
    return write_arff(tmp_path / "empty_schema.arff", "nothing", [], [])


@pytest.fixture
def header_only_arff(tmp_path) -> Path:
    return write_arff(
        tmp_path / "no_rows.arff",
        "no_rows",
        [("x", "numeric"), ("label", "{a,b}")],
        [],
    )
