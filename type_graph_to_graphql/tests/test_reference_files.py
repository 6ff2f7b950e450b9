import json
from pathlib import Path

import pytest

from type_graph_to_graphql.pipeline import Emitter, EmitterConfig
from type_graph_to_graphql.pipeline.type_graph import load_type_graph


def discover_test_cases():
    """Automatically discover all test cases from test_cases directory"""
    test_cases_dir = Path(__file__).parent / "test_data" / "test_cases"
    test_cases = []

    for test_dir in sorted(test_cases_dir.iterdir()):
        if not test_dir.is_dir() or test_dir.name.startswith("."):
            continue

        schema_file = test_dir / "schema.json"
        reference_file = test_dir / "reference.graphql"
        if not schema_file.exists() or not reference_file.exists():
            continue

        test_cases.append(
            {
                "test_name": test_dir.name,
                "schema_file": schema_file,
                "config_file": test_dir / "config.json",
                "reference_file": reference_file,
            }
        )

    return test_cases


def load_config(config_file: Path) -> EmitterConfig:
    if not config_file.exists():
        return EmitterConfig()
    with open(config_file) as f:
        return EmitterConfig.from_dict(json.load(f))


@pytest.mark.parametrize("test_case", discover_test_cases(), ids=lambda case: case["test_name"])
def test_reference_file(test_case):
    """Emitted SDL matches the checked-in reference schema"""
    types = load_type_graph(test_case["schema_file"])
    generated = Emitter(types, load_config(test_case["config_file"])).emit()
    expected = test_case["reference_file"].read_text(encoding="utf-8")

    assert generated.strip() == expected.strip()


@pytest.mark.parametrize("test_case", discover_test_cases(), ids=lambda case: case["test_name"])
def test_emission_is_idempotent(test_case):
    """Two passes over the same graph produce byte-identical output"""
    types = load_type_graph(test_case["schema_file"])
    config = load_config(test_case["config_file"])

    emitter = Emitter(types, config)
    first = emitter.emit()
    second = emitter.emit()
    fresh = Emitter(load_type_graph(test_case["schema_file"]), config).emit()

    assert first == second == fresh


if __name__ == "__main__":
    pytest.main([__file__])
