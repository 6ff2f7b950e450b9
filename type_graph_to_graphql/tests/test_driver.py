import json
import logging

import pytest

from type_graph_to_graphql.pipeline import (
    BatchDriver,
    CyclicInheritance,
    EmitterConfig,
    OutputConfig,
    OutputMode,
    UnitStatus,
)
from type_graph_to_graphql.pipeline.type_graph import TypeGraphLoadError

GOOD = {"Cursor": {"type": "alias", "target": {"type": "string"}}}
CYCLIC = {
    "A": {"type": "interface", "inherits": ["B"], "members": []},
    "B": {"type": "interface", "inherits": ["A"], "members": []},
}


@pytest.fixture
def inputs(tmp_path):
    source = tmp_path / "graphs"
    (source / "nested").mkdir(parents=True)
    (source / "a_good.json").write_text(json.dumps(GOOD))
    (source / "b_cyclic.json").write_text(json.dumps(CYCLIC))
    (source / "nested" / "c_good.json").write_text(json.dumps(GOOD))
    (source / "d_settings.json").write_text(json.dumps({"indent": 2}))
    return source


def statuses(results):
    return {result.source.name: result.status for result in results}


class TestBatchDriver:
    """Test per-file generation with isolated failures"""

    def test_discover_is_sorted_and_recursive(self, inputs):
        found = BatchDriver().discover(str(inputs / "**" / "*.json"))
        assert [p.name for p in found] == ["a_good.json", "b_cyclic.json", "d_settings.json", "c_good.json"]

    def test_failures_do_not_stop_other_units(self, inputs, tmp_path):
        output = tmp_path / "out"
        results = BatchDriver().run(str(inputs / "**" / "*.json"), output)

        assert statuses(results) == {
            "a_good.json": UnitStatus.GENERATED,
            "b_cyclic.json": UnitStatus.FAILED,
            "c_good.json": UnitStatus.GENERATED,
            "d_settings.json": UnitStatus.SKIPPED,
        }
        assert sorted(p.name for p in output.iterdir()) == ["a_good.graphql", "c_good.graphql"]

    def test_failure_carries_the_error(self, inputs, tmp_path):
        result = BatchDriver().run_unit(inputs / "b_cyclic.json", tmp_path / "out")

        assert not result.ok
        assert isinstance(result.error, CyclicInheritance)
        assert result.output == tmp_path / "out" / "b_cyclic.graphql"
        assert not result.output.exists()

    def test_failure_is_logged(self, inputs, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            BatchDriver().run_unit(inputs / "b_cyclic.json", tmp_path / "out")
        assert "Failed to generate" in caplog.text

    def test_malformed_graph(self, tmp_path):
        source = tmp_path / "bad.json"
        source.write_text(json.dumps({"Role": {"type": "enum"}}))
        result = BatchDriver().run_unit(source, tmp_path / "out")

        assert result.status is UnitStatus.FAILED
        assert isinstance(result.error, TypeGraphLoadError)

    def test_malformed_documentation_does_not_stop_the_batch(self, tmp_path):
        source = tmp_path / "graphs"
        source.mkdir()
        bad = {"UserId": {"type": "alias", "target": {"type": "string"}, "documentation": {"tags": ["ID"]}}}
        (source / "a_bad.json").write_text(json.dumps(bad))
        (source / "b_good.json").write_text(json.dumps(GOOD))

        results = BatchDriver().run(str(source / "*.json"), tmp_path / "out")

        assert statuses(results) == {"a_bad.json": UnitStatus.FAILED, "b_good.json": UnitStatus.GENERATED}
        assert isinstance(results[0].error, TypeGraphLoadError)
        assert (tmp_path / "out" / "b_good.graphql").exists()

    def test_output_content(self, inputs, tmp_path):
        result = BatchDriver().run_unit(inputs / "a_good.json", tmp_path)
        assert result.output.read_text() == "\nscalar Cursor\n\n"

    def test_header(self, inputs, tmp_path):
        driver = BatchDriver(header=lambda: "# Generated by test")
        result = driver.run_unit(inputs / "a_good.json", tmp_path)
        assert result.output.read_text() == "# Generated by test\n\nscalar Cursor\n\n"

    def test_header_can_be_disabled(self, inputs, tmp_path):
        driver = BatchDriver(EmitterConfig(add_generation_comment=False), header=lambda: "# Generated by test")
        result = driver.run_unit(inputs / "a_good.json", tmp_path)
        assert not result.output.read_text().startswith("#")

    def test_output_suffix(self, inputs, tmp_path):
        driver = BatchDriver(EmitterConfig(output_suffix=".schema.graphql"))
        assert driver.output_path(inputs / "a_good.json", tmp_path) == tmp_path / "a_good.schema.graphql"


class TestOutputModes:
    """Test handling of existing output files"""

    @pytest.mark.parametrize("atomic_write", [True, False])
    def test_existing_output_is_an_error(self, inputs, tmp_path, atomic_write):
        existing = tmp_path / "a_good.graphql"
        existing.write_text("keep me")
        config = EmitterConfig(output=OutputConfig(atomic_write=atomic_write))

        result = BatchDriver(config).run_unit(inputs / "a_good.json", tmp_path)

        assert result.status is UnitStatus.FAILED
        assert isinstance(result.error, FileExistsError)
        assert existing.read_text() == "keep me"

    @pytest.mark.parametrize("atomic_write", [True, False])
    def test_force_overwrites(self, inputs, tmp_path, atomic_write):
        existing = tmp_path / "a_good.graphql"
        existing.write_text("old")
        config = EmitterConfig(output=OutputConfig(mode=OutputMode.FORCE, atomic_write=atomic_write))

        result = BatchDriver(config).run_unit(inputs / "a_good.json", tmp_path)

        assert result.status is UnitStatus.GENERATED
        assert "scalar Cursor" in existing.read_text()
