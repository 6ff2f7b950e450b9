#!/usr/bin/env python3

import json

import pytest
from click.testing import CliRunner

from type_graph_to_graphql import __version__
from type_graph_to_graphql.cli_utils import generation_comment, reconstruct_command_line
from type_graph_to_graphql.type_graph_to_graphql import type_graph_to_graphql

POST = {
    "Post": {
        "type": "interface",
        "concrete": True,
        "members": [{"type": "property", "name": "title", "signature": {"type": "string"}}],
    }
}


@pytest.fixture
def graphs(tmp_path):
    source = tmp_path / "graphs"
    source.mkdir()
    (source / "post.json").write_text(json.dumps(POST))
    return source


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        assert reconstruct_command_line(type_graph_to_graphql) == "type_graph_to_graphql"

    def test_generation_comment(self):
        assert generation_comment() == f"# Generated by type_graph_to_graphql v{__version__} : type_graph_to_graphql"


class TestCommand:
    """Test the type_graph_to_graphql command"""

    def test_generates_schemas(self, graphs, tmp_path):
        output = tmp_path / "out"
        result = CliRunner().invoke(type_graph_to_graphql, [str(graphs / "*.json"), str(output)])

        assert result.exit_code == 0, result.output
        assert "1 schema(s) generated, 0 failed, 0 skipped" in result.output

        sdl = (output / "post.graphql").read_text()
        assert sdl.startswith(f"# Generated by type_graph_to_graphql v{__version__} : type_graph_to_graphql ")
        assert "type Post {\n  title: String!\n}" in sdl
        assert "extend type Mutation" in sdl

    def test_no_crud(self, graphs, tmp_path):
        output = tmp_path / "out"
        result = CliRunner().invoke(type_graph_to_graphql, ["--no-crud", str(graphs / "*.json"), str(output)])

        assert result.exit_code == 0, result.output
        sdl = (output / "post.graphql").read_text()
        assert "--no-crud" in sdl.splitlines()[0]
        assert "PostCreateInput" not in sdl

    def test_existing_output_fails_without_force(self, graphs, tmp_path):
        output = tmp_path / "out"
        runner = CliRunner()
        runner.invoke(type_graph_to_graphql, [str(graphs / "*.json"), str(output)])

        result = runner.invoke(type_graph_to_graphql, [str(graphs / "*.json"), str(output)])
        assert result.exit_code == 1
        assert "0 schema(s) generated, 1 failed, 0 skipped" in result.output

        result = runner.invoke(type_graph_to_graphql, ["--force", str(graphs / "*.json"), str(output)])
        assert result.exit_code == 0, result.output

    def test_config_file(self, graphs, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"emit_crud_artifacts": False, "add_generation_comment": False}))
        output = tmp_path / "out"

        result = CliRunner().invoke(type_graph_to_graphql, ["-c", str(config), str(graphs / "*.json"), str(output)])

        assert result.exit_code == 0, result.output
        assert (output / "post.graphql").read_text() == "\ntype Post {\n  title: String!\n}\n\n"

    def test_skips_files_without_type_graph(self, graphs, tmp_path):
        (graphs / "package.json").write_text(json.dumps({"name": "app"}))
        result = CliRunner().invoke(type_graph_to_graphql, [str(graphs / "*.json"), str(tmp_path / "out")])

        assert result.exit_code == 0, result.output
        assert "1 schema(s) generated, 0 failed, 1 skipped" in result.output


if __name__ == "__main__":
    pytest.main([__file__])
