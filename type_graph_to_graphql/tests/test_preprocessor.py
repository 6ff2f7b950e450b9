import pytest

from type_graph_to_graphql.pipeline import EmitterConfig, UnresolvedReference
from type_graph_to_graphql.pipeline.analyzer import IDENTIFIER_SCALAR, Preprocessor
from type_graph_to_graphql.pipeline.type_graph import (
    AliasNode,
    DocTag,
    Documentation,
    EnumNode,
    InterfaceNode,
    PrimitiveNode,
    ReferenceNode,
    StringLiteralNode,
    UnionNode,
)


def identifier_tag():
    return Documentation(tags=[DocTag(title="graphql", description="ID")])


class TestAliasCollapsing:
    """Test the first pass: trivial aliases become renames"""

    def test_alias_of_enum(self):
        types = {
            "Role": EnumNode(values=["A"]),
            "Status": AliasNode(target=ReferenceNode(target="Role")),
        }
        ctx = Preprocessor(types).run()

        assert ctx.renames == {"Status": "Role"}
        assert list(ctx.emitted) == ["Role"]
        assert ctx.name("Status") == "Role"

    def test_alias_of_primitive_symbol(self):
        types = {
            "Text": PrimitiveNode(type_name="string"),
            "Body": AliasNode(target=ReferenceNode(target="Text")),
        }
        ctx = Preprocessor(types).run()
        assert ctx.renames == {"Body": "Text"}

    def test_identifier_alias(self):
        types = {"UserId": AliasNode(target=PrimitiveNode(type_name="string"), documentation=identifier_tag())}
        ctx = Preprocessor(types).run()

        assert ctx.renames == {"UserId": IDENTIFIER_SCALAR}
        assert ctx.emitted == {}

    def test_identifier_alias_of_reference(self):
        """The identifier tag applies even when the target is a non-trivial reference"""
        types = {
            "Node": InterfaceNode(),
            "NodeId": AliasNode(target=ReferenceNode(target="Node"), documentation=identifier_tag()),
        }
        ctx = Preprocessor(types).run()
        assert ctx.name("NodeId") == "ID"

    def test_alias_of_interface_is_kept(self):
        types = {
            "Post": InterfaceNode(),
            "Entry": AliasNode(target=ReferenceNode(target="Post")),
        }
        ctx = Preprocessor(types).run()

        assert ctx.renames == {}
        assert list(ctx.emitted) == ["Post", "Entry"]

    def test_forward_reference(self):
        types = {
            "Status": AliasNode(target=ReferenceNode(target="Role")),
            "Role": EnumNode(values=["A"]),
        }
        assert Preprocessor(types).run().renames == {"Status": "Role"}

    def test_dangling_reference(self):
        types = {"Status": AliasNode(target=ReferenceNode(target="Missing"))}
        with pytest.raises(UnresolvedReference):
            Preprocessor(types).run()

    def test_input_graph_is_not_modified(self):
        types = {
            "Role": EnumNode(values=["A"]),
            "Status": AliasNode(target=ReferenceNode(target="Role")),
        }
        ctx = Preprocessor(types).run()
        assert list(types) == ["Role", "Status"]
        assert ctx.types is types


class TestClassification:
    """Test the second pass: scalar and enum names are known before emission"""

    def test_scalars_and_enums(self):
        types = {
            "Post": InterfaceNode(),
            "Role": EnumNode(values=["A"]),
            "Cursor": AliasNode(target=PrimitiveNode(type_name="string")),
            "Size": AliasNode(target=UnionNode(types=[StringLiteralNode(value="S"), StringLiteralNode(value="L")])),
        }
        ctx = Preprocessor(types).run()

        assert ctx.enum_names == ["Role", "Size"]
        assert ctx.scalar_names == ["Cursor"]
        assert ctx.is_enum("Size")
        assert not ctx.is_scalar("Post")

    def test_union_of_enums_is_an_enum(self):
        types = {
            "Size": AliasNode(target=UnionNode(types=[ReferenceNode(target="Small"), ReferenceNode(target="Big")])),
            "Small": EnumNode(values=["XS"]),
            "Big": EnumNode(values=["XL"]),
        }
        assert Preprocessor(types).run().enum_names == ["Size", "Small", "Big"]

    def test_union_of_interfaces_is_not_an_enum(self):
        types = {
            "Cat": InterfaceNode(),
            "Pet": AliasNode(target=UnionNode(types=[ReferenceNode(target="Cat")])),
        }
        assert Preprocessor(types).run().enum_names == []

    def test_names_are_normalized(self):
        types = {"ns.Cursor": AliasNode(target=PrimitiveNode(type_name="number"))}
        assert Preprocessor(types).run().scalar_names == ["ns_Cursor"]

    def test_config_is_attached(self):
        config = EmitterConfig(placeholder_field="_empty")
        assert Preprocessor({}, config).run().config is config
