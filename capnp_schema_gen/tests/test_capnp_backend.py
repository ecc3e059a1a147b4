"""
Tests for rendering schema models as Cap'n Proto text.
"""

from __future__ import annotations

import pytest

from capnp_schema_gen.pipeline.analyzer import CapnpType, EnumValue, FieldDefinition, SchemaDefinition, TypeKind
from capnp_schema_gen.pipeline.backends import CapnpBackend
from capnp_schema_gen.pipeline.config import SchemaGeneratorConfig


@pytest.fixture
def backend():
    return CapnpBackend(SchemaGeneratorConfig())


def person_definition(namespace: str = "") -> SchemaDefinition:
    return SchemaDefinition(
        name="Person",
        type_id=0x10,
        kind=TypeKind.STRUCT,
        namespace=namespace,
        fields=[
            FieldDefinition(name="Name", index=0, type=CapnpType(kind=TypeKind.TEXT)),
            FieldDefinition(name="Age", index=1, type=CapnpType(kind=TypeKind.PRIMITIVE, type_name="Int32")),
            FieldDefinition(name="Active", index=2, type=CapnpType(kind=TypeKind.PRIMITIVE, type_name="Bool")),
        ],
    )


class TestStructRendering:
    def test_person(self, backend):
        assert backend.generate(person_definition()) == ("struct Person @0x10 {\n  Text name @0;\n  int32 age @1;\n  bool active @2;\n}\n")

    def test_namespace_directive(self, backend):
        text = backend.generate(person_definition("app.models"))

        assert text.startswith('$namespace("app.models");\n\nstruct Person @0x10 {\n')

    def test_namespace_can_be_disabled(self):
        backend = CapnpBackend(SchemaGeneratorConfig(include_namespace=False))

        assert backend.generate(person_definition("app.models")).startswith("struct Person @0x10 {\n")

    def test_generation_comment(self, backend):
        text = backend.generate(person_definition("app"), generation_comment="Generated by test")

        assert text.startswith('# Generated by test\n$namespace("app");\n\nstruct Person')

    def test_optional_marker(self, backend):
        definition = SchemaDefinition(
            name="Profile",
            type_id=0xABCDEF,
            fields=[
                FieldDefinition(
                    name="Nickname",
                    index=0,
                    type=CapnpType(kind=TypeKind.TEXT),
                    is_optional=True,
                ),
            ],
        )

        assert "  Text? nickname @0;\n" in backend.generate(definition)

    def test_empty_struct(self, backend):
        assert backend.generate(SchemaDefinition(name="Empty", type_id=0x1)) == "struct Empty @0x1 {\n}\n"

    def test_type_id_is_upper_case_hex_without_padding(self, backend):
        definition = SchemaDefinition(name="Big", type_id=0xFEDCBA0987654321)

        assert backend.generate(definition).startswith("struct Big @0xFEDCBA0987654321 {")
        assert backend.generate(SchemaDefinition(name="Small", type_id=0xA)).startswith("struct Small @0xA {")


class TestEnumRendering:
    def test_enum(self, backend):
        definition = SchemaDefinition(
            name="Status",
            type_id=0xFEDCBA0987654321,
            kind=TypeKind.ENUM,
            enum_values=[
                EnumValue(name="None", value=0),
                EnumValue(name="Active", value=1),
                EnumValue(name="Inactive", value=2),
                EnumValue(name="Pending", value=3),
            ],
        )

        assert backend.generate(definition) == (
            "enum Status @0xFEDCBA0987654321 {\n  none @0;\n  active @1;\n  inactive @2;\n  pending @3;\n}\n"
        )

    def test_ordinals_kept_verbatim(self, backend):
        definition = SchemaDefinition(
            name="Priority",
            type_id=0x5,
            kind=TypeKind.ENUM,
            enum_values=[EnumValue(name="HIGH", value=10), EnumValue(name="LOW", value=1)],
        )

        assert backend.generate(definition) == "enum Priority @0x5 {\n  high @10;\n  low @1;\n}\n"


class TestInterfaceRendering:
    def test_interface(self, backend):
        definition = SchemaDefinition(
            name="ITestInterface",
            type_id=0x1111111111111111,
            kind=TypeKind.INTERFACE,
            fields=[
                FieldDefinition(name="Method1", index=0, type=CapnpType(kind=TypeKind.VOID)),
                FieldDefinition(name="Method2", index=1, type=CapnpType(kind=TypeKind.VOID)),
            ],
        )

        assert backend.generate(definition) == ("interface ITestInterface @0x1111111111111111 {\n  method1() -> ();\n  method2() -> ();\n}\n")


class TestUnknownKind:
    def test_only_prefix_is_rendered(self, backend):
        definition = SchemaDefinition(name="Odd", type_id=0x1, kind=TypeKind.LIST, namespace="ns")

        assert backend.generate(definition) == '$namespace("ns");\n\n'


class TestTranslateType:
    @pytest.mark.parametrize(
        ("capnp_type", "expected"),
        [
            (CapnpType(kind=TypeKind.PRIMITIVE, type_name="Int64"), "int64"),
            (CapnpType(kind=TypeKind.PRIMITIVE, type_name="Float32"), "float32"),
            (CapnpType(kind=TypeKind.PRIMITIVE, type_name="UInt8"), "uint8"),
            (CapnpType(kind=TypeKind.PRIMITIVE), "void"),
            (CapnpType(kind=TypeKind.TEXT), "Text"),
            (CapnpType(kind=TypeKind.DATA), "Data"),
            (CapnpType(kind=TypeKind.VOID), "Void"),
            (CapnpType(kind=TypeKind.INTERFACE), "Void"),
            (CapnpType(kind=TypeKind.STRUCT, type_name="HomeAddress", type_id=0x1), "HomeAddress"),
            (CapnpType(kind=TypeKind.ENUM, type_name="StatusCode", type_id=0x2), "StatusCode"),
            (CapnpType(kind=TypeKind.STRUCT), "Void"),
            (CapnpType(kind=TypeKind.LIST), "List(Void)"),
        ],
    )
    def test_type_names(self, backend, capnp_type, expected):
        assert backend.translate_type(capnp_type) == expected

    def test_nested_lists(self, backend):
        nested = CapnpType(
            kind=TypeKind.LIST,
            element_type=CapnpType(
                kind=TypeKind.LIST,
                element_type=CapnpType(kind=TypeKind.ENUM, type_name="Color"),
            ),
        )

        assert backend.translate_type(nested) == "List(List(Color))"


class TestDeterminism:
    def test_same_model_same_text(self, backend):
        first = backend.generate(person_definition("app"))
        second = CapnpBackend(SchemaGeneratorConfig()).generate(person_definition("app"))

        assert first == second


if __name__ == "__main__":
    pytest.main([__file__])
