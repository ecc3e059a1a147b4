"""
Tests for AtomicWriter.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from capnp_schema_gen.pipeline.errors import SchemaWriteError
from capnp_schema_gen.pipeline.writer import AtomicWriter

VALID_SCHEMA = "struct Person @0x10 {\n  Text name @0;\n}\n"


class TestAtomicWriter:
    def test_write_creates_file_and_parents(self, tmp_path: Path):
        target = tmp_path / "nested" / "person.capnp"

        AtomicWriter().write(target, VALID_SCHEMA)

        assert target.read_text(encoding="utf-8") == VALID_SCHEMA

    def test_write_leaves_no_temp_files(self, tmp_path: Path):
        target = tmp_path / "person.capnp"

        AtomicWriter().write(target, VALID_SCHEMA)

        assert [p.name for p in tmp_path.iterdir()] == ["person.capnp"]

    def test_invalid_schema_is_rejected_and_target_untouched(self, tmp_path: Path):
        target = tmp_path / "person.capnp"
        target.write_text("old", encoding="utf-8")

        with pytest.raises(SchemaWriteError):
            AtomicWriter().write(target, "struct Person @0x10 {\n")

        assert target.read_text(encoding="utf-8") == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["person.capnp"]

    def test_text_without_declaration_is_rejected(self, tmp_path: Path):
        with pytest.raises(SchemaWriteError, match="no struct, enum or interface"):
            AtomicWriter().write(tmp_path / "x.capnp", '$namespace("ns");\n\n')

    def test_validation_can_be_skipped(self, tmp_path: Path):
        target = tmp_path / "raw.capnp"

        AtomicWriter().write(target, "anything", validate=False)

        assert target.read_text(encoding="utf-8") == "anything"

    def test_custom_validator(self, tmp_path: Path):
        seen = []

        AtomicWriter(validate_schema=seen.append).write(tmp_path / "x.capnp", "custom")

        assert seen == ["custom"]

    def test_write_if_not_exists(self, tmp_path: Path):
        target = tmp_path / "person.capnp"
        writer = AtomicWriter()

        assert writer.write_if_not_exists(target, VALID_SCHEMA) is True
        with pytest.raises(FileExistsError):
            writer.write_if_not_exists(target, VALID_SCHEMA)

    def test_write_direct(self, tmp_path: Path):
        target = tmp_path / "direct.capnp"

        AtomicWriter().write_direct(target, VALID_SCHEMA)

        assert target.read_text(encoding="utf-8") == VALID_SCHEMA
