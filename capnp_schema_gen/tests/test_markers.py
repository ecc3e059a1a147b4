"""
Tests for the type markers.
"""

from __future__ import annotations

import pytest

from capnp_schema_gen.markers import MAX_TYPE_ID, SERIALIZABLE_ATTR, TYPE_ID_ATTR, CapnpSerializable, capnp_struct, type_id


class TestTypeId:
    def test_stores_identity(self):
        @type_id(0x1234567890ABCDEF)
        class Tagged:
            pass

        assert getattr(Tagged, TYPE_ID_ATTR) == 0x1234567890ABCDEF

    def test_accepts_bounds(self):
        type_id(0)
        type_id(MAX_TYPE_ID)

    @pytest.mark.parametrize("value", [-1, MAX_TYPE_ID + 1])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValueError):
            type_id(value)

    @pytest.mark.parametrize("value", ["0x10", 1.5, True])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValueError):
            type_id(value)


class TestSerializableMarkers:
    def test_base_class(self):
        class Record(CapnpSerializable):
            pass

        assert getattr(Record, SERIALIZABLE_ATTR)

    def test_decorator_keeps_class(self):
        class Record:
            pass

        assert capnp_struct(Record) is Record
        assert getattr(Record, SERIALIZABLE_ATTR)
