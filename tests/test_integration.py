"""Integration tests for the Container Bridge."""

import json
from collections import Counter, OrderedDict

from container_bridge import CodecConfig, ContainerKind, NumeralBase, create_context
from container_bridge.conversion import to_compact, to_std


class TestContainerBridgeIntegration:
    """Integration tests for conversion and serialization together."""

    def setup_method(self):
        """Set up test fixtures."""
        self.context = create_context().freeze()

    def test_convert_serialize_and_restore(self, long_values):
        """Test converting std containers, writing them to a file and reading them back."""
        document = OrderedDict([
            ("ids", to_compact.to_long_list(long_values)),
            ("names", to_compact.to_case_insensitive_ordered_set(["Alice", "ALICE", "Bob"])),
            ("stock", to_compact.to_object_bag(Counter({"apple": 2}))),
            ("scores", to_compact.to_object_float_map({"alice": 9.5})),
        ])

        restored = self.context.from_json(self.context.to_json(document), ContainerKind.ORDERED_DICT)

        assert restored == document
        assert list(restored["names"]) == ["ALICE", "Bob"]
        assert to_std.to_counter(restored["stock"]) == Counter({"apple": 2})
        assert list(to_std.to_long_array(restored["ids"])) == long_values

    def test_file_round_trip(self, temp_dir):
        """Test writing serialized containers to disk."""
        container = to_compact.to_int_object_map({1: ["a"], 2: {"k": "v"}})
        path = temp_dir / "map.json"
        path.write_text(self.context.to_json(container, indent=2), encoding="utf-8")

        restored = self.context.from_json(path.read_text(encoding="utf-8"), ContainerKind.INT_OBJECT_MAP)

        assert restored == container

    def test_recode_between_bases(self, long_values):
        """Test reading with one base and writing with another."""
        hex_context = self.context.with_config(CodecConfig(numeral_base=NumeralBase(16)))
        container = to_compact.to_long_ordered_set(long_values)

        hex_text = hex_context.to_json(container)
        decimal_text = self.context.to_json(hex_context.from_json(hex_text, ContainerKind.LONG_ORDERED_SET))

        assert json.loads(decimal_text) == long_values
