#!/usr/bin/env python3
"""
Example usage of the Container Bridge.

This script converts general-purpose containers into the compact family,
serializes them to JSON without static type information and reads them back.
"""

from collections import Counter, OrderedDict

from container_bridge import CodecConfig, ContainerKind, NumeralBase, create_context
from container_bridge.conversion import to_compact, to_std


def main():
    """Main example function."""
    print("Container Bridge Example")
    print("=" * 50)

    # Structural conversion
    ids = [42, 23, 666666666666, 4200000000000000]
    long_list = to_compact.to_long_list(ids)
    print(f"LongList from list:        {list(long_list)}")
    print(f"Back to array('q'):        {to_std.to_long_array(long_list)}")

    words = ["Time", "TIME", "time"]
    print(f"ObjectSet size:            {len(to_compact.to_object_set(words))}")
    print(f"CaseInsensitiveSet size:   {len(to_compact.to_case_insensitive_set(words))}")

    # Serialization
    context = create_context().freeze()
    document = OrderedDict([
        ("ids", long_list),
        ("tags", to_compact.to_object_ordered_set(["b", "a"])),
        ("stock", Counter({"apple": 2})),
    ])
    json_string = context.to_json(document, indent=2)
    print("\nSerialized OrderedDict:")
    print(json_string)

    restored = context.from_json(json_string, ContainerKind.ORDERED_DICT)
    print(f"\nRound trip equal: {restored == document}")

    # Numeral base
    hex_context = context.with_config(CodecConfig(numeral_base=NumeralBase(16)))
    print(f"\nLongList in base 16: {hex_context.to_json(long_list)}")


if __name__ == "__main__":
    main()
