from __future__ import annotations

from statsprinter.selector_keys import (
    element_type,
    is_synthetic,
    item_type,
    levels,
    split_variant,
    variant_item_name,
)


def test_levels_from_most_specific():
    assert levels("compilation.assets[].asset.name") == [
        "compilation.assets[].asset.name",
        "assets[].asset.name",
        "asset.name",
        "name",
    ]


def test_single_segment():
    assert levels("compilation") == ["compilation"]


def test_child_types():
    assert element_type("compilation", "assets") == "compilation.assets"
    assert item_type("compilation.assets", "asset") == "compilation.assets[].asset"
    assert item_type("chunk.files", None) == "chunk.files[]"


def test_synthetic_keys():
    assert is_synthetic("summary!")
    assert not is_synthetic("summary")


class TestVariants:
    def test_variant_name_levels_fall_back_to_base(self):
        name = variant_item_name("loggingEntry", "warn")
        assert name == "loggingEntry(warn).loggingEntry"
        found = levels(f"loggingGroup.entries[].{name}.message")
        assert found.index("loggingEntry(warn).loggingEntry.message") < found.index("loggingEntry.message")

    def test_without_discriminant(self):
        assert variant_item_name("loggingEntry", None) == "loggingEntry"

    def test_split_variant(self):
        assert split_variant("loggingEntry(warn)") == ("loggingEntry", "warn")
        assert split_variant("asset") == ("asset", None)
