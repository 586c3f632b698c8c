"""
Движок рендеринга на пустом реестре: дисциплина вызова категорий хуков.
"""

from __future__ import annotations

import pytest

from statsprinter import HookRegistry, PrinterContext, StatsPrinter
from statsprinter.selector_keys import variant_item_name


@pytest.fixture
def reg():
    return HookRegistry()


@pytest.fixture
def sp(reg):
    return StatsPrinter(reg)


class TestPrintBail:
    def test_first_non_none_wins(self, reg, sp):
        reg.tap("print", "x", lambda v, c: None)
        reg.tap("print", "x", lambda v, c: "second")
        reg.tap("print", "x", lambda v, c: "third")
        assert sp.print("x", 1) == "second"

    def test_most_specific_level_first(self, reg, sp):
        reg.tap("print", "b", lambda v, c: "general")
        reg.tap("print", "a.b", lambda v, c: "specific")
        assert sp.print("a.b", 1) == "specific"
        assert sp.print("z.b", 1) == "general"

    def test_empty_string_stops_chain(self, reg, sp):
        reg.tap("print", "x", lambda v, c: "")
        reg.tap("print", "x", lambda v, c: "never")
        assert sp.print("x", {"k": 1}) == ""

    def test_numbers_are_coerced(self, reg, sp):
        reg.tap("print", "n", lambda v, c: v)
        assert sp.print("n", 5) == "5"
        assert sp.print("n", 2.0) == "2"

    def test_scalar_without_handler_prints_nothing(self, sp):
        assert sp.print("x", "value") is None


class TestArrays:
    def test_items_named_and_joined(self, reg, sp):
        reg.tap("getItemName", "list[]", lambda item, c: "num")
        reg.tap("print", "num", lambda v, c: f"#{v}")
        assert sp.print("list", [1, 2]) == "#1\n#2"

    def test_print_items_joiner(self, reg, sp):
        reg.tap("print", "list[]", lambda v, c: str(v))
        reg.tap("printItems", "list", lambda items, c: ", ".join(items))
        assert sp.print("list", [1, 2, 3]) == "1, 2, 3"

    def test_sort_items_reorders_in_place(self, reg, sp):
        reg.tap("print", "list[]", lambda v, c: str(v))
        reg.tap("sortItems", "list", lambda items, c: items.sort())
        assert sp.print("list", [3, 1, 2]) == "1\n2\n3"

    def test_empty_array_skips_joiner(self, reg, sp):
        called = []
        reg.tap("printItems", "list", lambda items, c: called.append(items) or "joined")
        assert sp.print("list", []) is None
        assert called == []

    def test_item_ref_and_index(self, reg, sp):
        seen = []

        def record(v, ctx):
            seen.append((ctx.ref("num"), ctx.index))
            return "ok"

        reg.tap("getItemName", "list[]", lambda item, c: "num")
        reg.tap("print", "num", record)
        sp.print("list", ["a", "b"])
        assert seen == [("a", 0), ("b", 1)]


class TestObjects:
    def test_elements_in_key_order(self, reg, sp):
        reg.tap("print", "obj.a", lambda v, c: "A")
        reg.tap("print", "obj.b", lambda v, c: "B")
        assert sp.print("obj", {"b": 1, "a": 2}) == "B\nA"

    def test_sort_elements(self, reg, sp):
        reg.tap("print", "obj.a", lambda v, c: "A")
        reg.tap("print", "obj.b", lambda v, c: "B")
        reg.tap("sortElements", "obj", lambda keys, c: keys.sort())
        assert sp.print("obj", {"b": 1, "a": 2}) == "A\nB"

    def test_sorters_run_in_registration_order(self, reg, sp):
        reg.tap("print", "obj.a", lambda v, c: "A")
        reg.tap("print", "obj.b", lambda v, c: "B")
        reg.tap("sortElements", "obj", lambda keys, c: keys.sort())
        reg.tap("sortElements", "obj", lambda keys, c: keys.reverse())
        assert sp.print("obj", {"a": 1, "b": 2}) == "B\nA"

    def test_synthetic_element(self, reg, sp):
        reg.tap("sortElements", "obj", lambda keys, c: keys.append("extra!"))
        reg.tap("print", "obj.extra!", lambda v, c: f"extra {v}")
        assert sp.print("obj", {}) == "extra None"

    def test_print_elements_receives_names(self, reg, sp):
        reg.tap("print", "obj.a", lambda v, c: "A")
        reg.tap("printElements", "obj", lambda items, c: "|".join(f"{i.element}={i.content}" for i in items))
        assert sp.print("obj", {"a": 1, "b": 2}) == "a=A|b=None"

    def test_element_context(self, reg, sp):
        seen = {}

        def record(v, ctx):
            seen.update(element=ctx.element, parent=ctx.parent, type=ctx.type, ref=ctx.ref("a"))
            return "x"

        reg.tap("print", "obj.a", record)
        data = {"a": 7}
        sp.print("obj", data)
        assert seen == {"element": "a", "parent": data, "type": "obj.a", "ref": 7}


class TestResultWaterfall:
    def test_each_modifier_sees_previous(self, reg, sp):
        reg.tap("print", "x", lambda v, c: "v")
        reg.tap("result", "x", lambda t, c: t + "1")
        reg.tap("result", "x", lambda t, c: None)
        reg.tap("result", "x", lambda t, c: t + "2")
        assert sp.print("x", 0) == "v12"

    def test_result_runs_for_empty_output(self, reg, sp):
        reg.tap("result", "x", lambda t, c: "filled" if t is None else t)
        assert sp.print("x", 0) == "filled"


class TestPolymorphicItems:
    def test_variant_then_base(self, reg, sp):
        reg.tap("getItemName", "log[]", lambda e, c: variant_item_name("entry", e.get("kind")))
        reg.tap("print", "entry(warn).entry", lambda e, c: "W")
        reg.tap("print", "entry", lambda e, c: "generic")
        assert sp.print("log", [{"kind": "warn"}, {"kind": "other"}, {}]) == "W\ngeneric\ngeneric"


class TestContext:
    def test_nested_print_from_handler(self, reg, sp):
        reg.tap("print", "outer", lambda v, c: f"<{c.print('inner', v)}>")
        reg.tap("print", "inner", lambda v, c: str(v))
        assert sp.print("outer", 1) == "<1>"

    def test_unbound_context_cannot_print(self):
        with pytest.raises(RuntimeError):
            PrinterContext().print("x", 1)

    def test_changes_do_not_leak_to_parent(self, reg, sp):
        def mutate(v, ctx):
            ctx.extras["seen"] = True
            ctx.chunk_group_kind = "Entrypoint"
            return "a"

        kinds = []
        reg.tap("print", "obj.a", mutate)
        reg.tap("print", "obj.b", lambda v, c: kinds.append((c.chunk_group_kind, c.extras.get("seen"))) or "b")
        sp.print("obj", {"a": 1, "b": 2})
        assert kinds == [(None, None)]


def test_handler_exception_propagates(reg, sp):
    def boom(v, c):
        raise RuntimeError("boom")

    reg.tap("print", "obj.a", boom)
    with pytest.raises(RuntimeError, match="boom"):
        sp.print("obj", {"a": 1})


def test_rendering_is_idempotent(reg, sp):
    reg.tap("print", "list[]", lambda v, c: str(v))
    data = [1, 2]
    assert sp.print("list", data) == sp.print("list", data)
    assert data == [1, 2]


def test_handlers_registered_later_are_visible(reg, sp):
    assert sp.print("x", 1) is None
    reg.tap("print", "x", lambda v, c: "now")
    assert sp.print("x", 1) == "now"
