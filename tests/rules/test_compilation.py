"""
Сводка компиляции и поля верхнего уровня.
"""

from __future__ import annotations

from datetime import datetime

from statsprinter.formatting import AVAILABLE_COLORS
from statsprinter.formatting.colors import COLOR_END

from tests.infrastructure import asset, compilation, error, render, strip_ansi

CHILDREN_HINT = "(Use 'stats.children: true' resp. '--stats-children' for more details)"


class TestSummary:
    def test_successful_build(self, simple_compilation):
        assert render(simple_compilation) == (
            "asset bundle.js 1.17 KiB [emitted]\n"
            "Rspack 1.0.0 compiled successfully in 1.50 s (abc123)"
        )

    def test_colors_do_not_change_text(self, simple_compilation):
        colored = render(simple_compilation, colors=True)
        assert colored != render(simple_compilation)
        assert strip_ansi(colored) == render(simple_compilation)
        assert f"{AVAILABLE_COLORS['green']}successfully{COLOR_END}" in colored

    def test_named_compilation(self):
        stats = compilation(name="app", rspackVersion="1.0.0", errorsCount=0, warningsCount=0)
        assert render(stats) == "app (Rspack 1.0.0) compiled successfully"

    def test_errors_and_warnings_counts(self):
        stats = compilation(errorsCount=2, warningsCount=1)
        assert render(stats) == "Rspack compiled with 2 errors and 1 warning"

    def test_built_at_prefix(self):
        ts = 1_700_000_000_000
        moment = datetime.fromtimestamp(ts / 1000)
        stats = compilation(builtAt=ts, errorsCount=0, warningsCount=0)
        assert render(stats) == f"{moment:%Y-%m-%d %H:%M:%S}: Rspack compiled successfully"

    def test_non_numeric_time_is_omitted(self):
        stats = compilation(time="1500", hash="h", errorsCount=0, warningsCount=0)
        assert render(stats) == "Rspack compiled successfully (h)"

    def test_non_numeric_built_at_is_omitted(self):
        stats = compilation(builtAt="x", errorsCount=0, warningsCount=0)
        assert render(stats) == "Rspack compiled successfully"

    def test_empty_color_overrides_keep_colors_on(self):
        text = render(compilation(errorsCount=0, warningsCount=0), colors={})
        assert f"{AVAILABLE_COLORS['green']}successfully{COLOR_END}" in text

    def test_nothing_to_say(self):
        assert render({}) == ""

    def test_unknown_fields_are_silent(self):
        stats = compilation(hash="h", custom={"a": 1}, version="5.0.0", errorsCount=0, warningsCount=0)
        assert render(stats) == "Rspack compiled successfully (h)"


class TestChildren:
    def test_child_block_is_indented(self):
        child = compilation(name="child", errorsCount=0, warningsCount=0, assets=[asset("c.js", 10)])
        stats = compilation(children=[child], errorsCount=0, warningsCount=0)
        assert render(stats) == (
            "  asset c.js 10 bytes\n"
            "  Child child compiled successfully\n"
            "Rspack compiled successfully"
        )

    def test_warnings_in_children_reported_once(self):
        stats = compilation(
            warningsCount=5,
            warnings=[error("w1"), error("w2"), error("w3")],
        )
        text = render(stats)
        assert text == (
            "WARNING in w1\n\nWARNING in w2\n\nWARNING in w3\n\n"
            f"2 WARNINGS in child compilations {CHILDREN_HINT}\n"
            "Rspack compiled with 5 warnings"
        )
        assert text.count("in child compilations") == 1

    def test_no_hint_when_children_are_printed(self):
        stats = compilation(errorsCount=3, errors=[error("e1")], children=[])
        assert "child compilations" not in render(stats)

    def test_single_hidden_error(self):
        stats = compilation(errorsCount=2, errors=[error("e1")])
        assert f"1 ERROR in child compilations {CHILDREN_HINT}" in render(stats)


class TestCountsAndFields:
    def test_filtered_assets_with_visible_list(self):
        stats = compilation(assets=[asset("a.js", 10)], filteredAssets=2)
        assert render(stats) == "asset a.js 10 bytes\n+ 2 assets"

    def test_filtered_assets_without_list(self):
        assert render(compilation(filteredAssets=1)) == "1 asset"

    def test_filtered_modules(self):
        stats = compilation(modules=[{"name": "./a.js"}], filteredModules=3)
        assert render(stats) == "./a.js\n+ 3 modules"

    def test_zero_filtered_is_omitted(self):
        assert render(compilation(filteredModules=0)) == ""

    def test_env(self):
        assert render(compilation(env={"production": True})) == (
            'Environment (--env): {\n  "production": true\n}'
        )

    def test_empty_env_is_printed(self):
        assert render(compilation(env={})) == "Environment (--env): {}"

    def test_public_path(self):
        assert render(compilation(publicPath="/static/")) == "PublicPath: /static/"
        assert render(compilation(publicPath="")) == "PublicPath: (none)"

    def test_error_details_hint(self):
        text = render(compilation(filteredErrorDetailsCount=2))
        assert text.startswith("2 errors have detailed information that is not shown.\n")
        assert "'--stats-error-details'" in text

    def test_assets_by_chunk_name_is_silent(self):
        assert render(compilation(assetsByChunkName={"main": ["main.js"]})) == ""
