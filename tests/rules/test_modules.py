"""
Модули: флаги, экспорты, причины, вложенные модули, профиль.
"""

from __future__ import annotations

from tests.infrastructure import compilation, module, render


def _one(m, **kw) -> str:
    return render(compilation(modules=[m]), **kw)


def test_module_line():
    m = module("./src/index.js", id=42, sizes={"javascript": 1024}, built=True)
    assert _one(m) == "./src/index.js [42] 1 KiB [built]"


def test_id_equal_to_name_printed_once():
    assert _one(module("./a.js", id="./a.js")) == "./a.js"


def test_loaders_prefix_kept():
    assert _one(module("css-loader!./a.css")) == "css-loader!./a.css"


def test_module_type_only_when_not_plain():
    assert _one(module("./a.js", type="module")) == "./a.js"
    assert _one(module("./a.js", type="runtime module")) == "runtime module ./a.js"


def test_problem_flags():
    assert _one(module("./a.js", warnings=2, errors=True)) == "./a.js [2 warnings] [errors]"


def test_empty_exports_lists():
    m = module("./a.js", providedExports=[], usedExports=[])
    assert _one(m) == "./a.js\n  [no exports]\n  [no exports used]"


def test_some_exports_used():
    m = module("./a.js", providedExports=["a", "b"], usedExports=["a"])
    assert _one(m) == "./a.js\n  [exports: a, b]\n  [only some exports used: a]"


def test_all_exports_used():
    m = module("./a.js", providedExports=["a"], usedExports=["a"])
    assert _one(m) == "./a.js\n  [exports: a]\n  [all exports used]"


def test_reasons():
    m = module(
        "./b.js",
        reasons=[{"type": "harmony import", "userRequest": "./b", "moduleId": 1, "module": "./a.js"}],
    )
    assert _one(m) == "./b.js\n  harmony import ./b [1] ./a.js"


def test_nested_modules_marked():
    m = module("./concat.js", modules=[module("./x.js"), module("./y.js")], filteredModules=2)
    assert _one(m) == "./concat.js\n  | ./x.js\n  | ./y.js\n  + 2 nested modules"


def test_profile_in_brackets():
    m = module("./a.js", profile={"total": 12, "resolving": 3, "building": 9})
    assert _one(m) == "./a.js\n  12 ms (resolving: 3 ms, building: 9 ms)"


def test_profile_ignores_non_numeric_compilation_time():
    m = module("./a.js", profile={"total": 12, "resolving": 3, "building": 9})
    assert render(compilation(time="slow", modules=[m])) == "./a.js\n  12 ms (resolving: 3 ms, building: 9 ms)"


def test_issuer_path_hidden_without_profile():
    m = module("./b.js", issuerPath=[{"id": 1, "name": "./a.js"}])
    assert _one(m) == "./b.js"


def test_optimization_bailout():
    m = module("./a.js", optimizationBailout=["ModuleConcatenation bailout: Module is not an ECMAScript module"])
    assert _one(m) == "./a.js\n  ModuleConcatenation bailout: Module is not an ECMAScript module"
