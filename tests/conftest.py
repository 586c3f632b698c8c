import pytest

from statsprinter import create_printer

# Импорт из унифицированной инфраструктуры
from tests.infrastructure.file_utils import write_json
from tests.infrastructure.stats_builders import asset, compilation


@pytest.fixture
def printer():
    """Принтер со стандартным набором правил."""
    return create_printer()


@pytest.fixture
def simple_compilation():
    """Успешная компиляция с одним ассетом."""
    return compilation(
        rspackVersion="1.0.0",
        hash="abc123",
        time=1500,
        assets=[asset("bundle.js", 1200, emitted=True)],
        errorsCount=0,
        warningsCount=0,
    )


@pytest.fixture
def stats_file(tmp_path, simple_compilation):
    """simple_compilation, сохранённая как stats.json."""
    return write_json(tmp_path / "stats.json", simple_compilation)
