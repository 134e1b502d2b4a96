import pytest

from notas.config import NotasConfig


@pytest.fixture
def notas_dir(tmp_path):
    d = tmp_path / "notas"
    d.mkdir()
    (d / "a.pdf").write_bytes(b"%PDF-1.4 a")
    (d / "b.PDF").write_bytes(b"%PDF-1.4 bee")
    (d / "notes.txt").write_text("not a pdf")
    (d / "c.pdf").mkdir()
    return d


@pytest.fixture
def config(notas_dir):
    return NotasConfig(directory=notas_dir)
