from pathlib import Path

import pytest

ESTATUTO_HTML = (
    "<html><head><title>Estatuto Social AddressForAll</title></head>"
    "<body><h1>Estatuto</h1><p>Art. 1º</p></body></html>"
)
COLECAO_HTML = '<meta charset="utf-8">' "<h1>Coleção 2020-04 v7</h1><p>Registro da coleção.</p>"
ESTATUTO_PDF = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\nestatuto assinado\n%%EOF\n"
COLECAO_PDF = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\ncolecao registrada\n%%EOF\n"

DOCUMENT_FILES = {
    "_private/A4A-Estatuto2020-04-03.htm": ESTATUTO_HTML.encode("utf-8"),
    "_private/A4A-colecao2020-04-v7.htm": COLECAO_HTML.encode("utf-8"),
    "_private/A4A-colecao2020-04-v7_reg~assign.pdf": COLECAO_PDF,
    "_private/A4A-Estatuto2020-04-03.assign.pdf": ESTATUTO_PDF,
}


@pytest.fixture
def document_root(tmp_path, settings) -> Path:
    """A DOCUMENT_ROOT holding every document of the shipped registry."""
    for rel, content in DOCUMENT_FILES.items():
        target = tmp_path / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
    settings.DOCUMENT_ROOT = tmp_path
    return tmp_path


@pytest.fixture
def write_registry(tmp_path):
    def _write(text: str, name: str = "documents.yaml") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write
