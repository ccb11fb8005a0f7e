"""Tests for the language server's document indexing."""

import importlib.util
import sys
from types import SimpleNamespace

import pytest

from spilang.tests.utils import PROJECT_ROOT

pytest.importorskip("pygls")
types = pytest.importorskip("lsprotocol.types")


URI = "file:///prog.pas"
PROGRAM = "program P;\nvar a : integer;\nprocedure Alpha(b : real);\nbegin end;\nbegin a := 1 end."


@pytest.fixture(name="server")
def fixture_server(monkeypatch):
    spec = importlib.util.spec_from_file_location(
        "spi_language_server", PROJECT_ROOT / "vscode" / "server" / "main.py"
    )
    module = importlib.util.module_from_spec(spec)
    monkeypatch.setitem(sys.modules, spec.name, module)
    spec.loader.exec_module(module)
    published = []
    monkeypatch.setattr(
        module.lang_server, "publish_diagnostics",
        lambda uri, diagnostics: published.append((uri, diagnostics)),
    )
    return module, published


def test_valid_document_clears_diagnostics_and_indexes_symbols(server):
    module, published = server
    module.lang_server.update_index(URI, PROGRAM)
    assert published == [(URI, [])]
    symbols = {s.name: s for s in module.lang_server.symbols_by_uri[URI]}
    assert set(symbols) == {"a", "Alpha", "b"}
    assert symbols["a"].scope == "global"
    assert symbols["b"].scope == "Alpha"
    assert (symbols["a"].line, symbols["a"].column) == (1, 4)
    assert symbols["Alpha"].detail == "procedure Alpha(b: real)"


def test_invalid_document_publishes_one_error(server):
    module, published = server
    module.lang_server.update_index(URI, "program P; begin a := end.")
    [(uri, diagnostics)] = published
    assert uri == URI
    [diagnostic] = diagnostics
    assert diagnostic.code == "UNEXPECTED_TOKEN"
    assert diagnostic.range.start.line == 0
    assert URI not in module.lang_server.symbols_by_uri


def test_did_change_checks_the_whole_document(server):
    module, _ = server
    received = []
    fake_ls = SimpleNamespace(
        workspace=SimpleNamespace(
            get_text_document=lambda uri: SimpleNamespace(source=PROGRAM),
        ),
        update_index=lambda uri, text: received.append((uri, text)),
    )
    params = types.DidChangeTextDocumentParams(
        text_document=types.VersionedTextDocumentIdentifier(uri=URI, version=2),
        content_changes=[
            types.TextDocumentContentChangeEvent_Type1(
                range=types.Range(types.Position(4, 11), types.Position(4, 12)),
                text="1",
            )
        ],
    )
    module.did_change(fake_ls, params)
    assert received == [(URI, PROGRAM)]
