from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from json2dart import api
from json2dart.errors import ArtifactWriteError, FileOpenError, ParseError


def _quiet() -> Console:
    return Console(file=StringIO())


def test_generate_models_end_to_end(user_path: Path) -> None:
    written = api.generate_models(user_path, console=_quiet())
    assert [p.name for p in written] == ["address_model.dart", "user_model.dart"]
    assert all(p.parent == user_path.parent for p in written)
    address = (user_path.parent / "address_model.dart").read_text()
    user = (user_path.parent / "user_model.dart").read_text()
    assert "\tString city;" in address
    assert "\tList<String> tags;" in user
    assert "\tAddressModel address;" in user


def test_generate_models_is_idempotent(user_path: Path, tmp_path: Path) -> None:
    first = api.generate_models(user_path, out_dir=tmp_path / "one", console=_quiet())
    second = api.generate_models(user_path, out_dir=tmp_path / "two", console=_quiet())
    assert [p.read_bytes() for p in first] == [p.read_bytes() for p in second]


def test_explicit_out_dir_and_root_name(user_path: Path, tmp_path: Path) -> None:
    out = tmp_path / "generated"
    written = api.generate_models(user_path, out_dir=out, root_name="person", console=_quiet())
    assert (out / "person_model.dart").exists()
    assert written[-1] == out / "person_model.dart"
    assert "class PersonModel {" in written[-1].read_text()


def test_load_document_errors(tmp_path: Path) -> None:
    with pytest.raises(FileOpenError):
        api.load_document(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ParseError):
        api.load_document(bad)
    array = tmp_path / "array.json"
    array.write_text("[1, 2]")
    with pytest.raises(ParseError):
        api.load_document(array)


def test_load_document_preserves_key_order(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"b": 1, "a": 2.5}')
    assert list(api.load_document(path)) == ["b", "a"]


def test_surrogate_key_is_a_write_error(tmp_path: Path) -> None:
    source = tmp_path / "in.json"
    source.write_text('{"a\\ud800": 1}')
    out = tmp_path / "out"
    with pytest.raises(ArtifactWriteError):
        api.generate_models(source, out_dir=out, console=_quiet())
    assert not list(out.glob("*.tmp"))


def test_traversing_key_is_rejected(tmp_path: Path) -> None:
    source = tmp_path / "in.json"
    source.write_text('{"../../escaped": {"x": 1}}')
    with pytest.raises(ArtifactWriteError):
        api.generate_models(source, out_dir=tmp_path / "sub" / "out", console=_quiet())
    assert not (tmp_path / "escaped_model.dart").exists()
