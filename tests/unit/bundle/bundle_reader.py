"""Unit tests for locating bundle files and reading config.json."""

from __future__ import annotations

import pytest

from seqclass.bundle import locate_bundle, read_config_document
from seqclass.errors import BundleIOError, ConfigParseError, LoadError

BUNDLE_FILES = ("config.json", "tokenizer.json", "model.safetensors")


def _touch_bundle(directory, skip: str | None = None) -> None:
    for name in BUNDLE_FILES:
        if name != skip:
            (directory / name).write_text("{}", encoding="utf-8")


def test_locate_bundle_resolves_all_three_files(tmp_path) -> None:
    _touch_bundle(tmp_path)

    paths = locate_bundle(tmp_path)

    assert paths.root == tmp_path
    assert paths.config == tmp_path / "config.json"
    assert paths.tokenizer == tmp_path / "tokenizer.json"
    assert paths.weights == tmp_path / "model.safetensors"


def test_locate_bundle_accepts_string_paths(tmp_path) -> None:
    _touch_bundle(tmp_path)

    assert locate_bundle(str(tmp_path)).root == tmp_path


@pytest.mark.parametrize("missing", BUNDLE_FILES)
def test_locate_bundle_names_the_missing_file(tmp_path, missing: str) -> None:
    _touch_bundle(tmp_path, skip=missing)

    with pytest.raises(BundleIOError) as exc_info:
        locate_bundle(tmp_path)

    assert exc_info.value.path == tmp_path / missing
    assert exc_info.value.reason == "file not found"
    assert missing in str(exc_info.value)


def test_locate_bundle_rejects_missing_directory(tmp_path) -> None:
    with pytest.raises(BundleIOError, match="bundle directory not found"):
        locate_bundle(tmp_path / "nope")


def test_locate_bundle_rejects_file_as_directory(tmp_path) -> None:
    target = tmp_path / "bundle"
    target.write_text("", encoding="utf-8")

    with pytest.raises(BundleIOError, match="not a directory"):
        locate_bundle(target)


def test_locate_bundle_rejects_directory_in_place_of_file(tmp_path) -> None:
    _touch_bundle(tmp_path, skip="tokenizer.json")
    (tmp_path / "tokenizer.json").mkdir()

    with pytest.raises(BundleIOError) as exc_info:
        locate_bundle(tmp_path)

    assert exc_info.value.reason == "not a regular file"


def test_bundle_io_error_is_a_load_error(tmp_path) -> None:
    with pytest.raises(LoadError):
        locate_bundle(tmp_path / "nope")


def test_read_config_document_returns_object(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"hidden_size": 8, "id2label": {"0": "a"}}', encoding="utf-8")

    assert read_config_document(path) == {"hidden_size": 8, "id2label": {"0": "a"}}


def test_read_config_document_reports_invalid_json_as_parse_error(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"hidden_size": ', encoding="utf-8")

    with pytest.raises(ConfigParseError, match="invalid JSON") as exc_info:
        read_config_document(path)

    assert exc_info.value.path == path


def test_read_config_document_rejects_non_object(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(ConfigParseError, match="expected a JSON object"):
        read_config_document(path)


def test_read_config_document_reports_undecodable_bytes_as_parse_error(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(ConfigParseError):
        read_config_document(path)


def test_read_config_document_reports_open_failure_as_io_error(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.mkdir()

    with pytest.raises(BundleIOError) as exc_info:
        read_config_document(path)

    assert exc_info.value.path == path
