"""Pytest fixtures for converter tests (fake storage, store, settings, HEIC source)."""

import shutil
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from heic_converter.config import ConverterSettings
from heic_converter.models import FileRecord

from helpers import write_heic


@pytest.fixture
def scratch_root(tmp_path: Path) -> Path:
    root = tmp_path / "scratch"
    root.mkdir()
    return root


@pytest.fixture
def settings(scratch_root: Path) -> ConverterSettings:
    return ConverterSettings(scratch_dir=str(scratch_root))


@pytest.fixture
def heic_source(tmp_path: Path) -> Path:
    return write_heic(tmp_path / "source.heic")


@pytest.fixture
def mock_storage(heic_source: Path) -> MagicMock:
    """Storage whose download copies heic_source and whose upload keeps the uploaded bytes."""
    storage = MagicMock()
    storage.uploaded = {}

    def download_file(bucket: str, key: str, path: str) -> None:
        shutil.copyfile(heic_source, path)

    def upload_file(bucket, key, path, *, content_type=None, metadata=None) -> None:
        storage.uploaded[key] = Path(path).read_bytes()

    storage.download_file.side_effect = download_file
    storage.upload_file.side_effect = upload_file
    storage.signed_url.return_value = "https://storage.example.com/signed"
    return storage


@pytest.fixture
def file_record() -> FileRecord:
    return FileRecord(file_id="doc-1", file_name="foo.heic", student_id="abc")


@pytest.fixture
def mock_store(file_record: FileRecord) -> MagicMock:
    store = MagicMock()
    store.get.return_value = None
    store.find_by_file_name.return_value = file_record
    return store
