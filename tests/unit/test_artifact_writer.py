# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Unit tests for ArtifactWriter."""

import pytest

from lambda_fetch.errors import WriteFailedError
from lambda_fetch.models import ErrorKind
from lambda_fetch.services.artifact_writer import ArtifactWriter


def test_write_creates_file(tmp_path):
    dest = tmp_path / "output.zip"

    path = ArtifactWriter().write(b"PK\x03\x04", dest)

    assert path == dest
    assert dest.read_bytes() == b"PK\x03\x04"


def test_write_accepts_string_path(tmp_path):
    dest = tmp_path / "layer.zip"

    ArtifactWriter().write(b"data", str(dest))

    assert dest.read_bytes() == b"data"


def test_write_overwrites_existing_file(tmp_path):
    dest = tmp_path / "output.zip"
    dest.write_bytes(b"old contents that are longer")

    ArtifactWriter().write(b"new", dest)

    assert dest.read_bytes() == b"new"


def test_write_missing_parent_fails(tmp_path):
    dest = tmp_path / "missing" / "output.zip"

    with pytest.raises(WriteFailedError) as exc_info:
        ArtifactWriter().write(b"data", dest)

    assert exc_info.value.kind == ErrorKind.WRITE_FAILED
    assert exc_info.value.path == str(dest)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_write_creates_parents_when_enabled(tmp_path):
    dest = tmp_path / "a" / "b" / "output.zip"

    ArtifactWriter(create_parents=True).write(b"data", dest)

    assert dest.read_bytes() == b"data"


def test_write_to_directory_fails(tmp_path):
    with pytest.raises(WriteFailedError) as exc_info:
        ArtifactWriter().write(b"data", tmp_path)

    assert exc_info.value.detail == "destination is a directory"
