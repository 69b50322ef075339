from __future__ import annotations

import pytest
from fastapi import HTTPException

from pathfs.routers import files
from pathfs.schemas import FileActionRequest, FileWriteRequest
from pathfs.services import file_ops


def test_validate_path_blocks_traversal(tmp_path):
    with pytest.raises(PermissionError):
        file_ops.validate_path('../../etc/passwd', str(tmp_path))


def test_validate_path_blocks_backslash_traversal(tmp_path):
    with pytest.raises(PermissionError):
        file_ops.validate_path('..\\..\\etc\\passwd', str(tmp_path))


def test_validate_path_keeps_paths_under_root(tmp_path):
    assert file_ops.validate_path('/a/b.txt', str(tmp_path)) == str(tmp_path.resolve() / 'a' / 'b.txt')
    assert file_ops.validate_path('', str(tmp_path)) == str(tmp_path.resolve())


def test_list_files_returns_403_on_path_traversal(monkeypatch):
    def _deny(*_args, **_kwargs):
        raise PermissionError('Path traversal detected')

    monkeypatch.setattr(files.ops, 'list_dir', _deny)

    with pytest.raises(HTTPException) as exc:
        files.list_files(path='../../etc', mask='', recursive=False, ignore_dirs=False, ignore_files=False, with_mtimes=False)

    assert exc.value.status_code == 403


def test_save_returns_403_on_path_traversal(monkeypatch, tmp_path):
    monkeypatch.setattr(files, 'ops', file_ops.FileOps(str(tmp_path)))

    with pytest.raises(HTTPException) as exc:
        files.save_file(FileWriteRequest(path='../outside.txt', contents='x'))

    assert exc.value.status_code == 403
    assert not (tmp_path.parent / 'outside.txt').exists()


def test_delete_returns_403_on_path_traversal(monkeypatch, tmp_path):
    monkeypatch.setattr(files, 'ops', file_ops.FileOps(str(tmp_path)))

    with pytest.raises(HTTPException) as exc:
        files.delete(FileActionRequest(path='../../etc/passwd'))

    assert exc.value.status_code == 403
