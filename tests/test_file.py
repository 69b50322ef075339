from __future__ import annotations

import pytest

from pathfs.config import settings
from pathfs.exceptions import (
    FileAccessError,
    PathConstructionError,
    ResourceAlreadyExistsError,
    ResourceMissingError,
    WrongResourceKindError,
)
from pathfs.services.file import File
from pathfs.services.path import Path


@pytest.fixture
def workdir(monkeypatch, tmp_path):
    (tmp_path / 'config').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_proper_creation_append_and_delete(workdir):
    file = File('config/.temp.1234.txt')
    file.set_contents('contents')
    file.create()
    file.append(' nextContents')
    file.append_line('next line of contents')
    file.read_if_exists()

    expected = 'contents nextContents' + settings.line_separator + 'next line of contents'
    assert file.get_contents() == expected

    assert file.path.is_existing()
    assert not file.path.is_not_existing()
    assert not file.path.is_dir()
    assert file.path.is_not_dir()
    assert file.path.is_file()
    assert not file.path.is_not_file()

    file.delete_if_exists()
    assert not file.path.is_existing()


def test_append_after_create(workdir, monkeypatch):
    monkeypatch.setattr(settings, 'line_separator', '\n')
    file = File('config/ab.txt')

    file.set_contents('a').create()
    file.append('b')
    assert file.get_contents() == 'ab'

    file.append_line('c')
    assert file.get_contents() == 'ab\nc'
    assert (workdir / 'config' / 'ab.txt').read_bytes() == b'ab\nc'


def test_set_contents_returns_self_and_does_no_io(workdir):
    file = File('config/buffer.txt')

    assert file.set_contents('x') is file
    assert file.get_contents() == 'x'
    assert file.path.is_not_existing()


def test_wrong_name_fails_construction(workdir):
    with pytest.raises(PathConstructionError):
        File('config/.temp    .txt')


def test_dir_path_as_file_fails_construction(workdir):
    with pytest.raises(PathConstructionError) as exc:
        File('config')

    assert exc.value.raw_path == 'config'


def test_reading_missing_file_raises(workdir):
    file = File('config/nonexisting_file.nef')

    with pytest.raises(ResourceMissingError):
        file.read()


def test_read_if_exists_on_missing_file_returns_empty(workdir):
    file = File('config/nonexisting_file.nef')
    file.set_contents('stale')

    assert file.read_if_exists() == ''
    assert file.get_contents() == ''


def test_reading_path_that_became_dir_raises(workdir):
    file = File('config/test.5678.txt')
    path = Path('config/test.5678.txt')
    path.create_dirs(True)

    try:
        with pytest.raises(WrongResourceKindError):
            file.read()
    finally:
        path.delete_empty_dirs(1)

    assert not (workdir / 'config' / 'test.5678.txt').exists()
    assert (workdir / 'config').is_dir()


def test_deleting_missing_file_raises(workdir):
    file = File('config/nonexisting_file.nef')

    with pytest.raises(ResourceMissingError):
        file.delete()


def test_delete_if_exists_on_missing_file_is_noop(workdir):
    File('config/nonexisting_file.nef').delete_if_exists()


def test_creating_existing_file_raises(workdir):
    (workdir / 'config' / '.config.txt').write_text('present', encoding='utf-8')
    file = File('config/.config.txt')

    with pytest.raises(ResourceAlreadyExistsError):
        file.create()

    assert (workdir / 'config' / '.config.txt').read_text(encoding='utf-8') == 'present'


def test_create_twice_raises(workdir):
    file = File('config/once.txt')
    file.create()

    with pytest.raises(ResourceAlreadyExistsError):
        file.create()


def test_save_creates_missing_parent_dirs(workdir):
    file = File('deep/er/file.txt')

    file.set_contents('payload').save()

    assert (workdir / 'deep' / 'er' / 'file.txt').read_text(encoding='utf-8') == 'payload'


def test_save_overwrites_existing_contents(workdir):
    target = workdir / 'config' / 'data.txt'
    target.write_text('a much longer original text', encoding='utf-8')

    File('config/data.txt').set_contents('short').save()

    assert target.read_text(encoding='utf-8') == 'short'


def test_read_preserves_line_endings(workdir):
    (workdir / 'config' / 'crlf.txt').write_bytes(b'one\r\ntwo\n')

    assert File('config/crlf.txt').read() == 'one\r\ntwo\n'


def test_save_through_parent_that_became_file_raises_access_error(workdir):
    file = File('later/a.txt')
    (workdir / 'later').write_text('in the way', encoding='utf-8')

    with pytest.raises(FileAccessError) as exc:
        file.set_contents('x').save()

    assert exc.value.path == file.path.get_path()
    assert isinstance(exc.value.__cause__, NotADirectoryError)
    assert (workdir / 'later').read_text(encoding='utf-8') == 'in the way'


def test_read_undecodable_file_raises_access_error(workdir):
    (workdir / 'config' / 'binary.dat').write_bytes(b'\xff\xfe\xfa')

    with pytest.raises(FileAccessError) as exc:
        File('config/binary.dat').read()

    assert isinstance(exc.value.cause, UnicodeDecodeError)
