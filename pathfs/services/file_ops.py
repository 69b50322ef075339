from __future__ import annotations

from pathlib import Path as FsPath

from ..schemas import ElementInfo, PathOptions
from .dir import Dir
from .file import File
from .path import SEP, Path


def validate_path(requested_path: str, root: str) -> str:
    base = FsPath(root).resolve(strict=False)
    candidate = (base / requested_path.replace('\\', '/').lstrip('/')).resolve(strict=False)
    if base != candidate and base not in candidate.parents:
        raise PermissionError('Path traversal detected')
    return str(candidate)


class FileOps:
    def __init__(self, root: str, options: PathOptions | None = None):
        self.root = str(FsPath(root).resolve())
        self.options = options or PathOptions()

    def safe_path(self, rel: str) -> str:
        return validate_path(rel, self.root)

    def root_depth(self) -> int:
        """Index of the first segment below the root in an absolute path."""
        return len(self.root.rstrip(SEP).split(SEP))

    def open_dir(self, rel: str, **overrides: bool) -> Dir:
        options = self.options.model_copy(update=overrides)
        return Dir(self.safe_path(rel), options)

    def open_file(self, rel: str) -> File:
        return File(self.safe_path(rel), self.options)

    def list_dir(
        self,
        rel: str,
        mask: str | None = None,
        recursive: bool = False,
        ignore_dirs: bool = False,
        ignore_files: bool = False,
        with_mtimes: bool = False,
    ) -> list[ElementInfo]:
        directory = self.open_dir(
            rel,
            dir_read_recursively=recursive,
            dir_read_ignore_dirs=ignore_dirs,
            dir_read_ignore_files=ignore_files,
        )
        uris = directory.read(mask)
        elements = directory.add_files_mtimes() if with_mtimes else directory.elements
        return [elements[uri] for uri in uris]

    def count(
        self,
        rel: str,
        mask: str | None = None,
        only_files: bool = False,
        only_dirs: bool = False,
        recursive: bool = False,
    ) -> int:
        return self.open_dir(rel, dir_read_recursively=recursive).count(mask, only_files, only_dirs)

    def read_file(self, rel: str) -> str:
        return self.open_file(rel).read()

    def save_file(self, rel: str, contents: str) -> None:
        self.open_file(rel).set_contents(contents).save()

    def create_file(self, rel: str, contents: str) -> None:
        self.open_file(rel).set_contents(contents).create()

    def append(self, rel: str, contents: str, as_line: bool = False) -> str:
        target = self.open_file(rel)
        if as_line:
            target.append_line(contents)
        else:
            target.append(contents)
        return target.get_contents()

    def delete(self, rel: str) -> None:
        self.open_file(rel).delete()

    def mkdir(self, rel: str) -> None:
        Path(self.safe_path(rel), self.options).create_dirs(create_last_segment_also=True)

    def prune(self, rel: str, start_index: int = 0) -> None:
        """Remove empty directories under ``rel``; ``start_index`` counts from the root."""
        target = Path(self.safe_path(rel), self.options)
        target.delete_empty_dirs(self.root_depth() + start_index)
