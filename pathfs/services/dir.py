"""Directory listing with a lazily filled, explicitly refreshed element index."""

from __future__ import annotations

import fnmatch
import logging
import os
import time
from dataclasses import dataclass, field
from datetime import datetime

from ..config import settings
from ..exceptions import PathConstructionError
from ..schemas import ElementInfo, PathOptions
from .path import SEP, Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotScanned:
    pass


@dataclass(frozen=True)
class Scanned:
    elements: dict[str, ElementInfo]
    scanned_at: float = field(default_factory=time.time)


ScanState = NotScanned | Scanned


def matches_mask(uri: str, mask: str | None) -> bool:
    if not mask:
        return True
    return fnmatch.fnmatchcase(uri, mask)


class Dir:
    def __init__(self, raw: str, options: PathOptions | int | None = None):
        try:
            self.path = Path(raw, options)
        except PathConstructionError as exc:
            raise PathConstructionError(raw, 'Creation of directory failed', exc) from exc

        if not self.path.is_dir():
            raise PathConstructionError(raw, 'Dir path cannot be a non-dir path')

        self.state: ScanState = NotScanned()

    def __repr__(self) -> str:
        return f'Dir({self.path.get_path()!r})'

    @property
    def options(self) -> PathOptions:
        return self.path.options

    @property
    def is_scanned(self) -> bool:
        return isinstance(self.state, Scanned)

    @property
    def elements(self) -> dict[str, ElementInfo] | None:
        if isinstance(self.state, Scanned):
            return self.state.elements
        return None

    def read(self, mask: str | None = None) -> list[str]:
        elements = {uri: info for uri, info in self._read_raw().items() if matches_mask(info.uri, mask)}
        self.state = Scanned(elements)
        return list(elements)

    def count(self, mask: str | None = None, only_files: bool = False, only_dirs: bool = False) -> int:
        total = 0
        for info in self._ensure_scanned().values():
            if only_dirs and not info.is_dir:
                continue
            if only_files and not info.is_file:
                continue
            if matches_mask(info.uri, mask):
                total += 1
        return total

    def count_files(self, mask: str | None = None) -> int:
        return self.count(mask, only_files=True)

    def count_dirs(self, mask: str | None = None) -> int:
        return self.count(mask, only_dirs=True)

    def add_files_mtimes(self) -> dict[str, ElementInfo]:
        elements = self._ensure_scanned()
        base = self._base()
        for uri, info in elements.items():
            if not info.is_file:
                continue
            info.mtime = int(os.stat(base + uri).st_mtime)
            info.mtime_formatted = datetime.fromtimestamp(info.mtime).strftime(settings.mtime_format)
        return elements

    def _ensure_scanned(self) -> dict[str, ElementInfo]:
        if not isinstance(self.state, Scanned):
            self.read()
        return self.state.elements

    def _base(self) -> str:
        return self.path.get_path().rstrip(SEP) + SEP

    def _read_raw(self, deeper: str = '') -> dict[str, ElementInfo]:
        """Scan one directory level below ``deeper`` (a relative prefix ending with a separator)."""
        options = self.options
        directory = self._base() + deeper
        result: dict[str, ElementInfo] = {}

        with os.scandir(directory) as it:
            entries = list(it)
        logger.debug('Scanned %s (%d entries)', directory, len(entries))

        for entry in entries:
            uri = deeper + entry.name
            is_dir = entry.is_dir()
            is_file = entry.is_file()

            if is_dir and options.dir_read_recursively:
                result.update(self._read_raw(uri + SEP))

            if (is_file and not options.dir_read_ignore_files) or (is_dir and not options.dir_read_ignore_dirs):
                result[uri] = ElementInfo(uri=uri, is_file=is_file, is_dir=is_dir)

        return result
