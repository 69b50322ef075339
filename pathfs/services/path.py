from __future__ import annotations

import logging
import os

from ..config import settings
from ..exceptions import (
    NonDirectoryPrefixError,
    PathConstructionError,
    PathFsError,
    SegmentValidationError,
)
from ..schemas import PathOptions
from .validator import PathValidator

logger = logging.getLogger(__name__)

SEP = os.sep
_SEPARATORS = ('/', '\\')


def normalize_separators(raw: str) -> str:
    normalized = raw
    for separator in _SEPARATORS:
        normalized = normalized.replace(separator, SEP)
    return normalized


def coerce_options(options: PathOptions | int | None) -> PathOptions:
    if options is None:
        return PathOptions()
    if isinstance(options, PathOptions):
        return options
    return PathOptions.from_bitmask(int(options))


class Path:
    def __init__(self, raw: str, options: PathOptions | int | None = None, validator: PathValidator | None = None):
        self.raw = raw
        self.options = coerce_options(options)
        self._path = normalize_separators(raw)
        self._segments = self._path.split(SEP)
        self._validator = validator or PathValidator()

        try:
            self._validate()
        except PathFsError as exc:
            logger.debug('Rejected path %r: %s', raw, exc)
            raise PathConstructionError(raw, 'Creation of path failed', exc) from exc

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._path!r})'

    def __str__(self) -> str:
        return self._path

    @property
    def segments(self) -> list[str]:
        return list(self._segments)

    @property
    def is_absolute(self) -> bool:
        return self._segments[0] == ''

    def is_existing(self) -> bool:
        return os.path.exists(self._path)

    def is_not_existing(self) -> bool:
        return not self.is_existing()

    def is_dir(self) -> bool:
        return os.path.isdir(self._path)

    def is_not_dir(self) -> bool:
        return not self.is_dir()

    def is_file(self) -> bool:
        return os.path.isfile(self._path)

    def is_not_file(self) -> bool:
        return not self.is_file()

    def get_path(self) -> str:
        return self._path

    def normalize_trailing_separator(self) -> str:
        """Rewrite the stored path so it ends with exactly one separator."""
        self._path = self._path.rstrip(SEP) + SEP
        return self._path

    def root_anchor(self) -> str:
        if self.is_absolute:
            return ''
        return os.getcwd().rstrip(SEP) + SEP

    def full_path_through(self, index: int) -> str:
        """Location of the path cut after segment ``index``, anchored at the root."""
        return self.root_anchor() + SEP.join(self._segments[: index + 1])

    def create_dirs(self, create_last_segment_also: bool = False) -> None:
        segments = self._segments if create_last_segment_also else self._segments[:-1]
        rising_path = self.root_anchor()

        for segment in segments:
            if segment:
                rising_path += segment
                if not os.path.exists(rising_path):
                    os.mkdir(rising_path, settings.dir_mode)
                    logger.debug('Created directory %s', rising_path)
            rising_path += SEP

    def delete_empty_dirs(self, starting_with_segment_index: int) -> None:
        """Remove empty directories from the deepest segment upward.

        Segments shallower than ``starting_with_segment_index`` are never
        touched. Missing directories are skipped, the first non-empty one (or a
        non-directory) ends the walk.
        """
        for index in range(len(self._segments) - 1, -1, -1):
            if index < starting_with_segment_index:
                break

            full_path = self.full_path_through(index)
            if not full_path or not os.path.exists(full_path):
                continue
            if not os.path.isdir(full_path) or os.listdir(full_path):
                break

            os.rmdir(full_path)
            logger.debug('Removed empty directory %s', full_path)

    def _validate(self) -> None:
        flags = self.options.flags
        for segment in self._segments:
            if not self._validator.is_segment_legal(segment, flags):
                raise SegmentValidationError(segment)

        rising_path = self.root_anchor()
        for segment in self._segments[:-1]:
            rising_path += segment
            if segment and os.path.exists(rising_path) and not os.path.isdir(rising_path):
                raise NonDirectoryPrefixError(rising_path)
            rising_path += SEP
