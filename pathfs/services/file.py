from __future__ import annotations

import logging
import os

from ..config import settings
from ..exceptions import (
    FileAccessError,
    PathConstructionError,
    ResourceAlreadyExistsError,
    ResourceMissingError,
    WrongResourceKindError,
)
from ..schemas import PathOptions
from .path import Path

logger = logging.getLogger(__name__)


class File:
    def __init__(self, raw: str, options: PathOptions | int | None = None):
        try:
            self.path = Path(raw, options)
        except PathConstructionError as exc:
            raise PathConstructionError(raw, 'Creation of file failed', exc) from exc

        if self.path.is_dir():
            raise PathConstructionError(raw, 'File path cannot be a dir path')

        self.contents = ''

    def __repr__(self) -> str:
        return f'File({self.path.get_path()!r})'

    def set_contents(self, contents: str) -> File:
        self.contents = contents
        return self

    def get_contents(self) -> str:
        return self.contents

    def read(self) -> str:
        location = self.path.get_path()
        if self.path.is_not_existing():
            raise ResourceMissingError(location, 'read')
        if self.path.is_not_file():
            raise WrongResourceKindError(location, 'file')

        try:
            with open(location, 'r', encoding=settings.encoding, newline='') as handle:
                self.contents = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError(location, 'reading', exc) from exc
        return self.contents

    def read_if_exists(self) -> str:
        if self.path.is_file():
            return self.read()
        self.contents = ''
        return self.contents

    def save(self) -> None:
        """Write the buffer in full, creating missing parent directories first."""
        location = self.path.get_path()
        if self.path.is_not_existing():
            self.path.create_dirs()

        try:
            with open(location, 'w', encoding=settings.encoding, newline='') as handle:
                handle.write(self.contents)
        except (OSError, UnicodeEncodeError) as exc:
            raise FileAccessError(location, 'saving', exc) from exc
        logger.debug('Saved %d characters to %s', len(self.contents), location)

    def append(self, contents: str) -> None:
        self.read_if_exists()
        self.contents += contents
        self.save()

    def append_line(self, contents: str) -> None:
        self.append(settings.line_separator + contents)

    def delete(self) -> None:
        location = self.path.get_path()
        if self.path.is_not_existing():
            raise ResourceMissingError(location, 'delete')

        if self.path.is_not_file():
            raise WrongResourceKindError(location, 'file')

        os.remove(location)
        logger.debug('Deleted %s', location)

    def delete_if_exists(self) -> None:
        if self.path.is_existing():
            self.delete()

    def create(self) -> None:
        if self.path.is_existing():
            raise ResourceAlreadyExistsError(self.path.get_path())
        self.save()
