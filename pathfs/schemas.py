from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


class Flag(IntEnum):
    ALLOW_DIR_DOTS = 1
    ALLOW_NATIONAL_LETTERS_NAMES = 2
    ALLOW_SPACES_IN_NAMES = 4
    DIR_READ_RECURSIVELY = 8
    DIR_READ_IGNORE_DIRS = 16
    DIR_READ_IGNORE_FILES = 32


def decode_options(bitmask: int) -> frozenset[Flag]:
    """Return the defined flags contained in ``bitmask``; unknown bits are ignored."""
    return frozenset(flag for flag in Flag if bitmask & flag)


class PathOptions(BaseModel):
    """Construction options of a Path; field names mirror ``Flag`` members."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    allow_dir_dots: bool = False
    allow_national_letters_names: bool = False
    allow_spaces_in_names: bool = False
    dir_read_recursively: bool = False
    dir_read_ignore_dirs: bool = False
    dir_read_ignore_files: bool = False

    @classmethod
    def from_bitmask(cls, bitmask: int) -> PathOptions:
        return cls.from_flags(decode_options(bitmask))

    @classmethod
    def from_flags(cls, flags: Iterable[Flag]) -> PathOptions:
        return cls(**{flag.name.lower(): True for flag in flags})

    @property
    def flags(self) -> frozenset[Flag]:
        return frozenset(flag for flag in Flag if getattr(self, flag.name.lower()))

    @property
    def bitmask(self) -> int:
        return sum(int(flag) for flag in self.flags)


class ElementInfo(BaseModel):
    uri: str
    is_file: bool
    is_dir: bool
    mtime: Optional[int] = None
    mtime_formatted: Optional[str] = None


class FileWriteRequest(BaseModel):
    path: str
    contents: str = ''


class AppendRequest(BaseModel):
    path: str
    contents: str
    as_line: bool = False


class FileActionRequest(BaseModel):
    path: str


class MkdirRequest(BaseModel):
    path: str


class PruneRequest(BaseModel):
    path: str
    start_index: int = Field(default=0, ge=0)


class ApiResponse(BaseModel):
    ok: bool
    message: str
    data: Optional[Any] = None
