from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from ..config import settings
from ..exceptions import PatternEngineError
from ..schemas import Flag, decode_options

__all__ = ['PathValidator', 'decode_options']


@lru_cache(maxsize=64)
def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternEngineError(pattern, exc) from exc


def _is_national_letter(char: str) -> bool:
    return not char.isascii() and char.isalpha()


class PathValidator:
    def __init__(self, charset: str | None = None):
        self.charset = settings.segment_charset if charset is None else charset

    def pattern_for(self, flags: Iterable[Flag]) -> str:
        allowed = self.charset
        if Flag.ALLOW_SPACES_IN_NAMES in frozenset(flags):
            allowed += ' '
        # colon stays legal for drive letters even with a custom charset
        return f'[{allowed}:]+'

    def is_segment_legal(self, segment: str, flags: Iterable[Flag] = ()) -> bool:
        if segment == '':
            return True

        flags = frozenset(flags)
        pattern = self.pattern_for(flags)
        compiled = _compile(pattern)

        if Flag.ALLOW_NATIONAL_LETTERS_NAMES in flags:
            segment = ''.join(char for char in segment if not _is_national_letter(char))
            if segment == '':
                return True

        try:
            return compiled.fullmatch(segment) is not None
        except (re.error, TypeError) as exc:
            raise PatternEngineError(pattern, exc) from exc
