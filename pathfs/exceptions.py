from __future__ import annotations


class PathFsError(Exception):
    """Base exception for all pathfs errors."""


class PathConstructionError(PathFsError):
    """Raised when a Path, Dir or File cannot be built from a raw path."""

    def __init__(self, raw_path: str, reason: str, cause: Exception | None = None):
        self.raw_path = raw_path
        self.reason = reason
        self.cause = cause
        message = f'{reason}: {raw_path!r}'
        if cause is not None:
            message = f'{message} ({cause})'
        super().__init__(message)


class SegmentValidationError(PathFsError):
    """Raised when one path segment fails the legality pattern."""

    def __init__(self, segment: str):
        self.segment = segment
        super().__init__(f'Illegal path segment: {segment!r}')


class NonDirectoryPrefixError(PathFsError):
    """Raised when an existing non-directory sits where a directory is expected."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f'Not last part of path has to be a directory if it exists: {prefix!r}')


class PatternEngineError(PathFsError):
    """Raised when the segment legality pattern itself cannot be evaluated."""

    def __init__(self, pattern: str, cause: Exception | None = None):
        self.pattern = pattern
        self.cause = cause
        super().__init__(f'Segment pattern cannot be evaluated: {pattern!r}')


class ResourceMissingError(PathFsError):
    """Raised when an operation needs an existing resource and there is none."""

    def __init__(self, path: str, operation: str = ''):
        self.path = path
        self.operation = operation
        prefix = f'Unable to {operation}: ' if operation else ''
        super().__init__(f'{prefix}resource does not exist: {path!r}')


class ResourceAlreadyExistsError(PathFsError):
    """Raised when an operation needs an absent resource and it is present."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Resource already exists: {path!r}')


class WrongResourceKindError(PathFsError):
    """Raised when a file was expected and a directory was found, or vice versa."""

    def __init__(self, path: str, expected: str):
        self.path = path
        self.expected = expected
        super().__init__(f'Expected a {expected}: {path!r}')


class FileAccessError(PathFsError):
    """Raised when reading or writing a file fails at the filesystem level."""

    def __init__(self, path: str, operation: str, cause: Exception | None = None):
        self.path = path
        self.operation = operation
        self.cause = cause
        super().__init__(f'{operation.capitalize()} of the file failed: {path!r} ({cause})')
