from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from ..config import settings
from ..exceptions import (
    FileAccessError,
    PathConstructionError,
    PathFsError,
    PatternEngineError,
    ResourceAlreadyExistsError,
    ResourceMissingError,
)
from ..schemas import ApiResponse, AppendRequest, FileActionRequest, FileWriteRequest, MkdirRequest, PruneRequest
from ..services.file_ops import FileOps

router = APIRouter(prefix='/api/files', tags=['files'])
ops = FileOps(settings.files_root)


def _root_cause(exc: Exception) -> Exception:
    while isinstance(exc, PathConstructionError) and exc.cause is not None:
        exc = exc.cause
    return exc


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, PermissionError):
        return HTTPException(status_code=403, detail=str(exc))
    if isinstance(exc, ResourceMissingError):
        return HTTPException(status_code=404, detail='Resource not found')
    if isinstance(exc, ResourceAlreadyExistsError):
        return HTTPException(status_code=409, detail='Resource already exists')
    if isinstance(exc, FileAccessError):
        return HTTPException(status_code=500, detail='File access failed')
    if isinstance(_root_cause(exc), PatternEngineError):
        return HTTPException(status_code=500, detail='Path validation is misconfigured')
    return HTTPException(status_code=400, detail=str(exc))


@router.get('/list')
def list_files(
    path: str = Query(default=''),
    mask: str = Query(default=''),
    recursive: bool = Query(default=False),
    ignore_dirs: bool = Query(default=False),
    ignore_files: bool = Query(default=False),
    with_mtimes: bool = Query(default=False),
):
    try:
        items = ops.list_dir(path, mask, recursive, ignore_dirs, ignore_files, with_mtimes)
    except (PathFsError, OSError) as exc:
        raise _http_error(exc)

    return {'ok': True, 'data': [item.model_dump() for item in items]}


@router.get('/count')
def count_files(
    path: str = Query(default=''),
    mask: str = Query(default=''),
    only_files: bool = Query(default=False),
    only_dirs: bool = Query(default=False),
    recursive: bool = Query(default=False),
):
    try:
        total = ops.count(path, mask, only_files, only_dirs, recursive)
    except (PathFsError, OSError) as exc:
        raise _http_error(exc)

    return {'ok': True, 'data': total}


@router.get('/read')
def read_file(path: str = Query(...)):
    try:
        contents = ops.read_file(path)
    except (PathFsError, OSError) as exc:
        raise _http_error(exc)

    return ApiResponse(ok=True, message='Read', data=contents)


@router.post('/save')
def save_file(payload: FileWriteRequest):
    try:
        ops.save_file(payload.path, payload.contents)
        return ApiResponse(ok=True, message='Saved')
    except (PathFsError, OSError) as exc:
        raise _http_error(exc)


@router.post('/create')
def create_file(payload: FileWriteRequest):
    try:
        ops.create_file(payload.path, payload.contents)
        return ApiResponse(ok=True, message='Created')
    except (PathFsError, OSError) as exc:
        raise _http_error(exc)


@router.post('/append')
def append_file(payload: AppendRequest):
    try:
        contents = ops.append(payload.path, payload.contents, payload.as_line)
        return ApiResponse(ok=True, message='Appended', data=contents)
    except (PathFsError, OSError) as exc:
        raise _http_error(exc)


@router.post('/delete')
def delete(payload: FileActionRequest):
    try:
        ops.delete(payload.path)
        return ApiResponse(ok=True, message='Deleted')
    except (PathFsError, OSError) as exc:
        raise _http_error(exc)


@router.post('/mkdir')
def mkdir(payload: MkdirRequest):
    try:
        ops.mkdir(payload.path)
        return ApiResponse(ok=True, message='Folder created')
    except (PathFsError, OSError) as exc:
        raise _http_error(exc)


@router.post('/prune')
def prune(payload: PruneRequest):
    try:
        ops.prune(payload.path, payload.start_index)
        return ApiResponse(ok=True, message='Pruned')
    except (PathFsError, OSError) as exc:
        raise _http_error(exc)
