from __future__ import annotations

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='PATHFS_', env_file='.env', env_file_encoding='utf-8')

    app_name: str = 'pathfs'
    files_root: str = '.'
    encoding: str = 'utf-8'
    line_separator: str = os.linesep
    dir_mode: int = Field(default=0o777, ge=0, le=0o7777)
    mtime_format: str = '%Y-%m-%d %H:%M:%S'
    segment_charset: str = r'A-Za-z0-9_\-.:'
    log_level: str = 'info'


settings = Settings()
