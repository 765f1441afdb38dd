import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from models import DEFAULT_FILENAME

TASKS_ENV = "PROJECT_TRACKER_TASKS"
LOG_ENV = "PROJECT_TRACKER_LOG"
LOG_LEVEL_ENV = "PROJECT_TRACKER_LOG_LEVEL"

DEFAULT_LOG_FILE = "project_tracker.log"
WEB_HOST = "0.0.0.0"
WEB_PORT = 8550


@dataclass(frozen=True)
class Settings:
    tasks_path: Path
    log_path: Path
    log_level: int = logging.INFO
    web: bool = False
    host: str = WEB_HOST
    port: int = WEB_PORT


def _parse_level(name: Optional[str]) -> int:
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.strip().upper())
    # 未知级别名称时 getLevelName 返回字符串
    return level if isinstance(level, int) else logging.INFO


def load_settings(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    if argv is None:
        argv = sys.argv[1:]
    if environ is None:
        environ = os.environ
    return Settings(
        tasks_path=Path(environ.get(TASKS_ENV) or DEFAULT_FILENAME),
        log_path=Path(environ.get(LOG_ENV) or DEFAULT_LOG_FILE),
        log_level=_parse_level(environ.get(LOG_LEVEL_ENV)),
        # 检查命令行参数
        web=len(argv) > 0 and argv[0] == "web",
    )
