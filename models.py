import logging
import re
from pathlib import Path
from typing import Iterable, Union

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# 数据持久化：每行一个任务，格式为 "<0|1>;<文本>"
# ------------------------------------------------------------------
DELIMITER = ";"
DEFAULT_FILENAME = "tasks.txt"

# 与 C 的 atoi 一致：可选空白、可选符号、前导数字
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PathLike = Union[str, Path]


def format_line(task) -> str:
    flag = "1" if task.completed else "0"
    return f"{flag}{DELIMITER}{task.text}\n"


def parse_flag(token: str) -> bool:
    match = _LEADING_INT.match(token)
    if not match:
        return False
    return int(match.group(1)) == 1


def parse_line(line: str) -> tuple[str, bool]:
    line = line.rstrip("\r\n")
    flag, sep, text = line.partition(DELIMITER)
    if not sep:
        # 没有分隔符：整行都是文本，视为未完成
        return line, False
    return text, parse_flag(flag)


def load_tasks(path: PathLike = DEFAULT_FILENAME) -> list[tuple[str, bool]]:
    path = Path(path)
    if not path.exists():
        logger.info("未找到 %s，从空列表开始", path)
        return []
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        tasks = [parse_line(line) for line in f]
    logger.info("从 %s 加载了 %d 个任务", path, len(tasks))
    return tasks


def save_tasks(tasks: Iterable, path: PathLike = DEFAULT_FILENAME) -> None:
    # 整体覆盖写入；打开失败时直接抛出 OSError，由调用方记录
    with open(Path(path), "w", encoding="utf-8", newline="\n") as f:
        for task in tasks:
            f.write(format_line(task))
