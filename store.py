import itertools
import logging
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Optional

logger = logging.getLogger(__name__)


@dataclass
class Task:
    text: str
    completed: bool = False
    # 仅在内存中使用的句柄，不写入文件
    ref: int = field(default=-1, compare=False)


class TaskView(NamedTuple):
    ref: int
    text: str
    completed: bool


def normalize_text(text: Optional[str]) -> str:
    if not text:
        return ""
    # 每个任务必须保持单行
    return " ".join(text.splitlines()).strip()


class TaskStore:
    """有序任务列表，内存中的唯一状态来源。

    引用 (ref) 是递增整数，删除后不会复用，因此过期引用不会误指其他任务。
    """

    def __init__(self, tasks: Iterable[tuple[str, bool]] = ()):
        self._tasks: list[Task] = []
        self._refs = itertools.count()
        self.replace_all(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def _new_task(self, text: str, completed: bool) -> Task:
        return Task(text=text, completed=bool(completed), ref=next(self._refs))

    def _find(self, ref) -> Optional[Task]:
        for task in self._tasks:
            if task.ref == ref:
                return task
        return None

    def replace_all(self, tasks: Iterable[tuple[str, bool]]) -> None:
        # 加载文件时使用：原样保留顺序和文本
        self._tasks = [self._new_task(text, completed) for text, completed in tasks]

    def append(self, text: Optional[str]) -> Optional[int]:
        text = normalize_text(text)
        if not text:
            logger.debug("忽略空任务")
            return None
        task = self._new_task(text, False)
        self._tasks.append(task)
        return task.ref

    def toggle(self, ref) -> bool:
        task = self._find(ref)
        if task is None:
            logger.debug("切换状态时引用已失效: %s", ref)
            return False
        task.completed = not task.completed
        return True

    def remove_all(self, refs: Iterable) -> int:
        # 先算出删除集合，再一次性过滤
        doomed = set(refs)
        if not doomed:
            return 0
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.ref not in doomed]
        removed = before - len(self._tasks)
        if removed < len(doomed):
            logger.debug("删除时忽略 %d 个失效引用", len(doomed) - removed)
        return removed

    def enumerate(self) -> list[Task]:
        return [Task(t.text, t.completed, t.ref) for t in self._tasks]

    def snapshot(self) -> list[TaskView]:
        return [TaskView(t.ref, t.text, t.completed) for t in self._tasks]
