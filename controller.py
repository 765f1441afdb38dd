import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from models import load_tasks, save_tasks
from store import TaskStore, TaskView

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# 界面发往控制器的意图
# ------------------------------------------------------------------
@dataclass(frozen=True)
class AddTask:
    text: str


@dataclass(frozen=True)
class ToggleTask:
    ref: int


@dataclass(frozen=True)
class RemoveTasks:
    refs: frozenset = frozenset()

    def __post_init__(self):
        # 允许传入列表等，重复引用在集合中合并
        object.__setattr__(self, "refs", frozenset(self.refs))


@dataclass(frozen=True)
class Shutdown:
    pass


class Controller:
    """把意图应用到 TaskStore，并在每次变更后写回文件。

    dispatch 在处理过程中再次被调用（例如界面回调）时，新意图排队，
    在当前意图（包括其保存）完成后按到达顺序处理。
    """

    def __init__(self, path, store: Optional[TaskStore] = None,
                 on_change: Optional[Callable[[], None]] = None):
        self.path = Path(path)
        self.store = store if store is not None else TaskStore()
        self.on_change = on_change
        self.last_save_ok = True
        self.closed = False
        self._queue = deque()
        self._dispatching = False
        # 读取失败且之后没有任何变更时，关闭时不能覆盖原文件
        self._load_failed = False

    def start(self) -> None:
        try:
            tasks = load_tasks(self.path)
        except OSError as e:
            # 文件存在但不可读：以空列表启动，不覆盖原文件
            logger.warning("读取任务文件 %s 失败: %s", self.path, e)
            tasks = []
            self._load_failed = True
        else:
            self._load_failed = False
        self.store.replace_all(tasks)

    def snapshot(self) -> list[TaskView]:
        return self.store.snapshot()

    def dispatch(self, intent) -> None:
        self._queue.append(intent)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._queue:
                self._handle(self._queue.popleft())
        finally:
            self._dispatching = False

    def _handle(self, intent) -> None:
        if self.closed:
            logger.debug("已关闭，忽略意图: %r", intent)
            return
        if isinstance(intent, AddTask):
            changed = self.store.append(intent.text) is not None
        elif isinstance(intent, ToggleTask):
            changed = self.store.toggle(intent.ref)
        elif isinstance(intent, RemoveTasks):
            changed = self.store.remove_all(intent.refs) > 0
        elif isinstance(intent, Shutdown):
            self.closed = True
            if self._load_failed:
                logger.warning("任务文件 %s 读取失败且未修改，关闭时不写入", self.path)
                return
            logger.info("正在关闭，保存 %d 个任务", len(self.store))
            self.save()
            return
        else:
            raise TypeError(f"未知意图类型: {type(intent).__name__}")

        if not changed:
            logger.debug("意图未产生变更: %r", intent)
            return
        logger.debug("已应用意图: %r", intent)
        self._load_failed = False
        self.save()
        if self.on_change is not None:
            self.on_change()

    def save(self) -> bool:
        try:
            save_tasks(self.store.enumerate(), self.path)
        except OSError as e:
            # 尽力保存：内存状态保持不变，下次变更时重试
            logger.warning("无法写入任务文件 %s: %s", self.path, e)
            self.last_save_ok = False
        else:
            self.last_save_ok = True
        return self.last_save_ok
