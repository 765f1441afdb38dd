import sys
import os
# 无控制台打包运行时 sys.stdout / sys.stderr 可能为 None，日志的 StreamHandler 需要可写流
if sys.stdout is None:
    sys.stdout = open(os.devnull, "w")
if sys.stderr is None:
    sys.stderr = open(os.devnull, "w")
import logging

import flet as ft

from config import load_settings
from controller import Controller, Shutdown
from todo_app import TodoApp

logger = logging.getLogger(__name__)


def setup_logging(settings):
    # 同时写日志文件和控制台
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(settings.log_path, encoding='utf-8'),
            logging.StreamHandler()
        ]
    )


def make_main(settings):
    def main(page: ft.Page):
        # 窗口尺寸和背景色
        page.title = "Project Tracker"
        page.window.width = 500
        page.window.height = 600
        page.bgcolor = "#f0f4f8"
        page.padding = 20

        controller = Controller(settings.tasks_path)
        controller.start()

        def window_event(e):
            # 关闭窗口前保存最终状态
            if e.type == ft.WindowEventType.CLOSE:
                controller.dispatch(Shutdown())
                page.window.destroy()

        if page.web:
            # Web 模式没有窗口事件；断线会自动重连，只在会话结束时保存
            page.on_close = lambda e: controller.dispatch(Shutdown())
        else:
            page.window.prevent_close = True
            page.window.on_event = window_event

        page.add(TodoApp(page, controller))

    return main


def run(argv=None):
    settings = load_settings(argv)
    setup_logging(settings)
    logger.info("任务文件: %s", settings.tasks_path)
    target = make_main(settings)
    if settings.web:
        # 浏览器访问模式
        ft.app(
            target=target,
            view=ft.AppView.WEB_BROWSER,
            host=settings.host,
            port=settings.port,
        )
    else:
        # 桌面窗口
        ft.app(target=target)


if __name__ == "__main__":
    run()
