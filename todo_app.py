import flet as ft

from controller import AddTask, RemoveTasks, ToggleTask
from task import TaskRow

ACCENT = "#3b82f6"


def button_style():
    return ft.ButtonStyle(
        color=ft.Colors.WHITE,
        bgcolor={ft.ControlState.DEFAULT: ACCENT, ft.ControlState.HOVERED: "#2563eb"},
        shape=ft.RoundedRectangleBorder(radius=8),
        padding=ft.padding.symmetric(horizontal=24, vertical=12),
        text_style=ft.TextStyle(size=18, weight=ft.FontWeight.BOLD),
    )


class TodoApp(ft.Column):
    def __init__(self, page: ft.Page, controller):
        super().__init__()
        self.page = page  # 重绘时调用 page.update()
        self.controller = controller
        self.controller.on_change = self.build_list
        self.selected = set()

        self.new_task = ft.TextField(
            hint_text="Add a new task...",
            on_submit=self.add_clicked,
            expand=True,
            border_radius=8,
            filled=True,
            bgcolor=ft.Colors.WHITE,
            text_size=18,
            content_padding=ft.padding.all(12),
            multiline=False,  # 回车即提交新任务
        )
        self.tasks = ft.ListView(spacing=0, expand=True)
        self.items_left = ft.Text("0 tasks remaining", color=ft.Colors.BLUE_GREY_700)

        self.expand = True
        self.spacing = 15
        self.controls = [
            # 白色圆角任务列表
            ft.Container(
                content=self.tasks,
                expand=True,
                bgcolor=ft.Colors.WHITE,
                border_radius=8,
                shadow=ft.BoxShadow(
                    blur_radius=4,
                    color=ft.Colors.BLACK12,
                    offset=ft.Offset(0, 2),
                ),
            ),
            # 输入框与 Add 按钮
            ft.Row(
                controls=[
                    self.new_task,
                    ft.ElevatedButton(
                        text="Add",
                        on_click=self.add_clicked,
                        style=button_style(),
                    ),
                ],
                spacing=10,
            ),
            ft.Row(
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
                controls=[
                    self.items_left,
                    ft.ElevatedButton(
                        text="Remove Selected",
                        on_click=self.remove_clicked,
                        style=button_style(),
                    ),
                ],
            ),
        ]
        self.build_list(initial=True)

    def build_list(self, initial=False):
        self.tasks.controls.clear()
        views = self.controller.snapshot()
        # 删除后失效的引用不再保持选中
        self.selected &= {view.ref for view in views}
        for view in views:
            self.tasks.controls.append(
                TaskRow(view, self.task_toggle, self.task_select, view.ref in self.selected)
            )
        count = sum(1 for view in views if not view.completed)
        self.items_left.value = f"{count} tasks remaining"
        # 挂到页面之前不能 update
        if not initial:
            self.page.update()

    def add_clicked(self, e):
        text = self.new_task.value
        if text and text.strip():
            self.new_task.value = ""
            self.controller.dispatch(AddTask(text))
            if self.new_task.page:
                self.new_task.focus()

    def task_toggle(self, ref):
        self.controller.dispatch(ToggleTask(ref))

    def task_select(self, ref, selected):
        if selected:
            self.selected.add(ref)
        else:
            self.selected.discard(ref)
        self.page.update()

    def remove_clicked(self, e):
        if self.selected:
            refs = frozenset(self.selected)
            self.selected.clear()
            self.controller.dispatch(RemoveTasks(refs))
