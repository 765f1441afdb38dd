import flet as ft

SELECTED_BG = ft.Colors.BLUE_50
ROW_BG = ft.Colors.WHITE


def label_style(completed):
    # 已完成：灰色删除线
    return ft.TextStyle(
        decoration=ft.TextDecoration.LINE_THROUGH if completed else None,
        color=ft.Colors.GREY if completed else ft.Colors.BLUE_GREY_900,
        size=18,
        weight=ft.FontWeight.W_400,
    )


class TaskRow(ft.Container):
    def __init__(self, view, task_toggle, task_select, selected=False):
        super().__init__()
        self.ref = view.ref
        self.task_name = view.text
        self.completed = view.completed
        self.selected = selected
        self.task_toggle = task_toggle
        self.task_select = task_select

        self.checkbox = ft.Checkbox(
            value=self.completed,
            on_change=self.status_changed,
        )

        # 任务文本
        self.task_text = ft.Text(
            value=self.task_name,
            text_align=ft.TextAlign.LEFT,
            style=label_style(self.completed),
        )

        self.content = ft.Row(
            controls=[
                self.checkbox,
                ft.Container(
                    content=self.task_text,
                    expand=True,
                    padding=ft.padding.only(left=12),
                    on_click=self.text_clicked,  # 点击文本选中该行
                ),
            ],
            alignment=ft.MainAxisAlignment.START,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=15,
        )
        self.padding = ft.padding.symmetric(horizontal=12, vertical=15)
        self.border = ft.border.only(bottom=ft.BorderSide(1, ft.Colors.GREY_200))
        self.bgcolor = SELECTED_BG if selected else ROW_BG

    def status_changed(self, e):
        # 只上报意图，由控制器更新数据并触发重绘
        self.task_toggle(self.ref)

    def text_clicked(self, e):
        self.selected = not self.selected
        self.bgcolor = SELECTED_BG if self.selected else ROW_BG
        self.task_select(self.ref, self.selected)
