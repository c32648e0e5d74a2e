import flet as ft
from typing import Callable

from reversi_lite.engine.registry import TIER_REGISTRY, Difficulty


class GameControlsComponent:
    def __init__(self,
                 difficulty: Difficulty,
                 on_restart: Callable,
                 on_difficulty_change: Callable[[str], None]):
        self.difficulty = difficulty
        self.on_restart = on_restart
        self.on_difficulty_change = on_difficulty_change

        self.difficulty_selector: ft.Dropdown | None = None
        self.description_text: ft.Text | None = None
        self.container: ft.Container | None = None

    def create_sidebar(self) -> ft.Container:
        self.difficulty_selector = ft.Dropdown(
            options=[
                ft.dropdown.Option(tier.value, entry.label)
                for tier, entry in TIER_REGISTRY.items()
            ],
            value=self.difficulty.value,
            on_change=lambda e: self._handle_change(e.control.value),
            dense=True,
            content_padding=ft.padding.symmetric(horizontal=8, vertical=4),
            border_color="rgba(0,0,0,0.2)",
            border_radius=8,
            width=140,
        )
        self.description_text = ft.Text(
            TIER_REGISTRY[self.difficulty].description,
            size=12,
            italic=True,
            color="#555555",
        )

        self.container = ft.Container(
            content=ft.Column(
                [
                    ft.Text("Reversi", size=30, weight=ft.FontWeight.BOLD),
                    ft.Divider(),
                    ft.Text("Computer", size=20, weight=ft.FontWeight.BOLD),
                    ft.Row(
                        [
                            ft.Text("Difficulty", weight=ft.FontWeight.BOLD),
                            self.difficulty_selector,
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        spacing=8,
                    ),
                    self.description_text,
                    ft.Divider(),
                    ft.ElevatedButton("Restart", on_click=self.on_restart, width=200),
                ],
                spacing=10,
                expand=True,
            ),
            width=260,
            padding=10,
            bgcolor="grey50"
        )
        return self.container

    def _handle_change(self, value: str):
        self.difficulty = Difficulty(value)
        if self.description_text:
            self.description_text.value = TIER_REGISTRY[self.difficulty].description
            self.description_text.update()
        self.on_difficulty_change(value)
