import flet as ft

from reversi_lite.engine.board import Side


class ScoreboardComponent:
    def __init__(self, height: float = 82):
        self.height = height
        self.black_score_text = ft.Text("2", size=26, weight=ft.FontWeight.BOLD, color="#111111")
        self.white_score_text = ft.Text("2", size=26, weight=ft.FontWeight.BOLD, color="#111111")
        self.turn_text = ft.Text("", size=13, color="#333333", weight=ft.FontWeight.BOLD)
        self.status_text = ft.Text("", size=12, color="#555555")
        self.container = None

    def create(self) -> ft.Container:
        header_row = ft.Row(
            [
                ft.Text("BLACK (You)", size=11, color="#666666"),
                self.turn_text,
                ft.Text("WHITE (Computer)", size=11, color="#666666")
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER
        )

        score_row = ft.Row(
            [
                ft.Text("●", size=22, color="#111111"),
                self.black_score_text,
                ft.Text(":", size=22, color="#666666"),
                self.white_score_text,
                ft.Text("○", size=22, color="#111111"),
            ],
            spacing=16,
            alignment=ft.MainAxisAlignment.CENTER,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

        self.container = ft.Container(
            content=ft.Column(
                [header_row, score_row, self.status_text],
                spacing=4,
                alignment=ft.MainAxisAlignment.START,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER
            ),
            padding=ft.padding.symmetric(vertical=6, horizontal=14),
            bgcolor="#f9f9f9",
            border_radius=14,
            border=ft.border.all(1, "#e0e0e0"),
            shadow=ft.BoxShadow(
                blur_radius=6,
                color="rgba(0,0,0,0.08)",
                offset=ft.Offset(0, 3)
            ),
            height=self.height,
            alignment=ft.alignment.center
        )
        return self.container

    def update_scores(self, scores: dict):
        self.black_score_text.value = str(scores.get(Side.BLACK, 0))
        self.white_score_text.value = str(scores.get(Side.WHITE, 0))
        if self.black_score_text.page:
            self.black_score_text.update()
        if self.white_score_text.page:
            self.white_score_text.update()

    def set_turn(self, side: Side | None):
        self.turn_text.value = f"{side.label} to move" if side else "Game over"
        if self.turn_text.page:
            self.turn_text.update()

    def set_status(self, message: str, color: str = "#555555"):
        self.status_text.value = message
        self.status_text.color = color
        if self.status_text.page:
            self.status_text.update()
