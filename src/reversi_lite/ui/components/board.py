import flet as ft

from reversi_lite.engine.board import Board, Coord, Side


class BoardComponent:
    def __init__(self, board_size: int, on_click_callback, cell_size: float = 60):
        self.board_size = board_size
        self.on_click = on_click_callback
        self.cell_size = cell_size

        # State
        self.board_cells = {} # Map coord -> Piece Container
        self.highlight_markers = {}
        self.hint_texts = {}
        self.board_grid = None
        self._current_valid_moves = {}

    def create_board(self) -> ft.Column:
        rows = []
        for r in range(self.board_size):
            row_controls = []
            for c in range(self.board_size):
                coord = (r, c)
                piece_size = int(self.cell_size * 0.72)
                base_color = "#1B5E20" if (r + c) % 2 == 0 else "#215732"

                # Piece (Disc)
                piece = ft.Container(
                    width=piece_size,
                    height=piece_size,
                    border_radius=piece_size / 2,
                    bgcolor=None,
                )

                # Legal move marker, labelled with the capture count
                marker_size = max(12, int(self.cell_size * 0.5))
                hint = ft.Text("", size=12, weight=ft.FontWeight.BOLD, color="#1B5E20")
                marker = ft.Container(
                    content=hint,
                    width=marker_size,
                    height=marker_size,
                    border_radius=marker_size / 2,
                    bgcolor="rgba(235,235,235,0.88)",
                    alignment=ft.alignment.center,
                    opacity=0,
                    animate_opacity=300
                )

                stack = ft.Stack(
                    [piece, marker],
                    alignment=ft.alignment.center
                )

                cell = ft.Container(
                    content=stack,
                    width=self.cell_size,
                    height=self.cell_size,
                    bgcolor=base_color,
                    border=ft.border.all(1, "black"),
                    on_click=lambda e, coord=coord: self.on_click(coord),
                    alignment=ft.alignment.center,
                    tooltip=Board.coord_to_str(r, c),
                )

                self.board_cells[coord] = piece
                self.highlight_markers[coord] = marker
                self.hint_texts[coord] = hint
                row_controls.append(cell)
            rows.append(ft.Row(row_controls, spacing=0, tight=True))

        self.board_grid = ft.Column(rows, spacing=0)
        return self.board_grid

    def update_piece(self, coord: Coord, color: Side | None):
        if coord in self.board_cells:
            piece = self.board_cells[coord]
            if color == Side.BLACK:
                piece.bgcolor = "#0f0f0f"
                piece.gradient = ft.RadialGradient(
                    radius=1.2,
                    colors=["#2f2f2f", "#060606"]
                )
                piece.border = ft.border.all(1, "#4f4f4f")
                piece.shadow = ft.BoxShadow(
                    blur_radius=20,
                    spread_radius=1,
                    color="rgba(0,0,0,0.55)",
                    offset=ft.Offset(0, 6)
                )
            elif color == Side.WHITE:
                piece.bgcolor = "#f4f4f4"
                piece.gradient = ft.RadialGradient(
                    radius=1.2,
                    colors=["#ffffff", "#d5d5d5"]
                )
                piece.border = ft.border.all(1, "#c5c5c5")
                piece.shadow = ft.BoxShadow(
                    blur_radius=16,
                    spread_radius=1,
                    color="rgba(0,0,0,0.35)",
                    offset=ft.Offset(0, 4)
                )
            else:
                piece.bgcolor = None
                piece.gradient = None
                piece.border = None
                piece.shadow = None
            if piece.page:
                piece.update()

    def render(self, board: Board):
        for r in range(self.board_size):
            for c in range(self.board_size):
                self.update_piece((r, c), board.get_piece(r, c))

    def highlight_valid_moves(self, moves: dict):
        """Show a marker with the capture count on each playable cell."""
        self._current_valid_moves = dict(moves)
        for coord, marker in self.highlight_markers.items():
            captures = self._current_valid_moves.get(coord)
            marker.opacity = 1 if captures else 0
            self.hint_texts[coord].value = str(len(captures)) if captures else ""
        if self.board_grid and self.board_grid.page:
            self.board_grid.update()

    def is_valid_move(self, coord: Coord) -> bool:
        return coord in self._current_valid_moves
