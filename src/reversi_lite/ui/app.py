import asyncio
import logging

import flet as ft

from reversi_lite.config import GameSettings
from reversi_lite.engine.board import SIZE, Coord, Side
from reversi_lite.engine.game import GameController
from reversi_lite.engine.registry import tier_label
from reversi_lite.protocol.events import GameEvent, GameOver, MovePlayed, TurnPassed
from reversi_lite.ui.components.board import BoardComponent
from reversi_lite.ui.components.controls import GameControlsComponent
from reversi_lite.ui.components.scoreboard import ScoreboardComponent

LOG = logging.getLogger("reversi_lite.ui")

DIALOG_POLL_INTERVAL = 0.05


class ReversiApp:
    def __init__(self, controller: GameController, settings: GameSettings):
        self.controller = controller
        self.settings = settings
        self.controller.set_callback(self.handle_game_event)

        # Components
        self.board_component = BoardComponent(
            board_size=SIZE,
            on_click_callback=self.on_board_click,
            cell_size=settings.cell_size,
        )
        self.scoreboard_component = ScoreboardComponent()
        self.controls_component = GameControlsComponent(
            difficulty=controller.ai.difficulty,
            on_restart=self.on_restart,
            on_difficulty_change=self.on_difficulty_change,
        )

        # UI State
        self.page: ft.Page | None = None
        self._pending_events: list[GameEvent] = []
        self._busy = False
        # Bumped on restart so stale turn tasks stop at their next await
        self._game_id = 0
        self._dialog: ft.AlertDialog | None = None
        self.board_padding = 24

    def main(self, page: ft.Page):
        self.page = page
        page.title = "Reversi"
        page.theme_mode = ft.ThemeMode.LIGHT
        page.window.width = 980
        page.window.height = 760
        page.padding = 20

        sidebar = self.controls_component.create_sidebar()
        board_grid = self.board_component.create_board()
        scoreboard = self.scoreboard_component.create()

        board_pixel = SIZE * self.board_component.cell_size + self.board_padding * 2
        board_wrapper = ft.Container(
            content=board_grid,
            width=board_pixel,
            height=board_pixel,
            padding=self.board_padding,
            alignment=ft.alignment.center,
            border_radius=24,
            gradient=ft.LinearGradient(
                begin=ft.alignment.top_left,
                end=ft.alignment.bottom_right,
                colors=["#0f3d14", "#145a1e"]
            ),
            shadow=ft.BoxShadow(
                blur_radius=25,
                spread_radius=2,
                color="rgba(0,0,0,0.25)",
                offset=ft.Offset(0, 12)
            )
        )

        board_area = ft.Container(
            content=ft.Column(
                [scoreboard, ft.Container(content=board_wrapper, alignment=ft.alignment.center, expand=True)],
                spacing=16,
                horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
                expand=True,
            ),
            alignment=ft.alignment.center,
            expand=True,
            padding=16,
            bgcolor="grey200"
        )

        page.add(
            ft.Row(
                [
                    sidebar,
                    ft.VerticalDivider(width=1),
                    board_area
                ],
                expand=True,
                vertical_alignment=ft.CrossAxisAlignment.STRETCH
            )
        )
        page.update()

        self.on_restart(None)

    # ------------------------------------------------------------------
    # Controller events
    # ------------------------------------------------------------------
    def handle_game_event(self, event: GameEvent):
        # Board state is re-read from the controller on refresh; only the
        # events that need pacing or a dialog are queued.
        if isinstance(event, (MovePlayed, TurnPassed, GameOver)):
            self._pending_events.append(event)

    async def _play_out_events(self, game_id: int) -> bool:
        while self._pending_events:
            event = self._pending_events.pop(0)
            if isinstance(event, MovePlayed):
                if not await self._animate_move(event, game_id):
                    return False
            elif isinstance(event, TurnPassed):
                await asyncio.sleep(self.settings.pass_delay)
                if game_id != self._game_id:
                    return False
                await self._alert(f"{event.side.label} has no legal move, turn skipped", game_id)
            elif isinstance(event, GameOver):
                await self._alert(
                    f"Game over  Black {event.scores[Side.BLACK]} : White {event.scores[Side.WHITE]}",
                    game_id,
                )
            if game_id != self._game_id:
                return False
        return True

    async def _animate_move(self, event: MovePlayed, game_id: int) -> bool:
        move = event.move
        self.board_component.update_piece(move.coord, event.side)
        for coord in move.captures:
            await asyncio.sleep(self.settings.flip_delay)
            if game_id != self._game_id:
                return False
            self.board_component.update_piece(coord, event.side)
        self.scoreboard_component.update_scores(self.controller.score())
        return True

    # ------------------------------------------------------------------
    # Turn sequence
    # ------------------------------------------------------------------
    async def _run_turn_sequence(self, coord: Coord | None = None):
        game_id = self._game_id
        self._busy = True
        try:
            if coord is not None:
                self.board_component.highlight_valid_moves({})
                self.controller.play_human_move(*coord)
                if not await self._play_out_events(game_id):
                    return
            while self.controller.awaiting_computer:
                self.scoreboard_component.set_turn(Side.WHITE)
                self.scoreboard_component.set_status("Computer is thinking...")
                await asyncio.sleep(self.settings.think_delay)
                if game_id != self._game_id:
                    return
                self.controller.play_computer_move()
                if not await self._play_out_events(game_id):
                    return
        finally:
            if game_id == self._game_id:
                self._busy = False
                self._refresh()

    def on_board_click(self, coord: Coord):
        if self._busy:
            LOG.warning("Ignoring click on %s while the computer moves", coord)
            return
        if not self.controller.is_human_turn:
            LOG.warning("Ignoring click on %s: not your turn", coord)
            return
        if not self.board_component.is_valid_move(coord):
            LOG.warning("Ignoring click on %s: not a legal move", coord)
            return
        self._busy = True
        self.page.run_task(self._run_turn_sequence, coord)

    # ------------------------------------------------------------------
    # Sidebar
    # ------------------------------------------------------------------
    def on_restart(self, e):
        self._game_id += 1
        self._busy = False
        self._close_dialog()
        self.controller.new_game()
        self._pending_events.clear()
        self._refresh()
        if self.controller.awaiting_computer:
            self.page.run_task(self._run_turn_sequence)

    def on_difficulty_change(self, value: str):
        self.controller.set_difficulty(value)
        self.scoreboard_component.set_status(f"Difficulty: {tier_label(value)}")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _refresh(self):
        self.board_component.render(self.controller.board)
        self.scoreboard_component.update_scores(self.controller.score())
        if self.controller.is_finished:
            self.scoreboard_component.set_turn(None)
            self.board_component.highlight_valid_moves({})
            return
        self.scoreboard_component.set_turn(self.controller.current_turn)
        if self.controller.is_human_turn and not self._busy:
            self.board_component.highlight_valid_moves(self.controller.legal_moves())
            self.scoreboard_component.set_status("Your move")
        else:
            self.board_component.highlight_valid_moves({})

    async def _alert(self, message: str, game_id: int):
        """Show a modal dialog and wait until it is dismissed or the game restarts."""
        dialog = self._show_dialog(message)
        while dialog is not None and self._dialog is dialog and game_id == self._game_id:
            await asyncio.sleep(DIALOG_POLL_INTERVAL)

    def _show_dialog(self, message: str) -> ft.AlertDialog | None:
        if not self.page:
            return None
        self._close_dialog()
        dialog = ft.AlertDialog(
            modal=True,
            content=ft.Text(message, size=16),
            actions=[ft.TextButton("OK", on_click=lambda e: self._close_dialog())],
            actions_alignment=ft.MainAxisAlignment.END,
        )
        self._dialog = dialog
        if dialog not in self.page.overlay:
            self.page.overlay.append(dialog)
        dialog.open = True
        self.page.update()
        return dialog

    def _close_dialog(self):
        if self._dialog and self.page:
            self._dialog.open = False
            self.page.update()
        self._dialog = None
