"""Interactive terminal board."""

import asyncio
import logging
import shlex
import sys
from collections.abc import Awaitable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ..config import Settings, load_settings
from ..logging_setup import setup_logging
from .api import TaskStoreClient
from .board import TaskBoard
from .drag import DragState

logger = logging.getLogger(__name__)

console = Console()

STATUS_ICONS = {False: "⭕", True: "✅"}

HELP_TEXT = """\
[cyan]add[/cyan] [text]        add a task; bare add retries the kept text
[cyan]toggle[/cyan] <id>       mark done / not done
[cyan]delete[/cyan] <id>       delete a task
[cyan]drag[/cyan] <id>         pick up a pending task
[cyan]over[/cyan] <id>         move the dragged task over another one
[cyan]up[/cyan] / [cyan]down[/cyan]          move the drop target with the keyboard
[cyan]drop[/cyan] [id]         release the dragged task
[cyan]cancel[/cyan]            abort the drag
[cyan]move[/cyan] <id> <id>    drag and drop in one step
[cyan]refresh[/cyan]           re-fetch tasks, keeping local order
[cyan]list[/cyan]              show the board
[cyan]quit[/cyan]              leave"""


class CommandError(Exception):
    """User typed something the board cannot act on."""


# =============================================================================
# Display
# =============================================================================


def render_board(board: TaskBoard) -> Table:
    """Build a table of the board in display order."""
    table = Table(show_header=True, header_style="bold blue", title="My TO-DO List")
    table.add_column("", width=2)
    table.add_column("ID", style="dim", justify="right", width=5)
    table.add_column("Task", min_width=20)
    table.add_column("Done", justify="center", width=6)

    drag = board.drag
    for task in board.displayed():
        marker = ""
        if drag.active and task.id == drag.source_id:
            marker = "✋"
        elif drag.active and task.id == drag.over_id:
            marker = "▶"
        text = f"[strike dim]{task.text}[/strike dim]" if task.completed else task.text
        table.add_row(marker, str(task.id), text, STATUS_ICONS[task.completed])

    if not board.tasks:
        table.add_row("", "", "[dim]No tasks[/dim]", "")
    if board.draft:
        table.caption = f"unsent: {escape(board.draft)} (type add to retry)"
    return table


def show(board: TaskBoard) -> None:
    console.print(render_board(board))


# =============================================================================
# Commands
# =============================================================================


def _task_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise CommandError(f"not a task id: {raw!r}") from None


def _one_id(args: list[str]) -> int:
    if len(args) != 1:
        raise CommandError("expected exactly one task id")
    return _task_id(args[0])


class BoardSession:
    """Parses commands and dispatches them to a ``TaskBoard``.

    Server-backed commands run as background tasks so the prompt stays
    responsive while a request is in flight.
    """

    def __init__(self, board: TaskBoard) -> None:
        self.board = board
        self.in_flight: set[asyncio.Task] = set()

    def _spawn(self, coro: Awaitable) -> None:
        task = asyncio.ensure_future(coro)
        self.in_flight.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task) -> None:
        self.in_flight.discard(task)
        if task.cancelled():
            return
        if task.exception() is not None:
            logger.error("Command failed", exc_info=task.exception())
            return
        show(self.board)

    async def drain(self) -> None:
        """Wait for every request still in flight."""
        if self.in_flight:
            await asyncio.gather(*self.in_flight, return_exceptions=True)

    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the session should end."""
        parts = line.split(maxsplit=1)
        if parts and parts[0].lower() == "add":
            # Task text is taken verbatim; a bare "add" resubmits the kept draft.
            text = parts[1] if len(parts) > 1 else None
            self._spawn(self.board.add(text))
            return True

        try:
            words = shlex.split(line)
        except ValueError as exc:
            raise CommandError(str(exc)) from None
        if not words:
            return True
        command, args = words[0].lower(), words[1:]
        board, drag = self.board, self.board.drag

        if command in ("quit", "exit", "q"):
            return False
        if command == "help":
            console.print(Panel(HELP_TEXT, title="Commands", border_style="cyan"))
        elif command in ("list", "ls"):
            show(board)
        elif command == "toggle":
            self._spawn(board.toggle(_one_id(args)))
        elif command in ("delete", "rm"):
            self._spawn(board.delete(_one_id(args)))
        elif command == "refresh":
            self._spawn(board.refresh())
        elif command == "drag":
            if not drag.begin(_one_id(args)):
                raise CommandError("only pending tasks can be dragged")
            show(board)
        elif command == "over":
            drag.hover(_one_id(args))
            show(board)
        elif command in ("up", "down"):
            drag.step(-1 if command == "up" else 1)
            show(board)
        elif command == "drop":
            target = _one_id(args) if args else None
            outcome = drag.drop(target)
            if outcome is DragState.CANCELLED:
                console.print("[yellow]Nothing moved.[/yellow]")
            show(board)
        elif command == "cancel":
            drag.cancel()
            show(board)
        elif command == "move":
            if len(args) != 2:
                raise CommandError("usage: move <id> <id>")
            source, target = _task_id(args[0]), _task_id(args[1])
            if drag.begin(source):
                drag.drop(target)
            show(board)
        else:
            raise CommandError(f"unknown command: {command}")
        return True


# =============================================================================
# Main
# =============================================================================


async def interactive_mode(settings: Settings) -> None:
    async with TaskStoreClient(settings.api_url, timeout=settings.http_timeout) as api:
        board = TaskBoard(api)
        session = BoardSession(board)

        console.print(
            Panel(
                f"TO-DO board on {settings.api_url}\n[dim]help: commands, quit: leave[/dim]",
                border_style="cyan",
                padding=(0, 2),
            )
        )
        await board.load()
        show(board)

        while True:
            line = await asyncio.to_thread(
                Prompt.ask, "[bold cyan]todo[/bold cyan]", console=console, default=""
            )
            try:
                if not session.handle(line):
                    break
            except CommandError as exc:
                console.print(f"[red]{exc}[/red]")

        await session.drain()


async def main(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    try:
        await interactive_mode(settings)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
    except Exception as e:
        Console(stderr=True).print(f"[red]Error: {e}[/red]")
        sys.exit(1)


def run() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)
    try:
        asyncio.run(main(settings))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")


if __name__ == "__main__":
    run()
