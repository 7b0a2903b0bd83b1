"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..chat import ReplyStatus, SendController
from ..ui.config import LogLevel
from .providers import get_client, get_model_name

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="usharani",
    help="Minimal chat widget for a Gemini completion endpoint",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()

LEVEL_STYLES = {
    "debug": "dim",
    "info": "cyan",
    "warning": "yellow",
    "error": "red",
}


def make_console_logger(log_level: str | None):
    """Build a debug callback printing to the console at or above log_level."""
    threshold = LogLevel.from_string(log_level) if log_level else None

    def _log(level: str, component: str, message: str) -> None:
        if threshold is None or LogLevel.from_string(level) < threshold:
            return
        console.print(
            Text.assemble(
                (f"{level.upper():<7} ", LEVEL_STYLES.get(level, "white")),
                (f"[{component}] ", "bold"),
                message,
            )
        )

    return _log


@app.command("tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive chat widget."""
    async def _tui():
        from ..ui import run_chat_tui

        try:
            client = get_client()
        except (TypeError, ValueError) as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)

        async with client:
            await run_chat_tui(client, log_level=log_level, model_name=get_model_name())
        console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def ask(
    text: str = typer.Argument(..., help="Message to send"),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Print diagnostics at this level: debug, info, warning, or error"
    ),
):
    """Send one message and print the reply."""
    async def _ask() -> ReplyStatus:
        try:
            client = get_client()
        except (TypeError, ValueError) as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)

        async with client:
            controller = SendController(client)
            controller.set_debug_callback(make_console_logger(log_level))
            with console.status("[dim]Bot is typing...[/dim]"):
                reply = await controller.send_message(text)

        if reply is None:
            console.print("[yellow]Nothing to send.[/yellow]")
            raise typer.Exit(code=1)

        status = controller.last_outcome.status
        border = "magenta" if status == ReplyStatus.SUCCESS else "red"
        console.print(Panel(Text(reply.text), title=get_model_name(), border_style=border))
        return status

    status = asyncio.run(_ask())
    if status != ReplyStatus.SUCCESS:
        raise typer.Exit(code=2)
