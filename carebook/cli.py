import logging
from typing import List, Optional

from rich.columns import Columns
# ────────────────────────────────────────────────────────────────────────────
# Rich console
# ────────────────────────────────────────────────────────────────────────────
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from carebook.book import Model
from carebook.commands import CommandResult
from carebook.config import COMMAND_DESC, Settings, settings as default_settings
from carebook.errors import CareBookError
from carebook.logging_config import setup_logging
from carebook.parsers import parse_command
from carebook.records import PersonType, Record, Specialist, format_tags
from carebook.sample import sample_records

console = Console()
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────
# Utility helpers
# ────────────────────────────────────────────────────────────────────────────
def ok(msg): return f"[green]✔ {msg}[/]"


def _panel_body(rec: Record, index: int) -> str:
    body = (
        f"[b]#[/b] {index}\n"
        f"[b]📞[/b] {rec.phone}\n"
        f"[b]📧[/b] {escape(rec.email.value)}\n"
        f"[b]📍[/b] {escape(rec.address.value)}\n"
        f"[b]🏷[/b] {escape(format_tags(rec.tags)) or '—'}"
    )
    if isinstance(rec, Specialist):
        body += f"\n[b]🩺[/b] {rec.specialty}"
    return body


def show_records(recs: List[Record]):
    if not recs:
        console.print("[dim]No contacts.[/]")
        return
    console.print(Columns(
        [Panel(_panel_body(r, i),
               title=escape(r.name.value.upper()),
               border_style="magenta" if isinstance(r, Specialist) else "cyan")
         for i, r in enumerate(recs, 1)],
        equal=True, expand=True))


def help_msg():
    table = Table(title="\n📘 CareBook commands", header_style="bold blue", style="bold bright_cyan")

    table.add_column("Command", justify="center", style="bold deep_sky_blue1", no_wrap=True)
    table.add_column("Usage", justify="left", style="white")

    for cmd, desc in COMMAND_DESC.items():
        table.add_row(f"[green]{cmd}[/green]", escape(desc))
    table.caption = f"{PersonType.PATIENT.tag} patient   {PersonType.SPECIALIST.tag} specialist"
    console.print(table)


def input_error(fn):
    def wrap(text, model):
        try:
            return fn(text, model)
        except CareBookError as e:
            logger.warning("Rejected '%s': %s", text, e)
            return f"[red]{escape(str(e))}[/]"

    return wrap


# ────────────────────────────────────────────────────────────────────────────
# Handlers
# ────────────────────────────────────────────────────────────────────────────
@input_error
def run_command(text: str, model: Model):
    """Parse and execute one command line; returns a CommandResult or an error message."""
    command = parse_command(text)
    return command.execute(model)


def render(result, model: Model) -> bool:
    """Print a result; True when the loop should stop."""
    if isinstance(result, str):
        console.print(result)
        return False
    if result.show_help:
        help_msg()
    if result.show_list:
        show_records(model.filtered_records())
    if result.feedback:
        console.print(ok(escape(result.feedback)) if not result.exit else result.feedback)
    return result.exit


# ────────────────────────────────────────────────────────────────────────────
# Main loop
# ────────────────────────────────────────────────────────────────────────────
def main(settings: Optional[Settings] = None):
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    model = Model(sample_records() if settings.load_sample_data else [])
    console.print("\nWelcome to [bold yellow]CareBook[/] – your patients and specialists assistant 🩺\n")
    help_msg()
    show_records(model.filtered_records())

    while True:
        try:
            raw = console.input(settings.prompt).strip()
            if not raw:
                continue
            if render(run_command(raw, model), model):
                break
        except (KeyboardInterrupt, EOFError):
            console.print("\nInterrupted. Bye!")
            break


if __name__ == "__main__":
    main()
