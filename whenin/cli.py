# whenin/cli.py
from __future__ import annotations
import json
import logging
from datetime import tzinfo
from typing import List, Optional
import typer
from rich.console import Console
from rich.logging import RichHandler

from . import config as cfgmod
from . import timeparse as tparse
from .errors import ConfigError, ConversionError
from .interval import humanize_duration
from .render import examples_table, outcome_to_dict, render_outcome, render_error, render_state
from .shell import Cleared, Converter, ExampleSelected, ShellState, Submitted, TextChanged, convert, reduce

console = Console()
err_console = Console(stderr=True)
# Show help when no args; disable shell-completion noise
app = typer.Typer(help="Convert any date/time to your local time zone", add_completion=False, no_args_is_help=True)

# ---------- global context & config ----------

class Ctx:
    zone: Optional[tzinfo]
    clock: str
    prefer: str
    languages: List[str]
    default_input: str
    examples: List[str]

def _load_ctx(tz_opt: Optional[str]) -> Ctx:
    cfg = cfgmod.load()
    clock = str(cfg.get("clock") or "12h").lower()
    if clock not in ("12h", "24h"):
        clock = "12h"
    prefer = str(cfg.get("prefer_dates_from") or "current_period").lower()
    if prefer not in tparse.PREFER_CHOICES:
        prefer = "current_period"
    ctx = Ctx()
    ctx.zone = cfgmod.resolve_zone(tz_opt or cfg.get("timezone"))
    ctx.clock = clock
    ctx.prefer = prefer
    ctx.languages = list(cfg.get("languages") or ["en"])
    ctx.default_input = cfg.get("default_input") or cfgmod.EXAMPLES[0]
    ctx.examples = list(cfg.get("examples") or cfgmod.EXAMPLES)
    return ctx

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

def _converter(c: Ctx, clock: Optional[str] = None) -> Converter:
    settings = tparse.ParseSettings(zone=c.zone, prefer_dates_from=c.prefer, languages=tuple(c.languages))
    return Converter(settings=settings, clock=clock or c.clock, parser=tparse.parse)

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    tz: str = typer.Option(None, "--tz", help="Viewer time zone, IANA name (default: config or system zone)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging of parser decisions"),
):
    """Load config + logging; print help when no subcommand."""
    _setup_logging(verbose)
    try:
        ctx.obj = _load_ctx(tz)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]"); raise typer.Exit(2)

# ---------- commands ----------

@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    text: List[str] = typer.Argument(None, help="Date/time text, e.g. 'Tomorrow at noon'"),
    json_out: bool = typer.Option(False, "--json"),
    clock24: bool = typer.Option(False, "--24h", help="24-hour clock"),
):
    """Convert one date/time expression and show the time left."""
    c: Ctx = ctx.obj
    conv = _converter(c, "24h" if clock24 else None)
    try:
        outcome = convert(" ".join(text or []), tparse.now_local(c.zone), conv)
    except ConversionError as e:
        if json_out:
            typer.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            console.print(render_error(str(e)))
        raise typer.Exit(1)
    if json_out:
        typer.echo(json.dumps(outcome_to_dict(outcome), indent=2))
        return
    console.print(render_outcome(outcome))

@app.command()
def examples(ctx: typer.Context):
    """List example inputs (numbers can be picked in `whenin shell`)."""
    console.print(examples_table(ctx.obj.examples))

@app.command()
def humanize(ms: int = typer.Argument(..., help="Milliseconds, may be negative (use -- before it)")):
    """Print a millisecond count as days, hours, minutes."""
    typer.echo(humanize_duration(ms))

@app.command()
def shell(ctx: typer.Context):
    """
    Interactive converter. Type a date/time, an example number,
    :examples, :clear or :q.
    """
    c: Ctx = ctx.obj
    conv = _converter(c)
    state = reduce(ShellState(), ExampleSelected(c.default_input, tparse.now_local(c.zone)), conv)
    console.print(f"[dim]> {state.text}[/dim]")
    _show(state)
    while True:
        try:
            line = console.input("[bold]When?[/bold] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        cmd = line.strip()
        if cmd in (":q", ":quit"):
            break
        if cmd == ":examples":
            console.print(examples_table(c.examples))
            continue
        if cmd == ":clear":
            state = reduce(state, Cleared(), conv)
            console.print("[dim]input cleared[/dim]")
            continue
        now = tparse.now_local(c.zone)
        if cmd.isdigit() and 1 <= int(cmd) <= len(c.examples):
            state = reduce(state, ExampleSelected(c.examples[int(cmd) - 1], now), conv)
            console.print(f"[dim]> {state.text}[/dim]")
        else:
            state = reduce(state, TextChanged(line), conv)
            state = reduce(state, Submitted(now), conv)
        _show(state)

def _show(state: ShellState) -> None:
    out = render_state(state)
    if out is not None:
        console.print(out)

# ---------- entry point ----------

if __name__ == "__main__":
    app()
