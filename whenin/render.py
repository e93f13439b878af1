# whenin/render.py
from __future__ import annotations
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import Outcome, RangeOutcome, SingleOutcome
from .shell import ShellState

def _rows(pairs) -> Table:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="bold", justify="right")
    grid.add_column()
    for label, value in pairs:
        grid.add_row(label, value)
    return grid

def render_outcome(outcome: Outcome) -> RenderableType:
    if isinstance(outcome, SingleOutcome):
        body: RenderableType = _rows([
            ("🕒 Local Time:", outcome.local_time),
            ("⏳ Time Left:", outcome.time_left),
        ])
    else:
        parts: List[RenderableType] = [_rows([
            ("🟢 Starts:", outcome.start_local),
            ("🔴 Ends:", outcome.end_local),
            ("📏 Duration:", outcome.duration),
        ])]
        if outcome.until_label:
            parts.append(Text(outcome.until_label, style="dim"))
        body = Group(*parts)
    return Panel(body, title="Result", box=box.ROUNDED)

def render_error(message: str) -> RenderableType:
    return Panel(Text(message), title="[red]Error[/red]", border_style="red", box=box.ROUNDED)

def render_state(state: ShellState) -> Optional[RenderableType]:
    """Error and result panels are mutually exclusive; idle renders nothing."""
    if state.error:
        return render_error(state.error)
    if state.outcome is not None:
        return render_outcome(state.outcome)
    return None

def examples_table(examples: List[str]) -> Table:
    table = Table(title="You could try...", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Example")
    for i, ex in enumerate(examples, 1):
        table.add_row(str(i), ex)
    return table

def outcome_to_dict(outcome: Outcome) -> Dict[str, Any]:
    if isinstance(outcome, RangeOutcome):
        return {
            "type": outcome.kind,
            "start_local": outcome.start_local,
            "end_local": outcome.end_local,
            "duration": outcome.duration,
            "phase": outcome.phase.value,
            "until_label": outcome.until_label,
        }
    return {"type": outcome.kind, "local_time": outcome.local_time, "time_left": outcome.time_left}
