"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from sqlalchemy.exc import SQLAlchemyError

from sidediff.config import Settings, load_config
from sidediff.core.export import write_result
from sidediff.core.intake import ItemType
from sidediff.core.models import CompareMode, ComparisonResult
from sidediff.core.pipeline import build_result, run_compare
from sidediff.core.render import render_segments, render_summary
from sidediff.crud.database import init_db, make_engine, reset_db
from sidediff.crud.store import CompareStore, panel_name


logger = logging.getLogger(__name__)

PanelArg = Annotated[int, typer.Argument(min=1, max=2, help="1 = Original, 2 = Modified")]
ModeOpt = Annotated[Optional[CompareMode], typer.Option("--mode", "-m", help="words or bytes")]
JsonOpt = Annotated[Optional[Path], typer.Option("--json", help="Also write the result as JSON to this path")]
PlainOpt = Annotated[bool, typer.Option("--plain", help="Bracket markers instead of colors")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _store(settings: Settings) -> CompareStore:
    """Open the item store on the configured database, creating tables if needed."""
    engine = make_engine(settings.db_url)
    init_db(engine)
    return CompareStore(engine, settings.max_item_bytes, settings.preview_length)


def _read_text(path: str) -> str:
    """Read a file (or stdin for '-') as UTF-8; undecodable bytes are kept as surrogate escapes."""
    try:
        if path == "-":
            raw = typer.get_binary_stream("stdin").read()
        else:
            raw = Path(path).read_bytes()
    except OSError as e:
        _fail(f"Cannot read {path}", e)
    return raw.decode("utf-8", errors="surrogateescape")


def _printable(text: str) -> str:
    """Show surrogate-escaped bytes as \\xNN so output stays encodable."""
    return text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="backslashreplace")


def _echo_result(result: ComparisonResult, plain: bool, json_out: Optional[Path]) -> None:
    """Print both sides and the summary; optionally export JSON."""
    label1 = f"#{result.id1} " if result.id1 is not None else ""
    label2 = f"#{result.id2} " if result.id2 is not None else ""
    typer.echo(f"--- Original {label1}({result.source1 or '-'}, {result.length1} chars)")
    typer.echo(_printable(render_segments(result.diffs1, color=not plain)))
    typer.echo(f"+++ Modified {label2}({result.source2 or '-'}, {result.length2} chars)")
    typer.echo(_printable(render_segments(result.diffs2, color=not plain)))
    typer.echo(render_summary(result.stats, result.mode))
    if json_out:
        try:
            typer.echo(f"Wrote {write_result(result, json_out)}")
        except OSError as e:
            _fail("Export failed", e)


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize the item database. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        reset_db(engine)
        typer.echo("Existing data cleared.")
    else:
        init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")


def add_cmd(
    panel: PanelArg,
    path: Annotated[str, typer.Argument(help="File to add, or '-' to read stdin")],
    item_type: Annotated[Optional[ItemType], typer.Option("--type", help="request, response, file or clipboard")] = None,
    source: Annotated[Optional[str], typer.Option("--source", help="Source label (URL, filename)")] = None,
    ):
    """Add an item to a panel."""
    settings = _settings()
    data = _read_text(path)
    if item_type is None:
        item_type = ItemType.clipboard if path == "-" else ItemType.file
    if source is None and path != "-":
        source = Path(path).name

    store = _store(settings)
    try:
        item = store.add_item(panel, data, item_type, source)
    except ValueError as e:
        _fail(str(e))
    except SQLAlchemyError as e:
        _fail(f"Could not save item to {panel_name(panel)}", e)
    typer.echo(f"Added item {item.id} to {panel_name(panel)} ({item.length} chars)")


def list_cmd(panel: PanelArg):
    """List items in a panel."""
    store = _store(_settings())
    items = store.list_items(panel)
    if not items:
        typer.echo(f"No items in {panel_name(panel)}.")
        raise typer.Exit(0)
    for item in items:
        preview = _printable(item.preview).replace("\n", " ")
        typer.echo(f"  {item.id:>4}  {item.type:<9} {item.length:>8}  {preview}")


def show_cmd(panel: PanelArg, item_id: Annotated[int, typer.Argument(help="Item id")]):
    """Print an item's full text."""
    store = _store(_settings())
    item = store.get_item(panel, item_id)
    if item is None:
        _fail(f"Item {item_id} not found in {panel_name(panel)}")
    typer.echo(_printable(item.data), nl=False)


def remove_cmd(panel: PanelArg, item_id: Annotated[int, typer.Argument(help="Item id")]):
    """Remove one item from a panel."""
    store = _store(_settings())
    try:
        store.remove_item(panel, item_id)
    except ValueError as e:
        _fail(str(e))
    typer.echo(f"Removed item {item_id} from {panel_name(panel)}")


def clear_cmd(panel: PanelArg):
    """Remove every item from a panel."""
    store = _store(_settings())
    removed = store.clear_panel(panel)
    typer.echo(f"Cleared {removed} item(s) from {panel_name(panel)}")


def stats_cmd():
    """Show item counts per panel."""
    stats = _store(_settings()).stats()
    typer.echo(
        f"Original: {stats['panel1_count']}, "
        f"Modified: {stats['panel2_count']}, "
        f"total: {stats['total_items']}"
    )


def compare_cmd(
    id1: Annotated[int, typer.Argument(help="Original item id")],
    id2: Annotated[int, typer.Argument(help="Modified item id")],
    mode: ModeOpt = None,
    json_out: JsonOpt = None,
    plain: PlainOpt = False,
    ):
    """Compare an Original item against a Modified item."""
    settings = _settings()
    store = _store(settings)
    try:
        result = run_compare(store, id1, id2, mode or CompareMode(settings.default_mode))
    except ValueError as e:
        _fail(str(e))
    _echo_result(result, plain, json_out)


def diff_cmd(
    file1: Annotated[str, typer.Argument(help="Original file")],
    file2: Annotated[str, typer.Argument(help="Modified file")],
    mode: ModeOpt = None,
    json_out: JsonOpt = None,
    plain: PlainOpt = False,
    ):
    """Compare two files directly without storing them."""
    settings = _settings()
    text1, text2 = _read_text(file1), _read_text(file2)
    result = build_result(
        text1, text2, mode or CompareMode(settings.default_mode),
        source1=file1, source2=file2,
    )
    _echo_result(result, plain, json_out)
