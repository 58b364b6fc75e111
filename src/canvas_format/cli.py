"""CLI for canvas files (check, info, format)."""

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from canvas_format.config import CANVAS_SUFFIX, resolve_strict_default
from canvas_format.core.storage import load, save
from canvas_format.core.validation.integrity import find_integrity_problems
from canvas_format.errors import CanvasFormatError
from canvas_format.logging_config import configure_logging
from canvas_format.models.canvas import Canvas
from canvas_format.models.node import NODE_TYPES

app = typer.Typer(help="Validate, inspect and normalize canvas files.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _load_or_exit(path: Path, *, strict: bool = False) -> Canvas:
    try:
        return load(path, strict=strict)
    except FileNotFoundError:
        logger.error("Canvas file not found: {}", path)
        raise typer.Exit(1) from None
    except OSError as e:
        logger.error("Cannot read {}: {}", path, e)
        raise typer.Exit(1) from None
    except CanvasFormatError as e:
        logger.error("{}: {}", path, e)
        raise typer.Exit(1) from None


@app.command()
def check(
    paths: Annotated[list[Path], typer.Argument(help="Canvas files to check")],
    strict: bool = typer.Option(
        False, "--strict", "-s", help="Fail on duplicate ids and dangling edges"
    ),
) -> None:
    """Check that canvas files decode cleanly."""
    strict = strict or resolve_strict_default()
    failed = 0
    for path in paths:
        if path.suffix != CANVAS_SUFFIX:
            logger.warning("{}: expected a {} file", path, CANVAS_SUFFIX)
        try:
            canvas = load(path, strict=strict)
        except (CanvasFormatError, OSError) as e:
            typer.echo(f"{path}: FAILED {e}")
            failed += 1
            continue

        if not strict:
            for problem in find_integrity_problems(canvas):
                logger.warning("{}: {}", path, problem)
        typer.echo(f"{path}: ok ({len(canvas.nodes)} nodes, {len(canvas.edges)} edges)")

    if failed:
        typer.echo(f"{failed} of {len(paths)} file(s) failed")
        raise typer.Exit(1)


def _summarize(canvas: Canvas) -> dict[str, Any]:
    counts = {t: 0 for t in NODE_TYPES}
    for node in canvas.nodes:
        counts[node.TYPE] += 1

    bounds: dict[str, int] | None = None
    if canvas.nodes:
        bases = [n.base for n in canvas.nodes]
        bounds = {
            "left": min(b.position.x for b in bases),
            "top": min(b.position.y for b in bases),
            "right": max(b.position.x + b.width for b in bases),
            "bottom": max(b.position.y + b.height for b in bases),
        }
    return {
        "nodes": len(canvas.nodes),
        "node_types": counts,
        "edges": len(canvas.edges),
        "bounds": bounds,
    }


@app.command()
def info(
    path: Path = typer.Argument(..., help="Canvas file"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show node and edge counts for a canvas file."""
    summary = _summarize(_load_or_exit(path))

    if output_json:
        typer.echo(json.dumps(summary, indent=2))
        return

    typer.echo(f"{path}: {summary['nodes']} nodes, {summary['edges']} edges")
    for node_type, count in summary["node_types"].items():
        typer.echo(f"  {node_type}: {count}")
    bounds = summary["bounds"]
    if bounds is not None:
        typer.echo(
            f"  bounds: ({bounds['left']}, {bounds['top']}) - "
            f"({bounds['right']}, {bounds['bottom']})"
        )


@app.command(name="format")
def format_cmd(
    path: Path = typer.Argument(..., help="Canvas file"),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write here instead of rewriting PATH"),
    ] = None,
    literal_newlines: bool = typer.Option(
        False, "--literal-newlines", help="Write newlines in text fields unescaped"
    ),
) -> None:
    """Rewrite a canvas file in the canonical layout."""
    canvas = _load_or_exit(path)
    dst = output or path
    if save(canvas, dst, literal_newlines=literal_newlines):
        typer.echo(f"Wrote {dst}")
    else:
        typer.echo(f"{dst} already formatted")
