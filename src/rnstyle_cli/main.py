import difflib
from pathlib import Path
from typing import Optional

import typer
from rnstyle_extractor.engine import ExtractionEngine
from rnstyle_extractor.logger import setup_logger
from rnstyle_extractor.models import ExtractionStatus
from rnstyle_tree_sitter import ASTWalker, OffsetMap

from .config import StyleConfig
from .converters import result_to_report

REACT_SUFFIXES = (".tsx", ".jsx")

app = typer.Typer(help="rnstyle - Move inline React styles into StyleSheet.create entries")


def _read_react_source(file: Path) -> str:
    if file.suffix.lower() not in REACT_SUFFIXES:
        typer.echo("Error: This command only works in React files (.tsx/.jsx)")
        raise typer.Exit(code=1)
    if not file.exists():
        typer.echo(f"Error: {file} does not exist")
        raise typer.Exit(code=1)
    return file.read_text(encoding="utf-8")


def _cursor_offset(source: str, offset: int | None, line: int | None, column: int | None) -> int:
    if offset is not None:
        return offset
    if line is None:
        typer.echo("Error: Provide --offset or --line (with optional --column)")
        raise typer.Exit(code=1)
    try:
        # CLI positions are 1-based like editor status bars
        return OffsetMap(source).offset_at(line - 1, (column or 1) - 1)
    except IndexError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)


@app.command()
def extract(
    file: Path = typer.Argument(..., help="React source file (.tsx/.jsx)"),
    offset: Optional[int] = typer.Option(None, help="Zero-based character offset of the cursor"),
    line: Optional[int] = typer.Option(None, help="1-based cursor line"),
    column: Optional[int] = typer.Option(None, help="1-based cursor column"),
    write: bool = typer.Option(False, help="Write the change back instead of printing a diff"),
    as_json: bool = typer.Option(False, "--json", help="Print the planned edits as JSON"),
    config_file: Path = typer.Option(Path(".rnstyle.toml"), "--config", help="Path to config file"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase log output"),
):
    """Extract the inline style at the cursor into the style registry"""
    setup_logger(verbose)
    source = _read_react_source(file)
    cursor = _cursor_offset(source, offset, line, column)

    engine = ExtractionEngine(StyleConfig(config_file).to_extractor_config())
    result = engine.extract(source, cursor)

    new_source = result.plan.apply(source) if result.ok else source
    if result.ok and write:
        file.write_text(new_source, encoding="utf-8")

    if as_json:
        typer.echo(result_to_report(result, str(file), source).model_dump_json(indent=2))
    elif result.ok:
        if not write:
            diff = difflib.unified_diff(
                source.splitlines(keepends=True),
                new_source.splitlines(keepends=True),
                fromfile=f"a/{file.name}",
                tofile=f"b/{file.name}",
            )
            typer.echo("".join(diff), nl=False)
        typer.echo(result.message)
    elif result.status is ExtractionStatus.NO_OP:
        typer.echo(f"Warning: {result.message}")
    else:
        typer.echo(f"Error: {result.message}")

    if result.status is ExtractionStatus.FATAL:
        raise typer.Exit(code=1)


@app.command("dump-ast")
def dump_ast(
    file: Path = typer.Argument(..., help="React source file (.tsx/.jsx)"),
):
    """Print the parse tree of a file"""
    source = _read_react_source(file)
    parse_result = ExtractionEngine().parse(source)

    def dump_tree(node, indent=0):
        typer.echo("  " * indent + f"{node.type} [{node.start_point} - {node.end_point}]")
        if node.type == "ERROR":
            typer.echo("  " * (indent + 1) + f"ERROR TEXT: {ASTWalker.get_text(node, parse_result.source_bytes)}")
        for child in node.children:
            dump_tree(child, indent + 1)

    dump_tree(parse_result.tree.root_node)
    for error in parse_result.errors:
        typer.echo(f"Warning: {error}")


if __name__ == "__main__":
    app()
