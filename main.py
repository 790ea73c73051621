from pathlib import Path
from typing import Optional

import typer

from chars_counter.counting import CATEGORIES, CountResult, count_chars_category
from chars_counter.counting.config import DEFAULT_CATEGORY
from chars_counter.counting.io import DEFAULT_ENCODING, read_text_source
from chars_counter.metrics import summarize

app = typer.Typer()


def _print_entries(result: CountResult) -> None:
    for entry in result:
        typer.echo(f"{entry.character!r}\t{entry.count}")


@app.command()
def count(
    text: Optional[str] = typer.Argument(None, help="Text to count (omit when using --file)."),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        exists=False,
        file_okay=True,
        dir_okay=False,
        help="Read the text from this file instead.",
    ),
    encoding: str = typer.Option(DEFAULT_ENCODING, "--encoding", help="Encoding used with --file."),
    category: str = typer.Option(
        DEFAULT_CATEGORY,
        "--category",
        help="Only count characters in this category (see `categories`).",
        show_default=True,
    ),
    most: bool = typer.Option(False, "--most", help="Only show the most frequent characters."),
    least: bool = typer.Option(False, "--least", help="Only show the least frequent characters."),
    char: Optional[str] = typer.Option(None, "--char", help="Look up a single character."),
    num: Optional[int] = typer.Option(None, "--num", help="Only show characters seen exactly N times."),
    summary: bool = typer.Option(False, "--summary", help="Print total, distinct and entropy."),
) -> None:
    """
    Count character frequencies, optionally narrowed by category and queries.
    """
    if most and least:
        raise typer.BadParameter("--most and --least are mutually exclusive.")
    if char is not None and len(char) != 1:
        raise typer.BadParameter("--char expects exactly one character.")

    try:
        source = read_text_source(text, file, encoding=encoding)
        result = count_chars_category(source, category)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if file is not None:
        print(f"[counter] Read {len(source)} characters from {file}")

    if most:
        result = result.most_chars()
    elif least:
        result = result.least_chars()
    if num is not None:
        result = result.find_by_num(num)

    if char is not None:
        entry = result.find_by_char(char)
        if entry is None:
            typer.echo(f"{char!r}\t0")
        else:
            _print_entries(CountResult([entry]))
    else:
        _print_entries(result)

    if summary:
        stats = summarize(result)
        typer.echo(f"total={stats.total} distinct={stats.distinct} entropy={stats.entropy:.4f}")


@app.command()
def categories() -> None:
    """List the character categories accepted by --category."""
    for name, config in CATEGORIES.items():
        typer.echo(f"{name}\t{config['description']}")


if __name__ == "__main__":
    app()
