import datetime
import json
import logging
from pathlib import Path

import typer
from tqdm import tqdm

from .config import get_log_level
from .core import law_id, patch
from .core.era import Date
from .exceptions import LawIdError

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


@app.callback()
def main():
    """
    Decode and validate Japanese law identifiers.
    """
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")


def _echo_json(data) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


@app.command("decode")
def decode_cmd(
    value: str = typer.Argument(..., help="15-character law id, e.g. 345AC0000000089")
):
    """
    Print the decoded structure of a law id as JSON.
    """
    try:
        decoded = law_id.decode(value)
    except LawIdError as e:
        typer.echo(f"{type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1)
    _echo_json(decoded.to_dict())


@app.command("decode-patch")
def decode_patch_cmd(
    value: str = typer.Argument(..., help="<law id>_<yyyymmdd>_<law id or 15 zeros>")
):
    """
    Print the decoded structure of a patch record as JSON.
    """
    try:
        info = patch.decode_patch(value)
    except LawIdError as e:
        typer.echo(f"{type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1)
    _echo_json({
        "id": info.id.to_dict(),
        "patch_date": info.patch_date.to_dict(),
        "patch_id": info.patch_id.to_dict() if info.patch_id else None,
    })


@app.command("era")
def era_cmd(
    value: str = typer.Argument(..., help="Date string YYYY-MM-DD")
):
    """
    Convert a Gregorian date to the Japanese era calendar.
    """
    try:
        day = datetime.date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid date: {value}. Must be YYYY-MM-DD.")
    try:
        date = Date.from_ad(day.year, day.month, day.day)
    except LawIdError as e:
        typer.echo(f"{type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(date.to_japanese())


@app.command("validate")
def validate_cmd(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text file with one law id per line"),
    strict: bool = typer.Option(False, help="Abort on the first invalid law id")
):
    """
    Check that every non-empty line of FILE is a valid law id.
    """
    lines = [line.strip() for line in file.read_text(encoding="utf-8").splitlines()]
    invalid = 0
    for lineno, line in enumerate(tqdm(lines, desc="Validating", disable=None), start=1):
        if not line:
            continue
        try:
            law_id.decode(line)
        except LawIdError as e:
            invalid += 1
            logger.warning(f"{file}:{lineno}: {type(e).__name__}: {e}")
            if strict:
                typer.echo(f"{file}:{lineno}: {line}: {e}", err=True)
                raise typer.Exit(code=1)

    checked = sum(1 for line in lines if line)
    typer.echo(f"{checked} checked, {invalid} invalid")
    if invalid:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
