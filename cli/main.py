"""Command line interface for id57."""

import json
import uuid
from typing import Annotated, Optional

import typer

from codec.base57 import ALPHABET, decode, encode
from config import load_config
from core.errors import Id57Error
from identifier.entropy import get_entropy
from identifier.generator import configure as configure_generator, parse
from internal.logging import LogLevel, StructuredLogger, get_logger
from utils.crash import configure as configure_crash, install_crash_handler

app = typer.Typer(
    name="id57",
    help="Generate, encode and inspect base57 time-sortable identifiers.",
    add_completion=False,
    no_args_is_help=True,
)

STRICT_OPTION = Annotated[
    Optional[bool],
    typer.Option("--strict/--lenient", help="Fail instead of widening values that overflow their width."),
]


def _payload(value):
    """Payload from a decimal/0x integer or a UUID string."""
    try:
        return int(value, 0)
    except ValueError:
        pass
    try:
        return uuid.UUID(value)
    except ValueError:
        raise typer.BadParameter(f"{value!r} is neither an integer nor a UUID") from None


def _fail(action, exc):
    get_logger().error(f"{action} failed", error=exc)
    raise typer.Exit(code=1) from exc


@app.callback()
def main(ctx: typer.Context):
    """Load configuration and wire logging, crash handling and the default generator."""
    config = load_config()
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    configure_crash(config.logging.crash_file)
    install_crash_handler()
    ctx.obj = configure_generator(entropy=get_entropy(config.identifier.entropy),
                                  strict=config.identifier.strict)
    get_logger().debug("generator ready", entropy=config.identifier.entropy,
                       strict=config.identifier.strict)


@app.command("generate")
def generate_command(
    ctx: typer.Context,
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Number of identifiers.")] = 1,
    timestamp: Annotated[Optional[int], typer.Option(help="Microseconds since the Unix epoch.")] = None,
    payload: Annotated[Optional[str], typer.Option(help="Integer or UUID payload.")] = None,
    strict: STRICT_OPTION = None,
):
    """Print new identifiers, one per line."""
    generator = ctx.obj
    payload_value = _payload(payload) if payload is not None else None
    try:
        for _ in range(count):
            typer.echo(generator.generate(timestamp, payload_value, strict))
    except Id57Error as exc:
        _fail("generate", exc)


@app.command("encode")
def encode_command(
    ctx: typer.Context,
    value: Annotated[int, typer.Argument(help="Non-negative integer up to 128 bits.")],
    pad_to: Annotated[Optional[int], typer.Option("--pad-to", "-w", help="Minimum width.")] = None,
    strict: STRICT_OPTION = None,
):
    """Encode an integer as base57."""
    strict = ctx.obj.strict if strict is None else strict
    try:
        typer.echo(encode(value, pad_to, strict=strict))
    except Id57Error as exc:
        _fail("encode", exc)


@app.command("decode")
def decode_command(value: Annotated[str, typer.Argument(help="Base57 string.")]):
    """Decode a base57 string to an integer."""
    try:
        typer.echo(decode(value))
    except Id57Error as exc:
        _fail("decode", exc)


@app.command("parse")
def parse_command(
    identifier: Annotated[str, typer.Argument(help="33-character identifier.")],
    as_json: Annotated[bool, typer.Option("--json", help="Emit JSON.")] = False,
):
    """Show the timestamp and payload of an identifier."""
    try:
        record = parse(identifier).to_dict()
    except Id57Error as exc:
        _fail("parse", exc)
    if as_json:
        typer.echo(json.dumps(record))
        return
    for key, value in record.items():
        typer.echo(f"{key:<10} {value}")


@app.command("alphabet")
def alphabet_command():
    """Print the base57 alphabet."""
    typer.echo(ALPHABET)


if __name__ == "__main__":
    app()
