import json
from typing import Tuple

import click

from .engine import ArithmeticEngine
from .errors import CalculatorError
from .keymap import command_for_key, dispatch_key


def replay_keys(keys: Tuple[str, ...]) -> ArithmeticEngine:
    engine = ArithmeticEngine()
    for key in keys:
        dispatch_key(engine, key)
    return engine


@click.group()
def main() -> None:
    """Browser calculator engine and web server."""


@main.command()
@click.argument("keys", nargs=-1, required=True)
@click.option("--lines", is_flag=True, default=False, help="Print the two display lines only")
def press(keys: Tuple[str, ...], lines: bool) -> None:
    """Replay KEYS (e.g. 3 + 4 '*' 2 Enter) on a fresh calculator."""
    unbound = [k for k in keys if command_for_key(k) is None]
    if unbound:
        raise click.UsageError(f"Unbound keys: {', '.join(unbound)}")
    try:
        engine = replay_keys(keys)
    except CalculatorError as e:
        raise click.UsageError(str(e))

    if lines:
        click.echo(engine.get_previous_line_text())
        click.echo(engine.get_current_line_text())
        return
    snapshot = engine.snapshot()
    click.echo(
        json.dumps(
            {
                "previous_line": snapshot["previous_line"],
                "current_line": snapshot["current_line"],
                "error": snapshot["error"],
            },
            ensure_ascii=False,
        )
    )


@main.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--debug", is_flag=True, default=False, help="Enable Flask debug mode")
def serve(host: str, port: int, debug: bool) -> None:
    """Run the calculator web server."""
    from .webapp.server import DEFAULT_HOST, DEFAULT_PORT, run_server

    run_server(host or DEFAULT_HOST, port or DEFAULT_PORT, debug)


if __name__ == "__main__":  # pragma: no cover
    main()
