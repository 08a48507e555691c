import json
import logging
import os
from typing import Iterable, List, Tuple

import click

from .keymap import action_for_key
from .session import CalculatorSession
from .view import snapshot

QUIT_WORDS = {"quit", "exit", "q"}


def expand_keys(tokens: Iterable[str]) -> List[str]:
    """
    Split command-line tokens into key names.

    A token that is itself a bound key name (``Enter``, ``Escape``, ``7``) is
    kept whole; anything else is read one character per key, so ``12+3=`` is
    five key presses.
    """
    keys: List[str] = []
    for token in tokens:
        if action_for_key(token) is not None:
            keys.append(token)
            continue
        for ch in token:
            if ch.isspace():
                continue
            if action_for_key(ch) is None:
                raise click.BadParameter(f"unknown key {ch!r} in {token!r}", param_hint="KEYS")
            keys.append(ch)
    return keys


def render_line(session: CalculatorSession) -> str:
    state = session.state
    if state.history:
        return f"{state.history:>30}  |  {state.display_value}"
    return state.display_value


@click.group()
@click.option(
    "--log-level",
    default=lambda: os.environ.get("POCKET_CALC_LOG_LEVEL", "WARNING"),
    show_default="WARNING or $POCKET_CALC_LOG_LEVEL",
    help="Logging level",
)
def main(log_level: str) -> None:
    """Four-function calculator driven by key presses."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@main.command("eval", context_settings={"ignore_unknown_options": True})
@click.argument("keys", nargs=-1, required=True, type=click.UNPROCESSED)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the full state as JSON")
def eval_keys(keys: Tuple[str, ...], as_json: bool) -> None:
    """Press KEYS in order and print the display, e.g. ``eval 12+3=``."""
    session = CalculatorSession()
    session.press_all(expand_keys(keys))
    if as_json:
        click.echo(json.dumps(snapshot(session.state)))
    else:
        click.echo(session.state.display_value)


@main.command()
def repl() -> None:
    """Read key presses line by line until EOF or ``quit``."""
    session = CalculatorSession()
    stdin = click.get_text_stream("stdin")
    click.echo(render_line(session))
    for line in stdin:
        line = line.strip()
        if line.lower() in QUIT_WORDS:
            break
        if not line:
            continue
        try:
            keys = expand_keys(line.split())
        except click.BadParameter as e:
            click.echo(f"error: {e.format_message()}", err=True)
            continue
        session.press_all(keys)
        click.echo(render_line(session))


@main.command()
@click.option("--host", default=lambda: os.environ.get("POCKET_CALC_HOST", "127.0.0.1"), show_default="127.0.0.1")
@click.option("--port", default=lambda: int(os.environ.get("POCKET_CALC_PORT", "5001")), show_default="5001", type=int)
def serve(host: str, port: int) -> None:
    """Run the web UI."""
    from .webapp import app

    click.echo(f"Access at: http://{host}:{port}")
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":  # pragma: no cover
    main()
