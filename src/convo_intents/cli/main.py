"""
Conversation intents CLI — `convo` command.

Commands:
  convo build <recipient-id>   Build an envelope and print it as JSON
  convo decode [file]          Decode an envelope into conversation parameters
  convo check [file]           Report whether an envelope is valid
  convo config <cmd>           Show or change CLI defaults
"""

import json
import logging
from pathlib import Path

try:
    import click
    import rich  # noqa: F401
except ImportError:
    raise SystemExit("CLI requires extras: pip install conversation-intents[cli]")

CONFIG_FILE = Path.home() / ".convo" / "config.json"
DEFAULT_INDENT = 2


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Build and inspect conversation launch envelopes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands from separate modules
from convo_intents.cli.envelope import build_cmd, check_cmd, decode_cmd
from convo_intents.cli.config import config

main.add_command(build_cmd)
main.add_command(decode_cmd)
main.add_command(check_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
