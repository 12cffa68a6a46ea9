"""CLI: convo build|decode|check"""

import json
import mimetypes
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from convo_intents.builder import create, create_for_popup
from convo_intents.decoder import decode, is_invalid
from convo_intents.errors import ConflictingAttachmentError, MissingRequiredFieldError
from convo_intents.models.media import MediaItem, StickerLocator
from convo_intents.schema import DistributionTypes
from convo_intents.transport.wire import decode_envelope, encode_envelope

console = Console()


def _load_config() -> dict:
    from convo_intents.cli.main import _load_config
    return _load_config()


def _indent(cfg: dict) -> int:
    from convo_intents.cli.main import DEFAULT_INDENT
    return cfg.get("indent", DEFAULT_INDENT)


def _parse_sticker(value: Optional[str]) -> Optional[StickerLocator]:
    """PACK_ID:PACK_KEY:STICKER_ID[:EMOJI]"""
    if value is None:
        return None
    parts = value.split(":", 3)
    if len(parts) not in (3, 4) or not parts[2].isdigit():
        raise click.BadParameter("expected PACK_ID:PACK_KEY:STICKER_ID[:EMOJI]", param_hint="--sticker")
    return StickerLocator(
        pack_id=parts[0],
        pack_key=parts[1],
        sticker_id=int(parts[2]),
        emoji=parts[3] if len(parts) == 4 else None,
    )


def _media_item(uri: str) -> MediaItem:
    mime_type, _ = mimetypes.guess_type(uri)
    return MediaItem(uri=uri, mime_type=mime_type or "application/octet-stream")


def _read_envelope(source):
    envelope = decode_envelope(source.read())
    if envelope is None:
        console.print("[red]Malformed envelope.[/red]")
        raise SystemExit(1)
    return envelope


@click.command("build")
@click.argument("recipient_id")
@click.option("-t", "--thread-id", default=-1, type=int, help="Thread id (-1 if not created yet)")
@click.option("--popup", is_flag=True, help="Route to the popup conversation screen")
@click.option("--draft", "draft_text", default=None)
@click.option("--media", "media_uris", multiple=True, help="Media URI (repeatable)")
@click.option("--sticker", default=None, help="PACK_ID:PACK_KEY:STICKER_ID[:EMOJI]")
@click.option("--borderless", is_flag=True)
@click.option("--distribution-type", default=None, type=int)
@click.option("--starting-position", default=-1, type=int)
@click.option("--data-uri", default=None)
@click.option("--data-type", default=None)
def build_cmd(
    recipient_id: str,
    thread_id: int,
    popup: bool,
    draft_text: Optional[str],
    media_uris: tuple[str, ...],
    sticker: Optional[str],
    borderless: bool,
    distribution_type: Optional[int],
    starting_position: int,
    data_uri: Optional[str],
    data_type: Optional[str],
):
    """Build an envelope and print it as JSON."""
    cfg = _load_config()
    if distribution_type is None:
        distribution_type = cfg.get("distribution_type", DistributionTypes.DEFAULT)

    factory = create_for_popup if popup else create
    builder = (
        factory(recipient_id, thread_id)
        .with_draft_text(draft_text)
        .with_media([_media_item(uri) for uri in media_uris] if media_uris else None)
        .with_sticker_locator(_parse_sticker(sticker))
        .as_borderless(borderless)
        .with_distribution_type(distribution_type)
        .with_starting_position(starting_position)
        .with_data_uri(data_uri)
        .with_data_type(data_type)
    )
    try:
        envelope = builder.build()
    except ConflictingAttachmentError as e:
        console.print(f"[red]Conflicting attachment: {e}[/red]")
        raise SystemExit(1)
    click.echo(encode_envelope(envelope, indent=_indent(cfg)))


@click.command("decode")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--json-output", "--json", is_flag=True)
def decode_cmd(source, json_output: bool):
    """Decode an envelope (file or stdin) into conversation parameters."""
    envelope = _read_envelope(source)
    if is_invalid(envelope):
        console.print("[red]Invalid envelope: no recipient_id.[/red]")
        raise SystemExit(1)
    try:
        params = decode(envelope)
    except MissingRequiredFieldError as e:
        console.print(f"[red]Invalid envelope: {e}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps(params.model_dump(mode="json"), indent=_indent(_load_config())))
        return

    table = Table(title=f"Conversation ({envelope.target})")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for name, value in params.model_dump(mode="json").items():
        if isinstance(value, list):
            value = ", ".join(item.get("uri", "?") for item in value) or "(empty)"
        elif isinstance(value, dict):
            value = f"{value.get('pack_id')}:{value.get('sticker_id')}"
        table.add_row(name, "-" if value is None else str(value))
    console.print(table)


@click.command("check")
@click.argument("source", type=click.File("r"), default="-")
def check_cmd(source):
    """Report whether an envelope is valid."""
    envelope = _read_envelope(source)
    if is_invalid(envelope):
        console.print("[yellow]invalid[/yellow]: no recipient_id")
        raise SystemExit(1)
    console.print("[green]valid[/green]")
