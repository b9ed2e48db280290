"""Command-line interface."""

import asyncio
import logging
from pathlib import Path

import click

from ..api.client import TwitchClient
from ..config.settings import load_config
from ..core.errors import TwitchClientError
from ..core.params import (
    FeaturedStreamsParams,
    StreamsParams,
    StreamsSummaryParams,
    StreamType,
    TopGamesParams,
)


def _apply_paging(params, offset: int | None, limit: int | None):
    """Set offset/limit on a params object if given on the command line."""
    if offset is not None:
        params = params.with_offset(offset)
    if limit is not None:
        params = params.with_limit(limit)
    return params


def _run(ctx: click.Context, fetch, render) -> None:
    """Run `fetch(client)` and print the result with `render` (or as JSON)."""
    settings = ctx.obj["settings"]
    client_id = ctx.obj["client_id"]

    async def runner():
        async with TwitchClient(settings, client_id=client_id) as client:
            return await fetch(client)

    try:
        result = asyncio.run(runner())
    except TwitchClientError as e:
        click.echo(f"Error: {e}", err=True)
        if ctx.obj["verbose"]:
            import traceback

            traceback.print_exc()
        ctx.exit(1)

    if ctx.obj["json"]:
        click.echo(result.model_dump_json(by_alias=True, indent=2))
    else:
        render(result)


def _paging_options(func):
    func = click.option("--limit", type=click.IntRange(1, 100), help="Maximum number of results (1-100)")(func)
    func = click.option("--offset", type=click.IntRange(min=0), help="Offset for pagination")(func)
    return func


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Custom configuration file",
)
@click.option(
    "--client-id",
    envvar="TWITCH_CLIENT_ID",
    help="Twitch client id sent as Client-ID header (env: TWITCH_CLIENT_ID)",
)
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON instead of a summary")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def main(ctx: click.Context, config: Path | None, client_id: str | None, as_json: bool, verbose: bool):
    """Query the Twitch REST API."""
    settings = load_config(config)

    if verbose:
        settings.log_level = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        filename=settings.log_file,
    )

    ctx.ensure_object(dict)
    ctx.obj.update(settings=settings, client_id=client_id, json=as_json, verbose=verbose)


@main.command("top-games")
@_paging_options
@click.pass_context
def top_games(ctx: click.Context, offset: int | None, limit: int | None):
    """Games sorted by number of current viewers."""
    params = _apply_paging(TopGamesParams.new(), offset, limit)

    def render(result):
        click.echo(f"Total games: {result.total}")
        click.echo("---")
        for info in result.top:
            click.echo(f"Game: {info.game.name}, Viewers: {info.viewers}, Channels: {info.channels}")
        click.echo("---")

    _run(ctx, lambda client: client.top_games(params), render)


@main.command()
@click.pass_context
def ingests(ctx: click.Context):
    """List RTMP ingest points."""

    def render(result):
        for ingest in result.ingests:
            marker = " (default)" if ingest.is_default else ""
            click.echo(f"{ingest.name}{marker}: {ingest.url_template} [availability {ingest.availability}]")

    _run(ctx, lambda client: client.ingests(), render)


@main.command()
@click.pass_context
def info(ctx: click.Context):
    """Show API links and authorization status."""

    def render(result):
        token = result.token
        click.echo(f"Token valid: {token.valid}")
        if token.user_name:
            click.echo(f"User: {token.user_name}")
        if token.authorization:
            click.echo(f"Scopes: {', '.join(token.authorization.scopes)}")
        for key, link in sorted(result.links.items()):
            click.echo(f"  {key}: {link}")

    _run(ctx, lambda client: client.basic_info(), render)


@main.command()
@click.argument("channel")
@click.pass_context
def stream(ctx: click.Context, channel: str):
    """Show the stream of CHANNEL if it is live."""

    def render(result):
        if not result.is_online:
            click.echo(f"{channel} is offline")
            return
        live = result.stream
        click.echo(f"{live.channel.display_name} is live playing {live.game or 'nothing'}")
        click.echo(f"    Viewers: {live.viewers}")
        click.echo(f"    Since: {live.created_at.isoformat()}")

    _run(ctx, lambda client: client.stream(channel), render)


@main.command()
@click.option("--game", help="Only streams of this game")
@click.option("--channel", "channels", multiple=True, help="Only streams of this channel (repeatable)")
@_paging_options
@click.option("--app-client-id", help="Only streams from applications of this client id")
@click.option(
    "--stream-type",
    type=click.Choice([t.value for t in StreamType]),
    help="Only streams of this type",
)
@click.pass_context
def streams(ctx: click.Context, game: str | None, channels: tuple[str, ...], offset: int | None,
            limit: int | None, app_client_id: str | None, stream_type: str | None):
    """Streams sorted by number of viewers."""
    params = _apply_paging(StreamsParams.new().with_channels(channels), offset, limit)
    if game:
        params = params.with_game(game)
    if app_client_id:
        params = params.with_client_id(app_client_id)
    if stream_type:
        params = params.with_stream_type(StreamType(stream_type))

    def render(result):
        click.echo(f"Total streams: {result.total}")
        for live in result.streams:
            click.echo(f"{live.channel.display_name}: {live.game or '-'} ({live.viewers} viewers)")

    _run(ctx, lambda client: client.streams(params), render)


@main.command()
@_paging_options
@click.pass_context
def featured(ctx: click.Context, offset: int | None, limit: int | None):
    """Featured (promoted) streams."""
    params = _apply_paging(FeaturedStreamsParams.new(), offset, limit)

    def render(result):
        for item in result.featured:
            sponsored = " [sponsored]" if item.sponsored else ""
            click.echo(f"{item.title}{sponsored}: {item.stream.channel.display_name} ({item.stream.viewers} viewers)")

    _run(ctx, lambda client: client.featured_streams(params), render)


@main.command()
@click.option("--game", help="Only summarize streams of this game")
@click.pass_context
def summary(ctx: click.Context, game: str | None):
    """Summary of current streams."""
    params = StreamsSummaryParams.new()
    if game:
        params = params.with_game(game)

    def render(result):
        click.echo(f"Channels: {result.channels}")
        click.echo(f"Viewers: {result.viewers}")

    _run(ctx, lambda client: client.streams_summary(params), render)


@main.command()
@click.argument("name")
@click.pass_context
def channel(ctx: click.Context, name: str):
    """Show channel NAME."""

    def render(result):
        click.echo(f"{result.display_name} ({result.url})")
        if result.status:
            click.echo(f"    Status: {result.status}")
        if result.game:
            click.echo(f"    Game: {result.game}")
        click.echo(f"    Views: {result.views}")
        click.echo(f"    Followers: {result.followers}")
        click.echo(f"    Partner: {result.partner}")

    _run(ctx, lambda client: client.channel(name), render)


if __name__ == "__main__":
    main()
