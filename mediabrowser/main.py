"""
mediabrowser entry point.

Wires a PlaybackPreparer to the local database and yt-dlp, and exposes a
small command line for resolving media IDs.

Usage:
    python -m mediabrowser resolve "bookmarks/local/1/0"
    python -m mediabrowser init-db
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mediabrowser import __version__
from mediabrowser.browser import ErrorCode, MetadataSource, PlaybackHost, PlaybackPreparer
from mediabrowser.config import MediaBrowserConfig, get_config, load_config
from mediabrowser.database import (
    LocalPlaylistManager,
    RemotePlaylistManager,
    StreamHistoryManager,
    close_db,
    init_db,
)
from mediabrowser.extractor import YtDlpMetadataService
from mediabrowser.playqueue import ChannelTabPlayQueue, PlayQueue
from mediabrowser.utils.logging_setup import setup_logging_from_config

logger = logging.getLogger(__name__)


def create_preparer(
    host: PlaybackHost,
    session_factory: async_sessionmaker[AsyncSession],
    config: Optional[MediaBrowserConfig] = None,
    metadata: Optional[MetadataSource] = None,
) -> PlaybackPreparer:
    """
    Create a preparer backed by the local database and yt-dlp.

    Args:
        host: Media session callbacks
        session_factory: Session factory of the local database
        config: Configuration, defaults to the global one
        metadata: Metadata source, defaults to YtDlpMetadataService
    """
    config = config or get_config()
    return PlaybackPreparer(
        host=host,
        local_playlists=LocalPlaylistManager(session_factory),
        remote_playlists=RemotePlaylistManager(session_factory),
        history=StreamHistoryManager(session_factory),
        metadata=metadata or YtDlpMetadataService.from_config(config.extractor),
        preparer_config=config.preparer,
    )


class ConsoleHost:
    """PlaybackHost that keeps the outcome for printing on the console."""

    def __init__(self):
        self.queue: Optional[PlayQueue] = None
        self.error: Optional[tuple[str, ErrorCode]] = None

    def set_error(self, message: str, code: ErrorCode) -> None:
        self.error = (message, code)

    def clear_error(self) -> None:
        self.error = None

    def start_playback(self, queue: PlayQueue, play_when_ready: bool) -> None:
        self.queue = queue

    def prepare(self, play_when_ready: bool) -> None:
        pass


def format_queue(queue: PlayQueue) -> str:
    """Render a play queue as text, marking the start index."""
    lines = [f"{type(queue).__name__} ({len(queue)} items, start index {queue.index})"]

    if isinstance(queue, ChannelTabPlayQueue):
        lines.append(f"  tab: {queue.url} (service {queue.service_id})")

    for position, item in enumerate(queue.items):
        marker = ">" if position == queue.index else " "
        lines.append(f"{marker} {position:3d}. {item.title} [{item.url}]")

    return "\n".join(lines)


async def resolve_media_id(media_id: str, config: MediaBrowserConfig) -> int:
    session_factory = await init_db(config.database)
    host = ConsoleHost()
    preparer = create_preparer(host, session_factory, config)

    try:
        await preparer.prepare_from_media_id(media_id, play_when_ready=False)
    finally:
        preparer.dispose()
        await close_db()

    if host.error is not None:
        message, code = host.error
        print(f"Error ({code.name}): {message}", file=sys.stderr)
        return 1

    print(format_queue(host.queue))
    return 0


async def _init_db(config: MediaBrowserConfig) -> None:
    await init_db(config.database)
    await close_db()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mediabrowser",
        description="Resolve media browser IDs into play queues",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to config.yaml")
    parser.add_argument("--log-level", help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a media ID and print the queue")
    resolve_parser.add_argument("media_id")
    subparsers.add_parser("init-db", help="Create the database tables")

    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging_config = config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging_from_config(logging_config)

    if args.command == "init-db":
        asyncio.run(_init_db(config))
        logger.info(f"Database ready: {config.database.url}")
        return 0

    return asyncio.run(resolve_media_id(args.media_id, config))
