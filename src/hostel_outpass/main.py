"""Watch-mode entry point: keeps gate boards fresh by polling the outpass store."""

import asyncio
import logging
import sys
from typing import TextIO

import aiohttp

from hostel_outpass.adapters.clock import SystemClock
from hostel_outpass.adapters.config import AppConfig
from hostel_outpass.adapters.formatters import BoardFormatter
from hostel_outpass.adapters.pollers import OutpassBoardPoller, TodayActivityPoller
from hostel_outpass.adapters.publishers import ConsoleStatePublisher
from hostel_outpass.adapters.state import GateState
from hostel_outpass.adapters.store import OutpassHttpClient, OutpassParser, RestOutpassStore
from hostel_outpass.adapters.updaters import GateStateUpdater
from hostel_outpass.application.services import OutpassGateService

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the entry points."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_config() -> AppConfig:
    """Load configuration from the environment and the optional TOML file."""
    config = AppConfig()
    config.load_toml_overrides()
    return config


def build_gate_service(session: aiohttp.ClientSession, config: AppConfig) -> OutpassGateService:
    """Wire the REST store and system clock into the gate service."""
    http_client = OutpassHttpClient(session, config)
    store = RestOutpassStore(http_client, OutpassParser(config.tzinfo))
    return OutpassGateService(store, SystemClock())


async def run_watch(
    config: AppConfig,
    stop_event: asyncio.Event | None = None,
    stream: TextIO | None = None,
) -> GateState:
    """Run both pollers until `stop_event` is set (or forever).

    The boards are redrawn on `stream` (stdout by default) after every
    refresh. Returns the final gate state.
    """
    gate_state = GateState()
    state_updater = GateStateUpdater(gate_state)
    clock = SystemClock()
    publisher = ConsoleStatePublisher(gate_state, BoardFormatter(config), clock, stream)

    async with aiohttp.ClientSession() as session:
        gate_service = build_gate_service(session, config)
        pollers = [
            OutpassBoardPoller(
                gate_service,
                state_updater,
                clock,
                interval_seconds=config.board_refresh_interval_seconds,
                state_publisher=publisher,
            ),
            TodayActivityPoller(
                gate_service,
                state_updater,
                clock,
                interval_seconds=config.activity_refresh_interval_seconds,
                state_publisher=publisher,
            ),
        ]

        for poller in pollers:
            await poller.start()
        try:
            await (stop_event or asyncio.Event()).wait()
        finally:
            for poller in pollers:
                await poller.stop()

    return gate_state


async def main() -> None:
    """Main application entry point."""
    try:
        config = load_config()
    except (ValueError, FileNotFoundError) as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)
    logger.info(f"Watching outpass store at {config.api_base_url}")
    await run_watch(config)


def watch_main() -> None:
    """Synchronous entry point for the watch command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    watch_main()
