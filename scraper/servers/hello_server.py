from __future__ import annotations

import asyncio
import os
import signal
from dataclasses import dataclass
from typing import Optional

from aiohttp import web
from loguru import logger

from scraper.utils.env_loader import PathLike, read_dotenv_values
from scraper.utils.logger import setup_logger


MAIN_SERVICE_PORT = 3000
MAIN_SERVICE_BODY = "Hello World!"
SUB_SERVICE_PORT = 5000
SUB_SERVICE_BODY = "This is PORT 5000 running on dock.!"


@dataclass(frozen=True)
class ServerConfig:
    port: int
    body: str
    host: str = "0.0.0.0"


def _parse_port(raw: Optional[str], source: str) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        port = int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid PORT value '{raw}' from {source}")
        return None
    if not 0 < port < 65536:
        logger.warning(f"Ignoring out-of-range PORT value {port} from {source}")
        return None
    return port


def load_server_config(
    default_port: int,
    body: str,
    env_path: PathLike | None = None,
) -> ServerConfig:
    """Resolve the listening port: .env file -> process environment -> default."""
    port = _parse_port(read_dotenv_values(env_path).get("PORT"), ".env")
    if port is None:
        port = _parse_port(os.getenv("PORT"), "environment")
    if port is None:
        port = default_port
    return ServerConfig(port=port, body=body)


def create_app(config: ServerConfig) -> web.Application:
    async def index(request: web.Request) -> web.Response:
        return web.Response(text=config.body)

    app = web.Application()
    app.router.add_get("/", index)
    return app


async def start_server(config: ServerConfig):
    runner = web.AppRunner(create_app(config))
    await runner.setup()
    site = web.TCPSite(runner, config.host, config.port)
    await site.start()

    logger.info(f"Example app listening at http://localhost:{config.port}")
    return runner, site


async def serve(config: ServerConfig) -> None:
    runner, _ = await start_server(config)

    shutdown_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, shutdown_event.set)

    try:
        await shutdown_event.wait()
    finally:
        await runner.cleanup()
        logger.info(f"Server on port {config.port} stopped")


def run_main_service() -> None:
    setup_logger()
    asyncio.run(serve(load_server_config(MAIN_SERVICE_PORT, MAIN_SERVICE_BODY)))


def run_sub_service() -> None:
    setup_logger()
    asyncio.run(serve(load_server_config(SUB_SERVICE_PORT, SUB_SERVICE_BODY)))


if __name__ == "__main__":
    run_main_service()
