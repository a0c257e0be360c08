"""Main application entry point.

Runs the FastAPI relay with the NiceGUI chat page mounted on it.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles /chat, NiceGUI handles the UI, both on PORT.
    """
    import uvicorn
    from nicegui import ui

    from lexora.api.app import create_app
    from lexora.api.config import get_server_config
    from lexora.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    config = get_server_config()
    app = create_app(config)

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Lexora",
        favicon="🤖",
        storage_secret=config.storage_secret,
    )

    logger.info(f"Starting integrated server on http://localhost:{config.port}")
    logger.info(f"API docs available at http://localhost:{config.port}/docs")
    logger.info(f"Chat UI available at http://localhost:{config.port}/")

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run FastAPI and NiceGUI as separate servers.

    The relay listens on PORT and the UI on UI_PORT; the relay only accepts
    cross-origin calls from UI_ORIGIN.
    """
    import asyncio
    import subprocess

    from lexora.api.config import get_server_config

    config = get_server_config()

    async def run_servers() -> None:
        logger.info(f"Starting relay on http://localhost:{config.port}")
        logger.info(f"Starting chat UI on http://localhost:{config.ui_port}")

        relay_proc = subprocess.Popen(
            [
                sys.executable,
                "-m",
                "uvicorn",
                "lexora.api.app:app",
                "--host",
                config.host,
                "--port",
                str(config.port),
            ]
        )

        ui_proc = subprocess.Popen(
            [sys.executable, "-c", "from lexora.ui.chat_page import main; main()"]
        )

        try:
            while True:
                await asyncio.sleep(1)
                if relay_proc.poll() is not None or ui_proc.poll() is not None:
                    break
        except KeyboardInterrupt:
            logger.info("Shutting down servers...")
        finally:
            relay_proc.terminate()
            ui_proc.terminate()
            relay_proc.wait()
            ui_proc.wait()

    asyncio.run(run_servers())


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run the relay and the UI on different ports.
    Default is integrated mode (both on PORT).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Lexora in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
