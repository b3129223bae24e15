"""Server entry point for running the FastAPI application."""

import asyncio
import os
import signal

import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

APP_PATH = "api.app:app"


class Server:
    """Uvicorn server wrapper that stops cleanly on SIGINT/SIGTERM."""

    def __init__(self, config: uvicorn.Config):
        self.server = uvicorn.Server(config)

    def handle_exit(self, _sig, _frame):
        """Handle exit signals."""
        print("\n[INFO] Received shutdown signal, stopping server...")
        self.server.should_exit = True

    async def serve(self):
        """Run the server with signal handlers installed."""
        signal.signal(signal.SIGINT, self.handle_exit)
        signal.signal(signal.SIGTERM, self.handle_exit)

        await self.server.serve()


def run_server(host: str = "0.0.0.0", port: int = 8000, reload: bool = False):
    """Run the FastAPI server."""
    if reload:
        # Ctrl-C handling may be degraded in reload mode due to the subprocess
        uvicorn.run(APP_PATH, host=host, port=port, reload=True, log_level="info", access_log=False)
        return

    config = uvicorn.Config(APP_PATH, host=host, port=port, log_level="info", access_log=False)
    asyncio.run(Server(config).serve())


def main():
    """Run the server using API_HOST, API_PORT and API_RELOAD from the environment."""
    run_server(
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
        reload=os.getenv("API_RELOAD", "false").lower() == "true",
    )


if __name__ == "__main__":
    main()
