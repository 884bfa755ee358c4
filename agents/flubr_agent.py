"""
Flubr Agent - Slack bot that answers build results with pass/fail images

Connects to Slack via Socket Mode and handles:
- message events (classified against the pass/fail patterns)
- platform errors (logged, reconnects left to the Socket Mode client)
- connection summary on startup
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from slack_bolt.async_app import AsyncApp
from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler

from agent_platform import Agent
from clients.flubr_client import FlubrClient
from flubr.config import FlubrConfig
from flubr.message_handler import MessageHandler
from flubr.presence import report_presence


class FlubrAgent(Agent):
    """Slack bot posting flubr images for passing and failing builds"""

    def __init__(self, config: FlubrConfig, app: Optional[AsyncApp] = None):
        super().__init__("flubr_agent")
        self.config = config

        # Initialize Slack app
        self.app = app or AsyncApp(token=config.bot_token)
        self.socket_handler: Optional[AsyncSocketModeHandler] = None

        self.flubr = FlubrClient(config.flubr_url, timeout=config.http_timeout)
        self.message_handler = MessageHandler(config, self.flubr)

        # Register event handlers
        self._register_handlers()

    def _register_handlers(self):
        """Register Slack event handlers"""

        @self.app.event("message")
        async def handle_message(event, client):
            """Classify the message and reply with an image"""
            await self.message_handler.handle(event, client)

        @self.app.error
        async def handle_error(error, body):
            """Log platform errors"""
            self.logger.error(f"Error: {error}")

    async def _on_socket_error(self, error: Exception):
        """Log Socket Mode transport errors"""
        self.logger.error(f"Error: {error}")

    async def on_connected(self):
        """Log the connection summary and remember the bot's own name"""
        self.message_handler.bot_name = await report_presence(self.app.client)

    async def run(self):
        """
        Main agent loop - starts Socket Mode handler (blocks indefinitely)
        """
        self.logger.info("Starting flubr agent with Socket Mode...")

        try:
            self.socket_handler = AsyncSocketModeHandler(self.app, self.config.app_token)
            self.socket_handler.client.auto_reconnect_enabled = self.config.auto_reconnect
            self.socket_handler.client.on_error_listeners.append(self._on_socket_error)

            await self.socket_handler.connect_async()
            await self.on_connected()

            self.logger.info("✅ Flubr agent connected and ready")

            # This blocks forever, listening for events
            await asyncio.sleep(float("inf"))

        except KeyboardInterrupt:
            self.logger.info("Received shutdown signal")

        except Exception as e:
            self.logger.error(f"Fatal error in flubr agent: {e}", exc_info=True)
            raise

    async def close(self):
        """Close the Socket Mode connection and the flubr client"""
        if self.socket_handler:
            await self.socket_handler.close_async()
            self.socket_handler = None
        await self.flubr.close()
