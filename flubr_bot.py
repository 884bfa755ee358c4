#!/usr/bin/env python3
"""
Flubr Bot Launcher - Entry point for the flubr Slack service

Loads configuration, initializes FlubrAgent, and starts the service.
Designed to run as systemd service or standalone for testing.
"""

import os
import sys
import signal
import asyncio
from pathlib import Path
from typing import Optional

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from agent_platform import AgentPlatform, configure_logging
from agents.flubr_agent import FlubrAgent
from flubr.config import FlubrConfig, OPTIONAL_VARS, REQUIRED_VARS
from flubr.exceptions import ConfigurationError


class FlubrBotService:
    """Service wrapper for the flubr bot"""

    def __init__(self, secrets_file: Optional[Path] = None):
        self.platform = AgentPlatform()
        self.agent: Optional[FlubrAgent] = None
        self.shutdown_event = asyncio.Event()
        self.secrets_file = secrets_file or Path(__file__).parent / "secrets.env"

    def load_secrets(self):
        """Load secrets from secrets.env file"""
        if not self.secrets_file.exists():
            print(f"⚠️  secrets.env not found at {self.secrets_file}")
            print("   Assuming environment variables are already set...")
            return

        print(f"📝 Loading secrets from {self.secrets_file}")

        with open(self.secrets_file) as f:
            for line in f:
                line = line.strip()

                # Skip comments and empty lines
                if not line or line.startswith("#"):
                    continue

                # Skip SOPS encrypted lines
                if "ENC[" in line:
                    continue

                # Parse: export KEY="value" or KEY=value
                if "=" not in line:
                    continue

                if line.startswith("export "):
                    line = line[7:]

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"').strip("'")

                # Only set if not already in environment (env vars take precedence)
                if key not in os.environ:
                    os.environ[key] = value

    def load_config(self) -> FlubrConfig:
        """Validate the environment and build the bot configuration"""
        try:
            config = FlubrConfig.from_env()
        except ConfigurationError as e:
            print(f"❌ {e}")
            print("\nRequired variables:")
            for var, description in REQUIRED_VARS.items():
                print(f"  {var:22s} - {description}")
            print("\nOptional variables (with defaults):")
            for var, default in OPTIONAL_VARS.items():
                print(f"  {var:22s} - {default or '(unset)'}")
            sys.exit(1)

        # Print configuration
        print("\n✅ Configuration:")
        print(f"   Flubr:  {config.flubr_url}")
        print(f"   Pass:   {config.pass_pattern.pattern}")
        print(f"   Fail:   {config.fail_pattern.pattern}")
        print(f"   Bot:    {config.bot_token[:20]}...")
        print()
        return config

    def setup_signals(self):
        """Setup signal handlers for graceful shutdown"""

        def signal_handler(signum, frame):
            print(f"\n📡 Received signal {signum}, shutting down gracefully...")
            self.shutdown_event.set()

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

    async def run(self):
        """Main service loop"""
        self.load_secrets()
        config = self.load_config()
        configure_logging(config.log_level, config.log_file)
        self.setup_signals()

        print("🤖 Initializing flubr agent...")
        self.agent = FlubrAgent(config)

        print("🚀 Starting flubr bot service...\n")

        try:
            # Run service (blocks indefinitely)
            service_task = asyncio.create_task(self.platform.start_service(self.agent))

            # Wait for shutdown signal
            shutdown_task = asyncio.create_task(self.shutdown_event.wait())

            # Wait for either service to fail or shutdown signal
            done, pending = await asyncio.wait(
                [service_task, shutdown_task], return_when=asyncio.FIRST_COMPLETED
            )

            # Cancel pending tasks
            for task in pending:
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass

            # Check if service failed
            if service_task in done:
                try:
                    service_task.result()
                except Exception as e:
                    print(f"❌ Service failed: {e}")
                    raise

            print("\n👋 Flubr bot service stopped gracefully")

        except KeyboardInterrupt:
            print("\n👋 Interrupted by user")

        finally:
            print("🧹 Cleaning up...")
            await self.platform.close()


def main():
    """Entry point"""
    print("=" * 60)
    print("  Flubr Bot Service")
    print("=" * 60)
    print()

    service = FlubrBotService()

    try:
        asyncio.run(service.run())
        sys.exit(0)
    except Exception as e:
        print(f"\n💥 Service crashed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
