"""
Agent Platform - Core framework for running long-lived bot agents
"""

import logging
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure root logging for the process.

    Args:
        level: Logging level name (DEBUG, INFO, ...)
        log_file: Optional path of an additional log file
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


class Agent:
    """Base class for all agents"""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(self.name)

    async def run(self):
        """
        Main agent loop. Override in subclass.

        Service agents block here until they stop or fail.
        """
        raise NotImplementedError("Subclass must implement run()")

    async def close(self):
        """Release agent resources. Override in subclass if needed."""
        pass


class AgentPlatform:
    """Platform for registering and running agents"""

    def __init__(self):
        self.agents: Dict[str, Agent] = {}

    def register_agent(self, agent: Agent):
        """Register an agent instance"""
        self.agents[agent.name] = agent
        logger.info(f"Registered agent: {agent.name}")

    async def start_service(self, agent: Agent) -> None:
        """
        Start a long-running service agent (runs until it returns)

        Used for agents like FlubrAgent that stay connected and listen for
        events. Connection recovery belongs to the agent's own client, so a
        crash is logged and re-raised rather than restarted.

        Args:
            agent: Agent instance to run as service
        """
        if agent.name not in self.agents:
            self.register_agent(agent)

        logger.info(f"Starting service agent: {agent.name}")

        try:
            await agent.run()
            logger.info(f"Service agent {agent.name} stopped gracefully")

        except KeyboardInterrupt:
            logger.info(f"Service agent {agent.name} interrupted by user")

        except Exception as e:
            logger.error(f"Service agent {agent.name} crashed: {e}", exc_info=True)
            raise

    async def close(self):
        """Close all registered agents"""
        for agent in self.agents.values():
            try:
                await agent.close()
            except Exception as e:
                logger.warning(f"Failed to close agent {agent.name}: {e}")
