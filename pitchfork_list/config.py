# =============================================================================
# config.py  -  Runtime Settings (read from the environment)
# =============================================================================
#
# All settings come from environment variables.  The entry points call
# python-dotenv's load_dotenv() first, so a local .env file works too:
#
#   ALBUMS_DATA_PATH=/srv/albums.json   # JSON document holding the list
#   ALBUMS_KEY=albums                   # key the list is stored under
#   MCP_TRANSPORT=stdio                 # stdio | http | sse
#   MCP_HOST=127.0.0.1                  # http/sse only
#   MCP_PORT=8000                       # http/sse only
#   LOG_LEVEL=INFO
#   AGENT_MODEL=openrouter/openai/gpt-4o  # LiteLlm model string for the agent
#
# Leave ALBUMS_DATA_PATH unset to serve the sample list bundled in
# pitchfork_list/data/albums.json.
# =============================================================================

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "albums.json"
TRANSPORTS = ("stdio", "http", "sse")


@dataclass(frozen=True)
class Settings:
    data_path: Path = DEFAULT_DATA_PATH
    albums_key: str = "albums"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    agent_model: str = "openrouter/openai/gpt-4o"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``os.environ``, falling back to the defaults.

        Raises:
            ValueError: If MCP_TRANSPORT is not a known transport or MCP_PORT
                is not an integer.
        """
        env = os.environ
        transport = env.get("MCP_TRANSPORT", cls.transport).lower()
        if transport not in TRANSPORTS:
            raise ValueError(f"MCP_TRANSPORT must be one of {TRANSPORTS}, got {transport!r}")

        port_text = env.get("MCP_PORT", str(cls.port))
        try:
            port = int(port_text)
        except ValueError:
            raise ValueError(f"MCP_PORT must be an integer, got {port_text!r}") from None

        return cls(
            data_path=Path(env.get("ALBUMS_DATA_PATH", str(DEFAULT_DATA_PATH))),
            albums_key=env.get("ALBUMS_KEY", cls.albums_key),
            transport=transport,
            host=env.get("MCP_HOST", cls.host),
            port=port,
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
            agent_model=env.get("AGENT_MODEL", cls.agent_model),
        )
