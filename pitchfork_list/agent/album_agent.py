# =============================================================================
# agent/album_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that answers questions about the ranked album
#   list.  The agent holds no album data itself; everything it knows about the
#   list comes from the MCP tools in pitchfork_list/tools/mcp_server.py.
#
# HOW IT FITS TOGETHER:
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                    Google ADK Agent                      │
#   │  system prompt  ──▶  LLM (via LiteLlm)  ──▶  MCPToolset  │
#   └──────────────────────────────────────────────────────────┘
#                                                     │ stdio
#                                                     ▼
#                                       ┌───────────────────────────┐
#                                       │  FastMCP server           │
#                                       │  (tools/mcp_server.py)    │
#                                       └───────────────────────────┘
#                                                     │
#                                                     ▼
#                                       ┌───────────────────────────┐
#                                       │  core/ (pure Python)      │
#                                       └───────────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess with the SAME interpreter that runs
#   the agent, so the subprocess sees the same installed packages.  They talk
#   over stdin/stdout.
#
# MODEL:
#   Any LiteLlm model string works (AGENT_MODEL, default
#   "openrouter/openai/gpt-4o").  LiteLlm reads the provider's API key from
#   the environment, e.g. OPENROUTER_API_KEY.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool.mcp_toolset import MCPToolset, StdioServerParameters

from pitchfork_list.agent.prompt import get_album_guide_prompt
from pitchfork_list.config import Settings

SERVER_MODULE = "pitchfork_list.tools.mcp_server"


def create_agent(settings: Settings | None = None) -> Agent:
    """Create and configure the album guide agent.

    Args:
        settings: Runtime settings; read from the environment when omitted.

    Returns:
        A configured Google ADK Agent connected to the album MCP server.
    """
    settings = settings or Settings.from_env()

    # The subprocess inherits our environment, so ALBUMS_DATA_PATH,
    # LOG_LEVEL etc. apply to the server too.  It must use stdio.
    server_env = {**os.environ, "MCP_TRANSPORT": "stdio"}

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=["-m", SERVER_MODULE],
            env=server_env,
        ),
    )

    return Agent(
        name="album_guide",
        model=LiteLlm(model=settings.agent_model),
        instruction=get_album_guide_prompt(),
        tools=[mcp_tools],
    )
