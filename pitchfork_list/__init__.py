# =============================================================================
# pitchfork_list  -  MCP server for Pitchfork's "200 Best Albums of the 2000s"
# =============================================================================
#
# LAYERS:
#   core/   ->  pure Python: album models, store, query/statistics engines
#   tools/  ->  the FastMCP server wrapping core/ as tools, prompts, resources
#   agent/  ->  a Google ADK agent that talks to the server over stdio
#
# Dependencies only point downward: agent/ -> tools/ -> core/.
# =============================================================================

__version__ = "1.0.0"
