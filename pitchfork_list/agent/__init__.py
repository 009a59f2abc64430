# =============================================================================
# agent/__init__.py
# =============================================================================
# The Google ADK agent that explores the album list conversationally.
#
# The agent has no album logic of its own.  It has a system prompt
# (prompt.py), an LLM (via LiteLlm), and an MCP connection to the server in
# tools/.  Every fact it reports comes back through a tool call.
# =============================================================================
