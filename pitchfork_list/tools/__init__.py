# =============================================================================
# tools/__init__.py
# =============================================================================
# The FastMCP server: the translation layer between MCP clients and core/.
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT filter, count or sort (that's core/)
#   - They do NOT load data per call (the store is loaded once at startup)
#
# TOOL CONTRACT QUALITY:
#   Each tool has a descriptive name, a docstring the LLM reads to decide
#   WHEN to call it, and Annotated parameters whose constraints are enforced
#   before the tool body runs.
# =============================================================================
