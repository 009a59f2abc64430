# =============================================================================
# core/__init__.py
# =============================================================================
# All album logic: the data models, the write-once album store, and the pure
# query, aggregation and statistics functions.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK or any orchestration
#   framework.  Every function here can be tested with a plain list of Album
#   objects.
# =============================================================================
