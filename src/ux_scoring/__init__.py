"""UX Scoring MCP Server.

Checklists, calculators, validators and questionnaires that turn a product
team's answers into a 0-100 UX score with a short list of fixes.
"""

__version__ = "0.1.0"

from .core.models import ToolDefinition, ToolResult
from .core.registry import get_tool, score_tool

__all__ = ["ToolDefinition", "ToolResult", "get_tool", "score_tool", "__version__"]
