"""Typed exception hierarchy. Every error tailwind-mcp can raise."""


class TailwindMCPError(Exception):
    """Base exception for all tailwind-mcp errors."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ProviderError(TailwindMCPError):
    """Completion provider failed (network, auth, timeout, or not configured).

    Always recovered by the manual fallback engine; never reaches the client.
    """
    def __init__(self, message: str, kind: str = "provider", **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind


class UnknownTemplate(TailwindMCPError):
    """Manual engine has no rule table entry for the requested key."""
    def __init__(self, message: str, template_kind: str = "", key: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.template_kind = template_kind
        self.key = key


class InvalidRequest(TailwindMCPError):
    """Missing arguments, unknown tool name, or arguments failing the input schema."""
    def __init__(self, message: str, tool_name: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.tool_name = tool_name


class ToolError(TailwindMCPError):
    """Tool execution failed."""
    def __init__(self, message: str, tool_name: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.tool_name = tool_name
