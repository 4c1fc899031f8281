from tailwind_mcp.llm.client import CompletionProvider, LLMClient
from tailwind_mcp.llm.extract import extract_json, strip_code_fences

__all__ = ["CompletionProvider", "LLMClient", "extract_json", "strip_code_fences"]
