from typing import Any, Dict, Iterable, List


def _text(value: Any) -> str:
    return value.lower() if isinstance(value, str) else ""


def tool_matches(tool: Dict[str, Any], query: str) -> bool:
    """
    Substring match (query already lowercased) on name, description
    and every advantage / disadvantage.
    """
    if query in _text(tool.get("name")) or query in _text(tool.get("description")):
        return True
    for item in (tool.get("advantages") or []) + (tool.get("disadvantages") or []):
        if query in _text(item):
            return True
    return False


def search_tools(tools: Iterable[Dict[str, Any]], query: str) -> List[Dict[str, Any]]:
    """
    Case-insensitive substring scan, insertion order kept.
    An empty query matches every tool.
    """
    q = (query or "").lower()
    return [t for t in tools if tool_matches(t, q)]
