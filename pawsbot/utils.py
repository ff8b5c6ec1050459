"""Shared helpers: plain text from LLM content, prompt-ready context descriptions."""
from typing import Any


def clip(text: str, limit: int) -> str:
    """Shorten text to `limit` characters, marking the cut with '...'."""
    if not text or len(text) <= limit:
        return text or ""
    return text[:limit] + "..."


def extract_message_text(content: Any) -> str:
    """Get displayable text from AIMessage.content. Handles string or list-of-blocks (e.g. Gemini)."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, dict) and block.get("type") == "text" and "text" in block:
                parts.append(str(block["text"]).strip())
            elif isinstance(block, str):
                parts.append(block.strip())
        return "\n".join(p for p in parts if p)
    return str(content).strip()


def describe_pet(context: dict[str, Any] | None) -> str:
    """One line about the user's pet from `pet` or `petInfo` context, '' when absent."""
    if not context:
        return ""
    pet = context.get("pet") or context.get("petInfo")
    if not isinstance(pet, dict) or not pet.get("type"):
        return ""
    line = f"Pet information: {pet['type']}"
    if pet.get("age"):
        line += f", {pet['age']} years old"
    if pet.get("breed"):
        line += f", {pet['breed']}"
    if pet.get("weight"):
        line += f", {pet['weight']}"
    return line


def describe_post(context: dict[str, Any] | None) -> str:
    """One line about the community post the question came from, '' when absent."""
    if not context:
        return ""
    post = context.get("postInfo")
    if not isinstance(post, dict) or not post.get("title"):
        return ""
    line = f"Related community post: \"{post['title']}\""
    if post.get("category"):
        line += f" ({post['category']})"
    return line
