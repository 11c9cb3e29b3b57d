"""System instruction and Gemini payload helpers."""
from __future__ import annotations
from pathlib import Path
from typing import Any

SYSTEM_INSTRUCTION = (
    "あなたは、日本のマーケティング戦略の第一人者です。"
    "ユーザーから提供された情報はクライアントからの絶対的な要件です。"
    "これらを無視したり、矛盾する内容を生成することは許されません。"
    "入力された情報（特に課題、ペイン、特徴）を論理的に組み合わせ、"
    "整合性の取れたブランドエクイティピラミッドを構築してください。"
)

def load_system_instruction(path: str | None = None) -> str:
    """
    Load the system instruction sent with every request.

    Args:
        path: Optional text file overriding the built-in instruction.
    """
    if path is None:
        return SYSTEM_INSTRUCTION
    text = Path(path).read_text(encoding="utf-8").strip()
    return text or SYSTEM_INSTRUCTION

def is_present(value: Any) -> bool:
    """JavaScript-style truthiness: empty objects and arrays count as present."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0 and value == value
    if isinstance(value, str):
        return value != ""
    return True

def build_payload(prompt: Any, json_schema: Any = None, system_instruction: str = SYSTEM_INSTRUCTION) -> dict[str, Any]:
    """
    Build the generateContent request body.

    Args:
        prompt: User prompt, placed in a single content part.
        json_schema: Optional response schema, attached verbatim when present.
        system_instruction: Role-setting text for the model.

    Returns:
        JSON-serialisable payload requesting JSON output.
    """
    generation_config: dict[str, Any] = {"responseMimeType": "application/json"}
    if is_present(json_schema):
        generation_config["responseSchema"] = json_schema
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "systemInstruction": {"parts": [{"text": system_instruction}]},
        "generationConfig": generation_config,
    }
