"""Prompt templating helpers."""
from __future__ import annotations
import re
from pathlib import Path

TEXT_TAG = "{{text}}"
LANGUAGE_TAG = "{{language}}"

DEFAULT_TEMPLATE = f'Translate "{TEXT_TAG}" to {LANGUAGE_TAG}. Output only the translation.'

_TAG_RE = re.compile(r"\{\{(text|language)\}\}")

def load_template(path: str = "configs/prompt_template.txt") -> str:
    """
    Load a prompt template file.

    Args:
        path: Path to template.
    """
    return Path(path).read_text(encoding="utf-8").strip()

def missing_tags(template: str) -> list[str]:
    """Return the placeholders absent from a template."""
    return [tag for tag in (TEXT_TAG, LANGUAGE_TAG) if tag not in template]

def render_prompt(template: str, text: str, language: str) -> str:
    """
    Render source text and target language into the template.

    Args:
        template: Template content containing {{text}} and {{language}}.
        text: Text to translate.
        language: Target language name, passed through as-is.

    Returns:
        Rendered prompt.
    """
    # one pass, so placeholders inside the substituted values stay literal
    values = {"text": text, "language": language}
    return _TAG_RE.sub(lambda m: values[m.group(1)], template)
