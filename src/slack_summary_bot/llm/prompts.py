import yaml
from functools import lru_cache
from pathlib import Path
from string import Template
from typing import Dict, List, Optional

PROMPTS_DIR = Path(__file__).resolve().parent / "templates"

@lru_cache()
def load_prompt(name: str) -> Dict[str, str]:
    path = PROMPTS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Prompt {name} not found in {PROMPTS_DIR}")
    with open(path, "r") as f:
        return yaml.safe_load(f)

def build_user_context(context_before: Optional[str], context_after: Optional[str], prompt: Optional[Dict[str, str]] = None) -> str:
    """
    Renders the block describing what the user wrote around the URL.
    Empty when the user wrote nothing but the link.
    """
    if not (context_before or context_after):
        return ""
    prompt = prompt or load_prompt("summary")
    lines = []
    if context_before:
        lines.append(f'Text before URL: "{context_before}"')
    if context_after:
        lines.append(f'Text after URL: "{context_after}"')
    return Template(prompt["user_context"]).safe_substitute(lines="\n".join(lines))

def build_summary_messages(
    content: str,
    url: str,
    context_before: Optional[str] = None,
    context_after: Optional[str] = None,
    prompt_name: str = "summary",
) -> List[Dict[str, str]]:
    prompt = load_prompt(prompt_name)
    user_message = Template(prompt["content"]).safe_substitute(
        user_context=build_user_context(context_before, context_after, prompt),
        content=content,
        url=url,
    )
    return [
        {"role": "system", "content": prompt["system"]},
        {"role": "user", "content": user_message},
    ]
