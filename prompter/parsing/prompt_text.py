import re
from typing import Optional

from prompter.config import PrompterConfig

# Anything, then "(...)" and a colon, e.g. "Save changes (yes/no): "
YES_NO_PROMPT = re.compile(r".*\([^)]+\):\s*")

DEFAULT_CONFIG = PrompterConfig()


def normalize_prompt(
    prompt: Optional[str], config: PrompterConfig = DEFAULT_CONFIG
) -> str:
    """Return the prompt as displayed: never empty, always delimited."""
    if not prompt:
        return config.empty_prompt
    if not prompt.endswith(config.prompt_endings):
        return prompt + config.prompt_suffix
    return prompt


def yes_no_prompt(
    prompt: Optional[str], config: PrompterConfig = DEFAULT_CONFIG
) -> str:
    """Append the yes/no hint unless the prompt already carries one."""
    prompt = prompt or ""
    if not YES_NO_PROMPT.fullmatch(prompt):
        prompt = prompt + config.yes_no_suffix
    return prompt
