"""
Utility functions for prompt files and uploaded text.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Union

PLACEHOLDER_PAT = re.compile(r"\{\{([A-Z_]+)\}\}")


def read_file_content(file_path: Union[str, Path]) -> str:
    """
    Read the entire content of a file as a string.

    Args:
        file_path: Path to the file to read. Can be a string or Path object.

    Returns:
        str: The content of the file as a string.

    Raises:
        FileNotFoundError: If the file does not exist.
        IOError: If there is an error reading the file.
    """
    path = Path(file_path) if isinstance(file_path, str) else file_path
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except Exception as e:
        raise IOError(f"Error reading file {path}: {e}") from e


def decode_text_upload(data: bytes) -> str:
    """Decode an uploaded plain-text file, tolerating a BOM and invalid bytes."""
    return data.decode("utf-8-sig", errors="replace")


def replace_prompt_placeholders(prompt_template: str, **kwargs: str) -> str:
    """
    Replace placeholders in a prompt template with dynamic values.

    Automatically includes the current date as {{CURRENT_DATE}}. Substitution is
    done in a single pass, so placeholder-looking text inside a value is kept
    verbatim. Unknown placeholders are left untouched.

    Args:
        prompt_template: The prompt template string with placeholders.
        **kwargs: Key-value pairs to replace in the template.

    Returns:
        str: The prompt with placeholders replaced.

    Example:
        >>> template = "Resume: {{ORIGINAL_RESUME}}"
        >>> replace_prompt_placeholders(template, ORIGINAL_RESUME="Python dev")
        'Resume: Python dev'
    """
    values = {"CURRENT_DATE": datetime.now().strftime("%B %d, %Y"), **kwargs}

    def repl(match: re.Match[str]) -> str:
        key = match.group(1)
        return values[key] if key in values else match.group(0)

    return PLACEHOLDER_PAT.sub(repl, prompt_template)
