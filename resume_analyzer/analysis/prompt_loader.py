import json
from pathlib import Path

from resume_analyzer.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load the prompt template ``{name}_prompt.txt``.

    Args:
        name: Analysis name, e.g. ``ats_score``.
        prompt_dir: Directory holding the templates.
              Defaults to the bundled prompts directory.

    Returns:
        The raw template string with placeholders.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(name: str, prompt_dir: Path | None = None) -> dict[str, object]:
    """Load and decode the response schema ``{name}_schema.json``.

    Raises:
        AnalysisError: if the file cannot be read or is not a JSON object.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}_schema.json"
    try:
        schema = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise AnalysisError(f"Failed to load JSON schema: {exc}") from exc
    if not isinstance(schema, dict):
        raise AnalysisError(f"JSON schema {path.name} must be an object")
    return schema
