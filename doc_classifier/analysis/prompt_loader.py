from pathlib import Path

from doc_classifier.analysis.exceptions import AgentError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

CLASSIFY_PROMPT_KEY = "classify_document"
SUMMARIZE_PROMPT_KEY = "summarize_document"

_PROMPT_FILES = {
    CLASSIFY_PROMPT_KEY: "classification_prompt.txt",
    SUMMARIZE_PROMPT_KEY: "summary_prompt.txt",
}


def load_prompt_template(path: Path) -> str:
    """Load a system prompt from a file.

    Raises:
        AgentError: if the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AgentError(f"Failed to load prompt template: {exc}") from exc


def load_default_prompts(prompt_dir: Path | None = None) -> dict[str, str]:
    """Load the bundled system prompts keyed by prompt key."""
    directory = prompt_dir if prompt_dir is not None else _DEFAULT_PROMPT_DIR
    return {key: load_prompt_template(directory / name) for key, name in _PROMPT_FILES.items()}
