from pathlib import Path

import pytest

from doc_classifier.analysis.exceptions import AgentError
from doc_classifier.analysis.prompt_loader import (
    CLASSIFY_PROMPT_KEY,
    SUMMARIZE_PROMPT_KEY,
    load_default_prompts,
    load_prompt_template,
)


class TestLoadPromptTemplate:
    def test_loads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "prompt.txt"
        path.write_text("You are a classifier.", encoding="utf-8")
        assert load_prompt_template(path) == "You are a classifier."

    def test_raises_on_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(AgentError, match="Failed to load prompt template"):
            load_prompt_template(tmp_path / "missing.txt")


class TestLoadDefaultPrompts:
    def test_bundled_prompts_exist(self) -> None:
        prompts = load_default_prompts()
        assert set(prompts) == {CLASSIFY_PROMPT_KEY, SUMMARIZE_PROMPT_KEY}
        assert "JSON" in prompts[CLASSIFY_PROMPT_KEY]
        assert "JSON" in prompts[SUMMARIZE_PROMPT_KEY]

    def test_custom_directory(self, tmp_path: Path) -> None:
        (tmp_path / "classification_prompt.txt").write_text("classify", encoding="utf-8")
        (tmp_path / "summary_prompt.txt").write_text("summarize", encoding="utf-8")
        prompts = load_default_prompts(tmp_path)
        assert prompts == {CLASSIFY_PROMPT_KEY: "classify", SUMMARIZE_PROMPT_KEY: "summarize"}
