from doc_classifier.analysis.agent import DocumentAgent
from doc_classifier.analysis.prompt_loader import load_default_prompts
from doc_classifier.completion.client_base import BaseCompletionClient
from doc_classifier.config.settings import Settings
from doc_classifier.prompting.factory import build_prompt_provider
from doc_classifier.prompting.resolver import PromptResolver


def build_agent(settings: Settings, completion_client: BaseCompletionClient) -> DocumentAgent:
    prompts = PromptResolver(
        build_prompt_provider(settings),
        load_default_prompts(),
        cache_overrides=settings.prompt_cache_enabled,
    )
    return DocumentAgent(
        client=completion_client,
        model=settings.openai_model_name,
        prompts=prompts,
        temperature=settings.openai_temperature,
        classification_max_chars=settings.classification_max_chars,
        summary_max_chars=settings.summary_max_chars,
    )
