from doc_classifier.config.settings import Settings
from doc_classifier.prompting.base import BasePromptProvider, NullPromptProvider
from doc_classifier.prompting.http_prompt_provider import HttpPromptProvider


def build_prompt_provider(settings: Settings) -> BasePromptProvider:
    url = settings.prompt_service_url.strip()
    if not url:
        return NullPromptProvider()
    return HttpPromptProvider(
        base_url=url,
        api_key=settings.prompt_service_api_key,
        timeout_seconds=settings.prompt_service_timeout_seconds,
    )
