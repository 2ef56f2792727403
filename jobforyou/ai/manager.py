import logging

from jobforyou.ai.cerebras_provider import CerebrasProvider
from jobforyou.ai.deepseek_provider import DeepSeekProvider
from jobforyou.ai.fallback import ProviderFallback
from jobforyou.ai.gemini_provider import GeminiProvider
from jobforyou.ai.groq_provider import GroqProvider
from jobforyou.ai.sambanova_provider import SambaNovaProvider
from jobforyou.config import PROVIDER_ORDER, PROVIDER_TIMEOUT_SECONDS, provider_api_key

logger = logging.getLogger(__name__)

PROVIDER_CLASSES = {
    "deepseek": DeepSeekProvider,
    "gemini": GeminiProvider,
    "groq": GroqProvider,
    "cerebras": CerebrasProvider,
    "sambanova": SambaNovaProvider,
}


def build_fallback(provider_order=None, timeout=PROVIDER_TIMEOUT_SECONDS, api_keys=None):
    """Build the process-wide provider chain.

    Unconfigured providers are kept in the chain; the fallback skips them per
    call. `api_keys` overrides the environment lookup, mainly for tests.
    """
    providers = []
    seen = set()
    for provider_name in provider_order or PROVIDER_ORDER:
        provider_class = PROVIDER_CLASSES.get(provider_name)
        if provider_class is None:
            logger.warning("Ignoring unknown provider %r in PROVIDER_ORDER", provider_name)
            continue
        if provider_name in seen:
            continue
        seen.add(provider_name)

        if api_keys is not None:
            api_key = api_keys.get(provider_name)
        else:
            api_key = provider_api_key(provider_name)
        providers.append(provider_class(api_key=api_key, timeout=timeout))

    fallback = ProviderFallback(providers=providers)
    logger.info(
        "🧠 AI provider order: %s (configured: %s)",
        ", ".join(provider.name for provider in providers) or "none",
        ", ".join(fallback.configured) or "none",
    )
    return fallback
