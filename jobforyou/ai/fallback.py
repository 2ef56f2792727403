import logging

from jobforyou.ai.classify import wrap_provider_error
from jobforyou.ai.errors import AllProvidersFailedError, EmptyResponseError, QuotaExhaustedError

logger = logging.getLogger(__name__)

FAILOVER_ERRORS = (QuotaExhaustedError, EmptyResponseError)


class ProviderFallback:
    """Tries providers in priority order until one returns text.

    Providers without a credential are skipped without a call. Quota errors
    and empty responses move on to the next provider; any other error stops
    the walk so a bad request is not hidden behind a later success.
    """

    def __init__(self, providers):
        self.providers = tuple(providers)

    @property
    def configured(self):
        return [provider.name for provider in self.providers if provider.is_configured()]

    async def generate_result(self, prompt):
        last_error = None
        attempted = []
        for provider in self.providers:
            if not provider.is_configured():
                logger.info("⏭️ Skipping %s: no credential configured", provider.name)
                continue

            attempted.append(provider.name)
            logger.info("🔄 Attempting %s", provider.name)
            try:
                result = await provider.generate(prompt)
            except Exception as exc:
                last_error = wrap_provider_error(exc, provider.name)
                if isinstance(last_error, FAILOVER_ERRORS):
                    logger.warning("⚠️ %s failed: %s", provider.name, last_error)
                    logger.info("➡️ Falling back from %s to next provider", provider.name)
                    continue
                logger.error("❌ %s failed: %s; not trying further providers", provider.name, last_error)
                break

            logger.info("✅ AI response from %s", result.provider)
            return result

        if last_error is None:
            raise AllProvidersFailedError(
                "AI generation failed: no providers attempted (none configured)",
                attempted=attempted,
            )
        raise AllProvidersFailedError(
            f"AI generation failed after trying {', '.join(attempted)}. Last error: {last_error}",
            last_error=last_error,
            attempted=attempted,
        ) from last_error

    async def generate(self, prompt):
        result = await self.generate_result(prompt)
        return result.content
