import asyncio
import logging
from dataclasses import dataclass

from jobforyou.ai.classify import wrap_provider_error
from jobforyou.ai.errors import EmptyResponseError, ProviderError

logger = logging.getLogger(__name__)


@dataclass
class ProviderResult:
    content: str
    provider: str


class Provider:
    """One text-generation backend.

    Subclasses implement `complete(prompt)` against their SDK. `generate`
    adds the timeout, the empty-response check and the error wrapping that
    every provider shares.
    """

    name: str

    def __init__(self, api_key=None, timeout=None):
        self.api_key = api_key
        self.timeout = timeout or None

    def is_configured(self):
        return bool(self.api_key)

    async def complete(self, prompt):
        raise NotImplementedError

    async def generate(self, prompt):
        try:
            if self.timeout:
                content = await asyncio.wait_for(self.complete(prompt), self.timeout)
            else:
                content = await self.complete(prompt)
        except asyncio.TimeoutError as exc:
            logger.warning("%s timed out after %ss", self.name, self.timeout)
            raise ProviderError(f"{self.name} timed out after {self.timeout}s", provider=self.name) from exc
        except Exception as exc:
            logger.warning("%s error: %s", self.name, exc)
            raise wrap_provider_error(exc, self.name) from exc

        content = (content or "").strip()
        if not content:
            raise EmptyResponseError(f"{self.name} returned an empty response.", provider=self.name)
        return ProviderResult(content=content, provider=self.name)
