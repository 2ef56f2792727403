import asyncio

from sambanova import SambaNova

from jobforyou.ai.base import Provider
from jobforyou.config import (
    GENERATION_MAX_TOKENS,
    GENERATION_TEMPERATURE,
    SAMBANOVA_API_KEY,
    SAMBANOVA_BASE_URL,
    SAMBANOVA_MODEL,
)


class SambaNovaProvider(Provider):
    name = "sambanova"

    def __init__(self, api_key=SAMBANOVA_API_KEY, model=SAMBANOVA_MODEL, timeout=None, client=None):
        super().__init__(api_key=api_key, timeout=timeout)
        self.model = model
        self.client = client
        if self.client is None and api_key:
            self.client = SambaNova(
                api_key=api_key,
                base_url=SAMBANOVA_BASE_URL,
            )

    async def complete(self, prompt):
        completion = await asyncio.to_thread(
            self.client.chat.completions.create,
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=GENERATION_TEMPERATURE,
            max_tokens=GENERATION_MAX_TOKENS,
        )
        return completion.choices[0].message.content
