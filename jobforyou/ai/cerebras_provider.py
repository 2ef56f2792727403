import asyncio

from cerebras.cloud.sdk import Cerebras

from jobforyou.ai.base import Provider
from jobforyou.config import CEREBRAS_API_KEY, CEREBRAS_MODEL, GENERATION_MAX_TOKENS, GENERATION_TEMPERATURE


class CerebrasProvider(Provider):
    name = "cerebras"

    def __init__(self, api_key=CEREBRAS_API_KEY, model=CEREBRAS_MODEL, timeout=None, client=None):
        super().__init__(api_key=api_key, timeout=timeout)
        self.model = model
        self.client = client
        if self.client is None and api_key:
            self.client = Cerebras(api_key=api_key)

    async def complete(self, prompt):
        # The Cerebras SDK client is blocking.
        completion = await asyncio.to_thread(
            self.client.chat.completions.create,
            messages=[{"role": "user", "content": prompt}],
            model=self.model,
            max_tokens=GENERATION_MAX_TOKENS,
            temperature=GENERATION_TEMPERATURE,
            stream=False,
        )
        return completion.choices[0].message.content
