from openai import AsyncOpenAI

from jobforyou.ai.base import Provider
from jobforyou.config import DEEPSEEK_API_KEY, DEEPSEEK_BASE_URL, DEEPSEEK_MODEL


class DeepSeekProvider(Provider):
    """DeepSeek through its OpenAI-compatible chat completions API."""

    name = "deepseek"

    def __init__(self, api_key=DEEPSEEK_API_KEY, model=DEEPSEEK_MODEL, timeout=None, client=None):
        super().__init__(api_key=api_key, timeout=timeout)
        self.model = model
        self.client = client
        if self.client is None and api_key:
            self.client = AsyncOpenAI(api_key=api_key, base_url=DEEPSEEK_BASE_URL)

    async def complete(self, prompt):
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        return completion.choices[0].message.content
