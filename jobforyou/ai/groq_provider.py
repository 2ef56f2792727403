from groq import AsyncGroq

from jobforyou.ai.base import Provider
from jobforyou.config import GENERATION_MAX_TOKENS, GENERATION_TEMPERATURE, GROQ_API_KEY, GROQ_MODEL


class GroqProvider(Provider):
    name = "groq"

    def __init__(self, api_key=GROQ_API_KEY, model=GROQ_MODEL, timeout=None, client=None):
        super().__init__(api_key=api_key, timeout=timeout)
        self.model = model
        self.client = client
        if self.client is None and api_key:
            self.client = AsyncGroq(api_key=api_key)

    async def complete(self, prompt):
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=GENERATION_TEMPERATURE,
            max_tokens=GENERATION_MAX_TOKENS,
        )
        return completion.choices[0].message.content
