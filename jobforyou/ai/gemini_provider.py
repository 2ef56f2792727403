import google.generativeai as genai

from jobforyou.ai.base import Provider
from jobforyou.config import GEMINI_API_KEY, GEMINI_MODEL, GENERATION_MAX_TOKENS, GENERATION_TEMPERATURE


class GeminiProvider(Provider):
    """Google Gemini through google-generativeai.

    Quota errors surface as `ResourceExhausted` (HTTP 429) carrying a
    RESOURCE_EXHAUSTED marker in the message.
    """

    name = "gemini"

    def __init__(self, api_key=GEMINI_API_KEY, model=GEMINI_MODEL, timeout=None, client=None):
        super().__init__(api_key=api_key, timeout=timeout)
        self.model = model
        self.client = client
        if self.client is None and api_key:
            genai.configure(api_key=api_key)
            self.client = genai.GenerativeModel(model)

    async def complete(self, prompt):
        response = await self.client.generate_content_async(
            prompt,
            generation_config={
                "temperature": GENERATION_TEMPERATURE,
                "max_output_tokens": GENERATION_MAX_TOKENS,
            },
        )
        # .text raises when the candidate was blocked or has no parts.
        if not response.candidates or not response.candidates[0].content.parts:
            return ""
        return response.text
