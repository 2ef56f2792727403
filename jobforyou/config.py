import os

from dotenv import load_dotenv

load_dotenv()

# API Keys
DEEPSEEK_API_KEY = os.getenv("DEEPSEEK_API_KEY")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
CEREBRAS_API_KEY = os.getenv("CEREBRAS_API_KEY")
SAMBANOVA_API_KEY = os.getenv("SAMBANOVA_API_KEY")

# Model Configuration
DEEPSEEK_MODEL = os.getenv("DEEPSEEK_MODEL", "deepseek-chat")
DEEPSEEK_BASE_URL = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com/v1")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash-latest")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
CEREBRAS_MODEL = os.getenv("CEREBRAS_MODEL", "llama-3.3-70b")
SAMBANOVA_MODEL = os.getenv("SAMBANOVA_MODEL", "Meta-Llama-3.3-70B-Instruct")
SAMBANOVA_BASE_URL = os.getenv("SAMBANOVA_BASE_URL", "https://api.sambanova.ai/v1")

PROVIDER_ORDER = [
    provider.strip().lower()
    for provider in os.getenv("PROVIDER_ORDER", "deepseek,gemini,groq,cerebras,sambanova").split(",")
    if provider.strip()
]

# Generation
PROVIDER_TIMEOUT_SECONDS = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "60"))
GENERATION_TEMPERATURE = float(os.getenv("GENERATION_TEMPERATURE", "0.7"))
GENERATION_MAX_TOKENS = int(os.getenv("GENERATION_MAX_TOKENS", "4096"))

# Server
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", "8080"))

PROVIDER_API_KEYS = {
    "deepseek": DEEPSEEK_API_KEY,
    "gemini": GEMINI_API_KEY,
    "groq": GROQ_API_KEY,
    "cerebras": CEREBRAS_API_KEY,
    "sambanova": SAMBANOVA_API_KEY,
}


def provider_api_key(name):
    return PROVIDER_API_KEYS.get(name)


def require_env():
    configured = [name for name in PROVIDER_ORDER if provider_api_key(name)]
    if not configured:
        raise ValueError(
            "❌ No AI provider keys set. Configure at least one of: "
            + ", ".join(
                name.upper() + "_API_KEY" for name in PROVIDER_ORDER
            )
        )
    return configured
