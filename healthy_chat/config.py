# healthy_chat/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Groq exposes an OpenAI-compatible API, so the openai SDK talks to it directly
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_BASE_URL = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", 0.2))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", 1024))

# Number of stored messages forwarded to the model on each turn
HISTORY_WINDOW = int(os.getenv("HISTORY_WINDOW", 20))

REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = int(os.getenv("REDIS_PORT", 6379))

RECIPES_PATH = os.getenv("RECIPES_PATH", "data/recipes.json")

ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
    if o.strip()
]

CONVERSATION_COOKIE = "conversation_id"

# Overall budget for one model call; the SDK aborts the request past it
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", 30))
