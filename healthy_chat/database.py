# healthy_chat/database.py
import redis

from healthy_chat.config import REDIS_HOST, REDIS_PORT

# Connections are opened lazily, on the first command
redis_client = redis.Redis(
    host=REDIS_HOST,
    port=REDIS_PORT,
    decode_responses=True  # Ensures output is returned as strings
)


def get_redis_client() -> redis.Redis:
    return redis_client
