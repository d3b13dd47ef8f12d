
from src.config import StoreConfig
from src.store.base import KeyValueStore
from src.store.adapter import RedisStore
from src.store.memory import MemoryStore

def get_store(config: StoreConfig) -> KeyValueStore:
    """
    Factory function to get the store backend named by the config.

    Args:
        config (StoreConfig): backend is "redis" or "memory"

    Returns:
        KeyValueStore: An instance of a class implementing the store operations.
    """
    if config.backend == "memory":
        return MemoryStore()
    else:
        # Default or "redis"
        return RedisStore.from_url(config.redis_url, socket_timeout=config.socket_timeout)
