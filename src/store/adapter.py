
import redis
from src.store.base import KeyValueStore

class RedisStore(KeyValueStore):
    """
    redis-pyのクライアントをラップし、KeyValueStoreインターフェースに適合させるアダプター。
    接続エラーやタイムアウト (redis.exceptions.RedisError) はそのまま呼び出し元へ伝播する。
    リトライ方針はクライアント側の設定に委ねる。
    """
    def __init__(self, client: redis.Redis):
        self.client = client

    @classmethod
    def from_url(cls, url: str, socket_timeout: float = 5.0) -> "RedisStore":
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=socket_timeout,
            socket_timeout=socket_timeout,
        )
        return cls(client)

    def set_add(self, key: str, member: str) -> None:
        self.client.sadd(key, member)

    def set_is_member(self, key: str, member: str) -> bool:
        return bool(self.client.sismember(key, member))

    def set_cardinality(self, key: str) -> int:
        return int(self.client.scard(key))

    def counter_increment(self, key: str) -> int:
        return int(self.client.incr(key))

    def counter_get(self, key: str) -> int:
        raw = self.client.get(key)
        if raw is None:
            return 0
        return int(raw)
