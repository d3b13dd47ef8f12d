
from typing import Protocol

class KeyValueStore(Protocol):
    """
    Alternativeの集計値を保持する共有KVSのインターフェース。
    各操作はストア側で個別にアトミックであること (複数操作のトランザクションは不要)。
    """
    def set_add(self, key: str, member: str) -> None:
        ...

    def set_is_member(self, key: str, member: str) -> bool:
        ...

    def set_cardinality(self, key: str) -> int:
        ...

    def counter_increment(self, key: str) -> int:
        ...

    def counter_get(self, key: str) -> int:
        """Returns 0 when the counter has never been incremented."""
        ...
