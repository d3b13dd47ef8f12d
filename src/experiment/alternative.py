
from typing import Any
from src.store.base import KeyValueStore

class Alternative:
    """
    実験の1アーム。参加者集合・コンバージョン済み集合・コンバージョン回数の3つを
    共有ストア上のキーとして保持する。

    converted は常に participants の部分集合となる (参加者でない identity のコンバージョンは記録しない)。
    """
    def __init__(self, experiment_id: str, id: int, value: Any, store: KeyValueStore):
        self.experiment_id = experiment_id
        self.id = id
        self.value = value
        self.store = store

    def participants(self) -> int:
        """Number of identities who were shown this alternative."""
        return self.store.set_cardinality(self.key("participants"))

    def converted(self) -> int:
        """Number of participants who converted on this alternative."""
        return self.store.set_cardinality(self.key("converted"))

    def conversions(self) -> int:
        """Number of conversions (the same participant may be counted more than once)."""
        return self.store.counter_get(self.key("conversions"))

    def record_participation(self, identity: str) -> None:
        self.store.set_add(self.key("participants"), identity)

    def record_conversion(self, identity: str) -> bool:
        """
        identity が参加者である場合に限り、converted に追加し conversions を1加算する。
        参加者でない場合は何もしない (エラーにもしない)。

        チェックと書き込みはアトミックではないため、同一identityの同時呼び出しで
        conversions が重複加算されることがある。conversions はイベント数であり、
        ユニークなコンバージョン数は converted() が表す。

        Returns:
            bool: コンバージョンとして記録された場合 True
        """
        if not self.store.set_is_member(self.key("participants"), identity):
            return False

        self.store.set_add(self.key("converted"), identity)
        self.store.counter_increment(self.key("conversions"))
        return True

    def key(self, name: str) -> str:
        return f"{self.experiment_id}:alts:{self.id}:{name}"

    def __repr__(self) -> str:
        return f"Alternative(experiment_id={self.experiment_id!r}, id={self.id}, value={self.value!r})"
