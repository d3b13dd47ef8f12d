
import hashlib
from src.context import Context

class Bucketer:
    def hash_index(self, experiment_name: str, identity: str, alternative_count: int) -> int:
        """
        "{experiment_name}/{identity}" のMD5ダイジェスト(128bit)をビッグエンディアンの
        符号なし整数として解釈し、alternative数の剰余をindexとする。

        この方式を変更すると既存の全identityの割り当てが変わるため、固定とする。
        """
        if alternative_count < 1:
            raise ValueError(f"alternative_count must be positive, got {alternative_count}")

        digest = hashlib.md5(f"{experiment_name}/{identity}".encode("utf-8")).digest()
        return int.from_bytes(digest, "big") % alternative_count

    def determine_index(self, experiment_id: str, experiment_name: str, alternative_count: int, context: Context) -> int:
        # Session override wins unconditionally; range is not checked here.
        index = context.get_override(experiment_id)
        if index is not None:
            return index

        return self.hash_index(experiment_name, context.identity, alternative_count)
