
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

SESSION_KEY = "abtest"

@dataclass
class Context:
    identity: str
    session: Dict[str, Any] = field(default_factory=dict)

    def get_override(self, experiment_id: str) -> Optional[int]:
        """
        セッションに記録された強制選択(alternativeのindex)を返す。
        未設定の場合はNone。
        """
        overrides = self.session.get(SESSION_KEY)
        if not overrides:
            return None
        return overrides.get(experiment_id)

    def set_override(self, experiment_id: str, index: Optional[int]) -> None:
        # None clears the override
        overrides = self.session.setdefault(SESSION_KEY, {})
        if index is None:
            overrides.pop(experiment_id, None)
        else:
            overrides[experiment_id] = index
