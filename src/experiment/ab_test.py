
import re
from typing import Any, Dict, List, Optional
from src.context import Context
from src.store.base import KeyValueStore
from src.experiment.alternative import Alternative
from src.experiment.bucketer import Bucketer
from src.experiment.errors import ExperimentDefinitionError
from src.observability.logging import log_assignment, log_conversion, log_override

class Experiment:
    """
    実験の共通部分 (名前・ID・ストアのキー空間)。
    IDは名前を小文字化し、英数字とアンダースコア以外を "_" に置換したもの。
    """
    def __init__(self, name: str, store: KeyValueStore, id: Optional[str] = None):
        self.name = name
        self.id = id or re.sub(r"\W", "_", name.lower())
        self.store = store
        self.saved = False

    def key(self, name: str) -> str:
        return f"{self.id}:{name}"

    def save(self) -> None:
        self.saved = True

class AbTest(Experiment):
    def __init__(self, name: str, store: KeyValueStore, id: Optional[str] = None, bucketer: Optional[Bucketer] = None):
        super().__init__(name, store, id=id)
        self.bucketer = bucketer or Bucketer()
        self.alternatives: List[Alternative] = []

    def define_alternatives(self, *values: Any) -> List[Alternative]:
        """
        Replaces the alternatives of this test. At least two values are needed
        before the test is saved; with no values the test becomes True/False.

        Indices are assigned by position, so redefining makes any override
        recorded against the old list stale.
        """
        if not values:
            values = (True, False)
        self.alternatives = [
            Alternative(self.id, i, value, self.store)
            for i, value in enumerate(values)
        ]
        return self.alternatives

    def true_false(self) -> List[Alternative]:
        return self.define_alternatives(True, False)

    def choose(self, context: Context) -> Any:
        """
        identityに対する値を返し、参加を記録する。
        同じ実験・identityの組には常に同じ値を返す (強制選択がない限り)。
        """
        alt = self.alternative_for(context)
        alt.record_participation(context.identity)
        log_assignment(self.id, context, alt.id, alt.value, overridden=context.get_override(self.id) is not None)
        return alt.value

    def record_conversion(self, context: Context) -> int:
        alt = self.alternative_for(context)
        counted = alt.record_conversion(context.identity)
        log_conversion(self.id, context, alt.id, counted)
        return alt.id

    def force_selection(self, context: Context, value: Any) -> None:
        """
        Forces this test to use the alternative holding `value` for the session
        in `context`. Pass None to clear the selection.

        Raises:
            ValueError: no alternative has that value
        """
        if value is None:
            context.set_override(self.id, None)
            log_override(self.id, context, None)
            return

        alternative = next((alt for alt in self.alternatives if _same_value(alt.value, value)), None)
        if alternative is None:
            raise ValueError(f"No alternative {value!r} for {self.name}")

        context.set_override(self.id, alternative.id)
        log_override(self.id, context, alternative.id)

    def alternative_for(self, context: Context) -> Alternative:
        self._check_alternatives()
        index = self.bucketer.determine_index(self.id, self.name, len(self.alternatives), context)
        # Negative indices would silently wrap, so reject them like any other stale override.
        if not 0 <= index < len(self.alternatives):
            raise IndexError(
                f"Alternative index {index} out of range for {self.name} "
                f"({len(self.alternatives)} alternatives)"
            )
        return self.alternatives[index]

    def report(self) -> List[Dict[str, Any]]:
        """
        外部のレポート描画用に、alternativeごとの集計値を返す。
        ラベルはIDから "Option A", "Option B", ... とする。
        """
        rows = []
        for alt in self.alternatives:
            participants = alt.participants()
            converted = alt.converted()
            rows.append({
                "id": alt.id,
                "label": f"Option {chr(65 + alt.id)}",
                "value": alt.value,
                "participants": participants,
                "converted": converted,
                "conversions": alt.conversions(),
                "conversion_rate": converted / participants if participants else 0.0
            })
        return rows

    def humanize(self) -> str:
        return "A/B Test"

    def save(self) -> None:
        self._check_alternatives()
        super().save()

    def _check_alternatives(self) -> None:
        if len(self.alternatives) < 2:
            raise ExperimentDefinitionError(f"Experiment {self.name} needs at least two alternatives")

def _same_value(alt_value: Any, value: Any) -> bool:
    # bool is a subclass of int: False must not select an alternative holding 0
    if isinstance(alt_value, bool) or isinstance(value, bool):
        return type(alt_value) is type(value) and alt_value == value
    return alt_value == value
