
import json
import logging
from typing import Any, Optional
from src.context import Context

logger = logging.getLogger("abtest")
logger.setLevel(logging.INFO)
# Handler設定は実行環境に依存するため、ここでは標準出力への出力のみを想定
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter('%(message)s'))
logger.addHandler(handler)

def log_assignment(experiment_id: str, context: Context, alternative_id: int, value: Any, overridden: bool):
    """
    alternativeの割り当て結果を構造化ログ(JSON)として出力する。
    """
    log_data = {
        "event": "alternative_assigned",
        "experiment_id": experiment_id,
        "identity": context.identity,
        "alternative_id": alternative_id,
        "value": repr(value),
        "overridden": overridden
    }

    logger.info(json.dumps(log_data))

def log_conversion(experiment_id: str, context: Context, alternative_id: int, counted: bool):
    log_data = {
        "event": "conversion_recorded" if counted else "conversion_ignored",
        "experiment_id": experiment_id,
        "identity": context.identity,
        "alternative_id": alternative_id
    }

    logger.info(json.dumps(log_data))

def log_override(experiment_id: str, context: Context, alternative_id: Optional[int]):
    log_data = {
        "event": "override_cleared" if alternative_id is None else "override_set",
        "experiment_id": experiment_id,
        "identity": context.identity,
        "alternative_id": alternative_id
    }

    logger.info(json.dumps(log_data))
