"""
Round-trip a FinancialModel through plain data / JSON.

Storage itself belongs to the caller; this module only guarantees that every
field survives serialization. Tagged unions are told apart by their ``kind``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import TypeAdapter, ValidationError

from core.schema import FinancialModel

logger = logging.getLogger(__name__)

_MODEL_ADAPTER: TypeAdapter[FinancialModel] = TypeAdapter(FinancialModel)


def model_to_dict(model: FinancialModel) -> Dict[str, Any]:
    return _MODEL_ADAPTER.dump_python(model, mode="json")


def model_from_dict(data: Dict[str, Any]) -> FinancialModel:
    try:
        return _MODEL_ADAPTER.validate_python(data)
    except ValidationError as exc:
        logger.warning("Rejected financial model payload: %d error(s)", exc.error_count())
        raise ValueError(f"Invalid financial model: {exc}") from exc


def dump_model_json(model: FinancialModel, *, indent: int = 2) -> str:
    return _MODEL_ADAPTER.dump_json(model, indent=indent).decode("utf-8")


def model_from_json(text: Union[str, bytes]) -> FinancialModel:
    try:
        return _MODEL_ADAPTER.validate_json(text)
    except ValidationError as exc:
        logger.warning("Rejected financial model JSON: %d error(s)", exc.error_count())
        raise ValueError(f"Invalid financial model: {exc}") from exc


def load_model_json(path: Union[str, Path]) -> FinancialModel:
    return model_from_json(Path(path).read_text(encoding="utf-8"))


def save_model_json(model: FinancialModel, path: Union[str, Path]) -> None:
    Path(path).write_text(dump_model_json(model), encoding="utf-8")
