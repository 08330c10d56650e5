"""
Data preparation — loading and saving financial models, structural validation.
"""

from .loader import (
    model_to_dict,
    model_from_dict,
    dump_model_json,
    model_from_json,
    load_model_json,
    save_model_json,
)
from .validators import ModelCheckResult, validate_model

__all__ = [
    "model_to_dict",
    "model_from_dict",
    "dump_model_json",
    "model_from_json",
    "load_model_json",
    "save_model_json",
    "ModelCheckResult",
    "validate_model",
]
