from __future__ import annotations

import importlib
import warnings
from collections.abc import Mapping
from typing import Any

from configfactory._internal.type_checks import is_runtime_class

_PYDANTIC_V1_WARNING_PATTERN = (
    r"Core Pydantic V1 functionality isn't compatible with Python 3\.14 or greater\."
)


def _load_pydantic_model_base() -> type[Any] | None:
    return _load_base("pydantic", "BaseModel")


def _load_pydantic_settings_base() -> type[Any] | None:
    return _load_base("pydantic_settings", "BaseSettings")


def _load_pydantic_v1_model_base() -> type[Any] | None:
    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore",
            message=_PYDANTIC_V1_WARNING_PATTERN,
            category=UserWarning,
        )
        return _load_base("pydantic.v1", "BaseModel")


def _load_base(module_name: str, attribute: str) -> type[Any] | None:
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return None
    base = getattr(module, attribute, None)
    if isinstance(base, type):
        return base
    return None


def _build_model_bases() -> tuple[type[Any], ...]:
    seen_ids: set[int] = set()
    bases: list[type[Any]] = []

    for candidate in (
        _load_pydantic_model_base(),
        _load_pydantic_settings_base(),
        _load_pydantic_v1_model_base(),
    ):
        if candidate is None:
            continue
        candidate_id = id(candidate)
        if candidate_id in seen_ids:
            continue
        seen_ids.add(candidate_id)
        bases.append(candidate)

    return tuple(bases)


MODEL_BASES: tuple[type[Any], ...] = _build_model_bases()


def is_pydantic_model(candidate: object) -> bool:
    """Return whether ``candidate`` is an instance of a supported Pydantic model.

    Both Pydantic v2 ``BaseModel`` (which ``pydantic_settings.BaseSettings``
    derives from) and legacy ``pydantic.v1.BaseModel`` are recognized when
    installed. Without Pydantic this returns ``False`` for every candidate.

    Args:
        candidate: Object to test.

    """
    if is_runtime_class(candidate):
        return False
    return isinstance(candidate, MODEL_BASES)


def model_to_mapping(model: Any) -> Mapping[str, Any]:
    """Dump a Pydantic model into a plain configuration mapping.

    Nested models are dumped recursively by Pydantic itself. Field names, not
    aliases, become configuration keys so they line up with setter names.

    Args:
        model: Pydantic v2 or v1 model instance.

    Returns:
        A new ``dict`` of field values.

    """
    model_dump = getattr(model, "model_dump", None)
    if callable(model_dump):
        return model_dump()
    return model.dict()


__all__ = [
    "MODEL_BASES",
    "is_pydantic_model",
    "model_to_mapping",
]
