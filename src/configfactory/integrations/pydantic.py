from configfactory._internal.integrations.pydantic import (
    MODEL_BASES,
    is_pydantic_model,
    model_to_mapping,
)

__all__ = ["MODEL_BASES", "is_pydantic_model", "model_to_mapping"]
