from __future__ import annotations

import types
from collections.abc import Mapping
from typing import TypeVar, Union, get_args, get_origin

from pydantic import BaseModel

from option_model.model.model import Model

# Typed views over a model: each schema field is resolved through the fallback chain.

SettingsT = TypeVar("SettingsT", bound=BaseModel)


def resolve_settings(model: Model, schema: type[SettingsT]) -> SettingsT:
    # pydantic.ValidationError propagates to the caller on invalid resolved values.
    return schema.model_validate(_collect(model, schema))


def _collect(model: Model, schema: type[BaseModel]) -> dict[str, object]:
    data: dict[str, object] = {}
    for name, info in schema.model_fields.items():
        key = info.alias or name
        nested = _nested_schema(info.annotation)
        if nested is not None:
            sub_model = model.get_model(key)
            # Nothing at any level of the chain: leave the field to its default.
            subtree = sub_model.get([])
            if subtree is None:
                continue
            if not isinstance(subtree, Mapping):
                # Hand non-mapping values to pydantic unchanged so it rejects them.
                data[key] = subtree
                continue
            data[key] = _collect(sub_model, nested)
            continue
        value = model.get(key)
        if value is not None:
            data[key] = value
    return data


def _nested_schema(annotation: object) -> type[BaseModel] | None:
    # Accept Sub, Sub | None and Optional[Sub].
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    if get_origin(annotation) in (Union, types.UnionType):
        for arg in get_args(annotation):
            if isinstance(arg, type) and issubclass(arg, BaseModel):
                return arg
    return None
