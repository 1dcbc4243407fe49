"""JSON Patch application for partial updates.

Implements the add / remove / replace / move / copy / test operations of a
JSON Patch document against a DTO that has been dumped to a plain dict.

The document shape is fixed: object members are never created or deleted,
only assigned.  ``remove`` on a member resets it to null, while list
elements can be inserted and removed freely.  Path segments match object
members case-insensitively.

Application is optimistic.  Every operation is attempted in order against
the result of the previous successful one.  A failing operation records an
error and leaves the document untouched, and later operations still run.
The caller inspects the accumulated errors once at the end.

Pipeline:
    apply_patch_to_model
        → apply_patch          (document edits, per-operation errors)
        → model_validate       (type checks against the DTO class)
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from src.domain.models.enums import PatchOp

M = TypeVar("M", bound=BaseModel)


class PatchOperation(BaseModel):
    """A single JSON Patch operation as it arrives on the wire."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    op: PatchOp
    path: str
    value: Any = None
    from_: str | None = Field(default=None, alias="from")


class _PatchFailure(Exception):
    pass


def _not_found(pointer: str) -> _PatchFailure:
    return _PatchFailure(f"The target location specified by path '{pointer}' was not found.")


def _tokens(pointer: str) -> list[str]:
    if not pointer.startswith("/"):
        raise _PatchFailure(f"'{pointer}' is not a valid JSON pointer.")
    return [t.replace("~1", "/").replace("~0", "~") for t in pointer[1:].split("/")]


def _member(mapping: dict[str, Any], token: str, pointer: str) -> str:
    if token in mapping:
        return token
    folded = token.lower()
    for key in mapping:
        if key.lower() == folded:
            return key
    raise _not_found(pointer)


def _index(sequence: list[Any], token: str, pointer: str, *, append: bool = False) -> int:
    if append and token == "-":
        return len(sequence)
    if not (token.isascii() and token.isdigit()) or (len(token) > 1 and token[0] == "0"):
        raise _not_found(pointer)
    index = int(token)
    upper = len(sequence) if append else len(sequence) - 1
    if index > upper:
        raise _not_found(pointer)
    return index


def _child(container: Any, token: str, pointer: str) -> Any:
    if isinstance(container, dict):
        return container[_member(container, token, pointer)]
    if isinstance(container, list):
        return container[_index(container, token, pointer)]
    raise _not_found(pointer)


def _parent(document: dict[str, Any], pointer: str) -> tuple[Any, str]:
    tokens = _tokens(pointer)
    target: Any = document
    for token in tokens[:-1]:
        target = _child(target, token, pointer)
    if not isinstance(target, (dict, list)):
        raise _not_found(pointer)
    return target, tokens[-1]


def _get(document: dict[str, Any], pointer: str) -> Any:
    container, token = _parent(document, pointer)
    return _child(container, token, pointer)


def _add(document: dict[str, Any], pointer: str, value: Any) -> None:
    container, token = _parent(document, pointer)
    if isinstance(container, dict):
        container[_member(container, token, pointer)] = value
    else:
        container.insert(_index(container, token, pointer, append=True), value)


def _replace(document: dict[str, Any], pointer: str, value: Any) -> None:
    container, token = _parent(document, pointer)
    if isinstance(container, dict):
        container[_member(container, token, pointer)] = value
    else:
        container[_index(container, token, pointer)] = value


def _remove(document: dict[str, Any], pointer: str) -> Any:
    container, token = _parent(document, pointer)
    if isinstance(container, dict):
        key = _member(container, token, pointer)
        removed = container[key]
        container[key] = None
        return removed
    return container.pop(_index(container, token, pointer))


def _value(operation: PatchOperation) -> Any:
    if "value" not in operation.model_fields_set:
        raise _PatchFailure(f"The '{operation.op.value}' operation at path '{operation.path}' requires 'value'.")
    return operation.value


def _json_equal(left: Any, right: Any) -> bool:
    """Equality under JSON types: booleans are not numbers, 1 and 1.0 are equal."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(_json_equal(left[k], right[k]) for k in left)
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(map(_json_equal, left, right))
    return type(left) is type(right) and left == right


def _source(operation: PatchOperation) -> str:
    if operation.from_ is None:
        raise _PatchFailure(f"The '{operation.op.value}' operation at path '{operation.path}' requires 'from'.")
    return operation.from_


def _apply_one(document: dict[str, Any], operation: PatchOperation) -> None:
    op, path = operation.op, operation.path
    if op is PatchOp.ADD:
        _add(document, path, copy.deepcopy(_value(operation)))
    elif op is PatchOp.REPLACE:
        _replace(document, path, copy.deepcopy(_value(operation)))
    elif op is PatchOp.REMOVE:
        _remove(document, path)
    elif op is PatchOp.MOVE:
        value = _remove(document, _source(operation))
        _add(document, path, value)
    elif op is PatchOp.COPY:
        value = copy.deepcopy(_get(document, _source(operation)))
        _add(document, path, value)
    elif op is PatchOp.TEST:
        expected = _value(operation)
        current = _get(document, path)
        if not _json_equal(current, expected):
            raise _PatchFailure(
                f"The current value '{current}' at path '{path}' is not equal "
                f"to the test value '{expected}'."
            )


def apply_patch(
    document: dict[str, Any],
    operations: Sequence[PatchOperation],
) -> tuple[dict[str, Any], list[str]]:
    """Apply operations in order and return (patched copy, error messages).

    The input document is never mutated.  An empty error list means every
    operation applied cleanly.
    """
    current = copy.deepcopy(document)
    errors: list[str] = []
    for operation in operations:
        candidate = copy.deepcopy(current)
        try:
            _apply_one(candidate, operation)
        except _PatchFailure as exc:
            errors.append(str(exc))
            continue
        current = candidate
    return current, errors


def _format_validation_errors(exc: PydanticValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return messages


def apply_patch_to_model(model: M, operations: Sequence[PatchOperation]) -> tuple[M | None, list[str]]:
    """Patch a DTO and re-validate it against its own class.

    Returns (patched model, []) on success, or (None, errors) when any
    operation failed or the patched document no longer validates.
    """
    document = model.model_dump(mode="json", by_alias=True)
    patched, errors = apply_patch(document, operations)
    try:
        result = type(model).model_validate(patched)
    except PydanticValidationError as exc:
        errors.extend(_format_validation_errors(exc))
        result = None
    if errors:
        return None, errors
    return result, []
