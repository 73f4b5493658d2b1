from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from libs.result import Error, Result, Return

F = TypeVar("F", bound=BaseModel)


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """
    Flatten pydantic errors into {field: [messages]}

    Errors without a field location are collected under "__all__".
    """
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "__all__"
        message = err["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.setdefault(field, []).append(message)
    return errors


def parse_form(form_cls: Type[F], payload: Optional[Dict[str, Any]]) -> Result[F]:
    """
    Validate a submitted form

    Returns:
        Result with the form, or Error(VALIDATION_FAILED) whose details are field errors
    """
    try:
        return Return.ok(form_cls.model_validate(payload or {}))
    except ValidationError as e:
        return Return.err(
            Error("VALIDATION_FAILED", "Form is invalid", details=field_errors(e))
        )


def variant_of(form_cls: Type[BaseModel]) -> Optional[str]:
    field = form_cls.model_fields.get("kind")
    return field.default if field is not None else None
