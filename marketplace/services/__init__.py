from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from marketplace.errors import ValidationError


def describe_schema_error(exc: SchemaError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        msg = err["msg"].removeprefix("Value error, ")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def parse_input(schema: type[BaseModel], data):
    """Validate raw input against ``schema``, raising our ValidationError."""
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except SchemaError as exc:
        raise ValidationError(describe_schema_error(exc)) from exc
