"""Shared schema building blocks: sanitized text, URIs and body parsing."""

from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from travelrec.domain.exceptions import ValidationError

_MARKUP = str.maketrans({"<": "&lt;", ">": "&gt;"})
_URL = TypeAdapter(AnyUrl)

ModelT = TypeVar("ModelT", bound=BaseModel)


def escape_markup(value: str) -> str:
    """Neutralize HTML tags so stored text cannot inject active markup."""
    return value.translate(_MARKUP)


def _check_uri(value: str) -> str:
    if value:
        try:
            _URL.validate_python(value)
        except PydanticValidationError:
            raise ValueError("must be a valid URI") from None
    return value


def _at_most(limit: int | None):
    def check(value: str) -> str:
        if limit is not None and len(value) > limit:
            raise ValueError(f"must be at most {limit} characters")
        return value

    return check


def Text(min_length: int = 0, max_length: int | None = None) -> Any:
    """String with length bounds; the upper bound applies to the escaped value."""
    return Annotated[
        str,
        StringConstraints(min_length=min_length),
        AfterValidator(escape_markup),
        AfterValidator(_at_most(max_length)),
    ]


# empty string allowed
Uri = Annotated[str, AfterValidator(_check_uri), AfterValidator(escape_markup)]
RequiredUri = Annotated[
    str, StringConstraints(min_length=1), AfterValidator(_check_uri), AfterValidator(escape_markup)
]


class RequestSchema(BaseModel):
    """Base for request bodies: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def parse_body(model: type[ModelT], body: object) -> ModelT:
    """Validate a JSON body, raising the first problem as a domain ValidationError."""
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(body)
    except PydanticValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(p) for p in first["loc"])
        raise ValidationError(f"{loc}: {first['msg']}" if loc else first["msg"]) from None
