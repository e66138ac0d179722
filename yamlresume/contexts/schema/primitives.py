"""
Primitive field rules.

A Rule validates one field value and knows how to describe itself for the
exported JSON Schema. Rules are built by small constructor functions that
take a human readable field name and bounds, and every constructor produces
the same family of messages:

- "{name} is required." when a required value is absent (missing or null)
- "{name} should be {min} characters or more." / "... or less." for bounds
- "{prefix} option is invalid, it must be one of the following options: ..."

An absent value is never reported as a bounds or format violation.
"""

import re
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from dateutil import parser as date_parser
from pydantic import (
    AnyUrl,
    BeforeValidator,
    EmailStr,
    Field,
    StrictBool,
    TypeAdapter,
    ValidationError,
)
from pydantic.fields import FieldInfo
from pydantic_core import PydanticCustomError
from typing_extensions import Annotated

from yamlresume.contexts.schema.options import (
    COUNTRY_OPTIONS,
    DEGREE_OPTIONS,
    FLUENCY_OPTIONS,
    LANGUAGE_OPTIONS,
    LEVEL_OPTIONS,
    NETWORK_OPTIONS,
)

PHONE_PATTERN = re.compile(r"[+]?[(]?[0-9\s-]{1,15}[)]?[0-9\s-]{1,15}")
MARGIN_PATTERN = re.compile(r"\d+(\.\d+)?(cm|pt|in)")

# A date has to name its year, dateutil would otherwise take it from DEFAULT_DATE
YEAR_PATTERN = re.compile(r"\d{4}")

_URL_ADAPTER = TypeAdapter(AnyUrl)
_EMAIL_ADAPTER = TypeAdapter(EmailStr)

# Fills components a partial date leaves out ("Jul 2025" has no day)
DEFAULT_DATE = datetime(2000, 1, 1)

Check = Callable[[Any], Any]


class Rule:
    """
    Validation rule for a single field.

    Attributes:
        name: Field name used in messages (e.g., "name", "top margin")
        value_type: Python type of a present value (str, bool, a model, a list)
        check: Callable validating a present value, raising PydanticCustomError
        required: Whether an absent value is a violation
        title: JSON Schema title
        description: JSON Schema description
        examples: JSON Schema examples
        schema_extra: Extra JSON Schema keywords (minLength, enum, pattern, ...)
    """

    def __init__(
        self,
        name: str,
        value_type: Any = str,
        check: Optional[Check] = None,
        *,
        title: str,
        description: str,
        examples: Sequence[Any] = (),
        required: bool = True,
        schema_extra: Optional[Dict[str, Any]] = None,
    ):
        self.name = name
        self.value_type = value_type
        self.check = check
        self.required = required
        self.title = title
        self.description = description
        self.examples = list(examples)
        self.schema_extra = dict(schema_extra or {})
        self._adapter: Optional[TypeAdapter] = None

    def __repr__(self) -> str:
        flag = "required" if self.required else "optional"
        return f"Rule({self.name!r}, {flag})"

    def optional(self) -> "Rule":
        """Return a copy of this rule that accepts an absent value."""
        if not self.required:
            return self

        return Rule(
            self.name,
            self.value_type,
            self.check,
            title=f"[optional] {self.title}",
            description=f"{self.description.rstrip('.')} or `null`.",
            examples=self.examples,
            required=False,
            schema_extra=self.schema_extra,
        )

    def validate(self, value: Any) -> Any:
        if value is None:
            if self.required:
                raise PydanticCustomError("required", f"{self.name} is required.")
            return None

        if self.check is None:
            return value

        return self.check(value)

    def annotation(self) -> Any:
        """Build the Annotated type carrying the validator and the schema metadata."""
        field_kwargs: Dict[str, Any] = {"title": self.title, "description": self.description}
        if self.examples:
            field_kwargs["examples"] = list(self.examples)
        if self.required:
            field_kwargs["json_schema_extra"] = non_null_schema(self.schema_extra)
        elif self.schema_extra:
            field_kwargs["json_schema_extra"] = dict(self.schema_extra)

        return Annotated[
            Optional[self.value_type], BeforeValidator(self.validate), Field(**field_kwargs)
        ]

    def field(self) -> Tuple[Any, FieldInfo]:
        """Field definition tuple accepted by pydantic.create_model."""
        # validate_default makes an absent required field reach the validator
        return (self.annotation(), Field(default=None, validate_default=self.required))

    def parse(self, value: Any = None) -> Any:
        """
        Validate a standalone value against this rule.

        Raises:
            pydantic.ValidationError: If the value violates the rule
        """
        if self._adapter is None:
            self._adapter = TypeAdapter(self.annotation())
        return self._adapter.validate_python(value)

    def messages(self, value: Any = None) -> List[str]:
        """Return the violation messages for a value (empty when valid)."""
        try:
            self.parse(value)
        except ValidationError as e:
            return [error["msg"] for error in e.errors()]
        return []


# Checks


def length_check(name: str, min_length: int, max_length: int) -> Check:
    def check(value: Any) -> Any:
        # Non-strings fall through to pydantic's own type error
        if isinstance(value, str):
            if len(value) < min_length:
                raise PydanticCustomError(
                    "too_short", f"{name} should be {min_length} characters or more."
                )
            if len(value) > max_length:
                raise PydanticCustomError(
                    "too_long", f"{name} should be {max_length} characters or less."
                )
        return value

    return check


def option_check(prefix: str, options: Sequence[str]) -> Check:
    allowed = ", ".join(f'"{option}"' for option in options)

    def check(value: Any) -> Any:
        if value not in options:
            raise PydanticCustomError(
                "invalid_option",
                f"{prefix} option is invalid, it must be one of the following options: {allowed}",
            )
        return value

    return check


def non_null_schema(extra: Dict[str, Any]) -> Callable[[Dict[str, Any]], None]:
    """
    JSON Schema hook for a required field.

    The model gives required fields a None default so their rule can report
    "... is required.", which would otherwise leak into the schema as a null
    branch and a `"default": null`. The hook drops both and adds `extra`.
    """

    def update(schema: Dict[str, Any]) -> None:
        schema.pop("default", None)
        if "anyOf" in schema:
            branches = [branch for branch in schema.pop("anyOf") if branch != {"type": "null"}]
            if len(branches) == 1:
                schema.update(branches[0])
            else:
                schema["anyOf"] = branches
        schema.update(extra)

    return update


def is_parseable_date(value: str) -> bool:
    if not YEAR_PATTERN.search(value):
        return False
    try:
        date_parser.parse(value, default=DEFAULT_DATE)
    except (ValueError, OverflowError):
        return False
    return True


# Constructors


def sized_string(
    name: str,
    min_length: int,
    max_length: int,
    title: Optional[str] = None,
    description: Optional[str] = None,
    examples: Sequence[str] = (),
) -> Rule:
    """
    String rule with inclusive length bounds.

    Args:
        name: Field name used in messages
        min_length: Minimum number of characters
        max_length: Maximum number of characters
        title: JSON Schema title (defaults to the capitalized name)
        description: JSON Schema description
        examples: JSON Schema examples

    Returns:
        Required Rule; call .optional() for an optional field

    Example:
        >>> sized_string("name", 2, 128).messages("J")
        ['name should be 2 characters or more.']
    """
    return Rule(
        name,
        str,
        length_check(name, min_length, max_length),
        title=title or name.capitalize(),
        description=description
        or f"The {name}, between {min_length} and {max_length} characters.",
        examples=examples,
        schema_extra={"minLength": min_length, "maxLength": max_length},
    )


def option(
    prefix: str,
    options: Sequence[str],
    title: Optional[str] = None,
    description: Optional[str] = None,
) -> Rule:
    """Enumerated option rule; the message lists every allowed option."""
    return Rule(
        prefix,
        str,
        option_check(prefix, options),
        title=title or prefix.capitalize(),
        description=description or f"The {prefix}, one of the predefined options.",
        examples=list(options[:2]),
        schema_extra={"enum": list(options)},
    )


def date(name: str = "date") -> Rule:
    """
    Calendar date rule: between 4 and 32 characters and parseable.

    Example:
        >>> date("date").parse("2025-01-01")
        '2025-01-01'
    """

    def check(value: Any) -> Any:
        if isinstance(value, str):
            if not 4 <= len(value) <= 32 or not is_parseable_date(value):
                raise PydanticCustomError("invalid", f"{name} is invalid.")
        return value

    return Rule(
        name,
        str,
        check,
        title=name[0].upper() + name[1:],
        description="A date string that can be parsed, e.g. ISO 8601 or a month and a year.",
        examples=["2025-01-01", "Jul 2025", "July 3, 2025"],
        schema_extra={"minLength": 4, "maxLength": 32},
    )


def email() -> Rule:
    def check(value: Any) -> Any:
        if isinstance(value, str):
            try:
                _EMAIL_ADAPTER.validate_python(value)
            except ValidationError:
                raise PydanticCustomError("invalid", "email is invalid.") from None
        return value

    return Rule(
        "email",
        str,
        check,
        title="Email",
        description="An email address.",
        examples=["hi@ppresume.com", "first.last@example.org"],
        schema_extra={"format": "email"},
    )


def url() -> Rule:
    def check(value: Any) -> Any:
        if isinstance(value, str):
            if len(value) > 256:
                raise PydanticCustomError("too_long", "URL should be 256 characters or less.")
            try:
                _URL_ADAPTER.validate_python(value)
            except ValidationError:
                raise PydanticCustomError("invalid", "URL is invalid.") from None
        return value

    return Rule(
        "url",
        str,
        check,
        title="URL",
        description="A URL including its scheme, up to 256 characters.",
        examples=["https://yamlresume.dev", "https://github.com/yamlresume"],
        schema_extra={"format": "uri", "maxLength": 256},
    )


def phone() -> Rule:
    def check(value: Any) -> Any:
        if isinstance(value, str) and not PHONE_PATTERN.fullmatch(value):
            raise PydanticCustomError("invalid", "phone number may be invalid.")
        return value

    return Rule(
        "phone",
        str,
        check,
        title="Phone",
        description="A phone number with an optional leading + and country code.",
        examples=["+1 555-123-4567", "+(86) 158123461234"],
        schema_extra={"pattern": r"^[+]?[(]?[0-9\s-]{1,15}[)]?[0-9\s-]{1,15}$"},
    )


def margin_size(position: str) -> Rule:
    """
    Page margin rule, a positive number followed by cm, pt or in.

    Example:
        >>> margin_size("top").messages("-1cm")[0].startswith("invalid top margin size")
        True
    """
    message = (
        f"invalid {position} margin size, {position} margin must be a positive number "
        'followed by "cm", "pt" or "in", eg: "2.5cm", "1in", "72pt"'
    )

    def check(value: Any) -> Any:
        if isinstance(value, str):
            if len(value) > 32:
                raise PydanticCustomError(
                    "too_long", f"{position} margin should be 32 characters or less."
                )
            if not MARGIN_PATTERN.fullmatch(value):
                raise PydanticCustomError("invalid", message)
        return value

    return Rule(
        f"{position} margin",
        str,
        check,
        title=f"{position.capitalize()} Margin",
        description=f"The {position} page margin, a number followed by cm, pt or in.",
        examples=["2.5cm", "1in", "72pt"],
        schema_extra={"pattern": r"^\d+(\.\d+)?(cm|pt|in)$"},
    )


def boolean(name: str, title: str, description: str) -> Rule:
    return Rule(name, StrictBool, title=title, description=description, examples=[True, False])


def list_of(
    name: str,
    item: Rule,
    title: str,
    description: str,
    min_items: int = 0,
    examples: Sequence[Any] = (),
) -> Rule:
    """
    List rule whose items are validated by another rule.

    Without explicit examples the list is exemplified by a single item built
    from the item rule's first example.
    """
    if not examples and item.examples:
        examples = [[item.examples[0]]]

    def check(value: Any) -> Any:
        if isinstance(value, list) and len(value) < min_items:
            raise PydanticCustomError(
                "too_short", f"{name} should have {min_items} item or more."
            )
        return value

    extra = {"minItems": min_items} if min_items else {}
    return Rule(
        name,
        List[item.annotation()],
        check,
        title=title,
        description=description,
        examples=examples,
        schema_extra=extra,
    )


def object_of(
    name: str, model: Any, title: str, description: str, examples: Sequence[Any] = ()
) -> Rule:
    """
    Rule for a nested object validated by a pydantic model.

    Examples default to the ones object_schema derived for the model.
    """
    if not examples:
        examples = (model.model_config.get("json_schema_extra") or {}).get("examples", ())
    return Rule(name, model, title=title, description=description, examples=examples)


# Named primitives shared by section schemas


def name(field_name: str = "name") -> Rule:
    return sized_string(
        field_name,
        2,
        128,
        title="Name",
        description="A name, between 2 and 128 characters.",
        examples=["Andy Dufresne", "Xiao Hanyu"],
    )


def organization(field_name: str = "organization") -> Rule:
    return sized_string(
        field_name,
        2,
        128,
        title="Organization",
        description="The name of an organization, between 2 and 128 characters.",
        examples=["Mars Inc.", "Shawshank Prison"],
    )


def position() -> Rule:
    return sized_string(
        "position",
        2,
        64,
        title="Position",
        description="A job title or role, between 2 and 64 characters.",
        examples=["Software Engineer", "Volunteer"],
    )


def summary() -> Rule:
    return sized_string(
        "summary",
        16,
        1024,
        title="Summary",
        description="A summary in a subset of Markdown, between 16 and 1024 characters.",
        examples=["Experienced engineer working on **distributed systems**."],
    )


def headline() -> Rule:
    return sized_string(
        "headline",
        2,
        128,
        title="Headline",
        description="A one-line professional headline, between 2 and 128 characters.",
        examples=["Senior Software Engineer"],
    )


def keywords() -> Rule:
    keyword = sized_string(
        "keyword",
        1,
        32,
        title="Keyword",
        description="A single keyword, between 1 and 32 characters.",
        examples=["Python", "LaTeX"],
    )
    return list_of(
        "keywords",
        keyword,
        title="Keywords",
        description="A list of keywords.",
        examples=[["Python", "LaTeX"]],
    )


def degree() -> Rule:
    return option("degree", DEGREE_OPTIONS, title="Degree", description="The degree earned.")


def fluency() -> Rule:
    return option("fluency", FLUENCY_OPTIONS, title="Fluency", description="Language fluency.")


def language() -> Rule:
    return option("language", LANGUAGE_OPTIONS, title="Language", description="A spoken language.")


def level() -> Rule:
    return option("level", LEVEL_OPTIONS, title="Level", description="Skill proficiency level.")


def network() -> Rule:
    return option("network", NETWORK_OPTIONS, title="Network", description="A social network.")


def country() -> Rule:
    return option("country", COUNTRY_OPTIONS, title="Country", description="A country name.")
