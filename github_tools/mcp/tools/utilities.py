"""Self-contained utility tools: arithmetic and the mocked URL/weather services."""

from __future__ import annotations

import random
import string
from typing import Literal, Union

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from ...core.config import get_settings
from ...core.exceptions import DomainError
from ...core.types import ToolResult
from ..registry import registry
from .utils import format_number

Number = Union[StrictInt, StrictFloat]

TOKEN_ALPHABET = string.ascii_lowercase + string.digits
TOKEN_LENGTH = 6
WEATHER_CONDITIONS = ("Sunny", "Cloudy", "Rainy", "Windy")

_URL = TypeAdapter(AnyUrl)


class CalculatorRequest(BaseModel):
    operation: Literal["add", "subtract", "multiply", "divide"]
    a: Number
    b: Number


@registry.tool("calculator", CalculatorRequest)
def calculator(query: CalculatorRequest) -> ToolResult:
    """Perform basic arithmetic: add, subtract, multiply or divide `a` by `b`."""

    a, b = query.a, query.b
    if query.operation == "add":
        result = a + b
    elif query.operation == "subtract":
        result = a - b
    elif query.operation == "multiply":
        result = a * b
    else:
        if b == 0:
            raise DomainError("Division by zero")
        result = a / b

    return ToolResult.text(
        f"{format_number(a)} {query.operation} {format_number(b)} = {format_number(result)}"
    )


class ShortenUrlRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(..., description="Absolute URL to shorten")
    custom_alias: str | None = Field(
        None,
        alias="customAlias",
        min_length=3,
        max_length=20,
        description="Optional alias used verbatim as the short path",
    )

    @field_validator("url")
    @classmethod
    def ensure_valid_url(cls, value: str) -> str:
        try:
            _URL.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"invalid URL: {exc.errors()[0]['msg']}") from exc
        return value


def random_token(length: int = TOKEN_LENGTH) -> str:
    return "".join(random.choices(TOKEN_ALPHABET, k=length))


@registry.tool("shorten_url", ShortenUrlRequest)
def shorten_url(query: ShortenUrlRequest) -> ToolResult:
    """
    Create a mock short URL. Nothing is stored; without `customAlias` a random
    6-character token is used.
    """

    base = get_settings().short_url_base.rstrip("/")
    short_url = f"{base}/{query.custom_alias or random_token()}"
    return ToolResult.text(f"Original URL: {query.url}\nShortened URL: {short_url}")


class WeatherRequest(BaseModel):
    city: str
    country: str = Field(..., min_length=2, max_length=2, description="2-letter country code")


@registry.tool("weather_lookup", WeatherRequest)
def weather_lookup(query: WeatherRequest) -> ToolResult:
    """Return mock weather readings for a city. Values are random, not real data."""

    temperature = random.randint(10, 39)
    condition = random.choice(WEATHER_CONDITIONS)
    humidity = random.randint(30, 79)

    return ToolResult.text(
        f"Weather in {query.city}, {query.country}:\n"
        f"Temperature: {temperature}°C\n"
        f"Condition: {condition}\n"
        f"Humidity: {humidity}%"
    )
