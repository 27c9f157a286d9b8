"""Domain models (Pydantic v2).

Each exercise produces one small result model. The CLI renders them as text,
or dumps them as JSON with ``--json``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

U32_MAX = 2**32 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


class TemperatureConversion(BaseModel):
    """One Fahrenheit to Celsius conversion."""

    model_config = ConfigDict(frozen=True)

    fahrenheit: int = Field(
        ...,
        ge=I32_MIN,
        le=I32_MAX,
        description="Input temperature in degrees Fahrenheit.",
    )
    celsius: int = Field(
        ...,
        description="Converted temperature, truncated toward zero.",
    )


class FibonacciTerm(BaseModel):
    """The value of the Fibonacci sequence at a given index."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Zero-based sequence index.")
    value: int = Field(..., ge=0, description="fib(index).")


class Rectangle(BaseModel):
    """An immutable rectangle with unsigned 32-bit dimensions.

    ``frozen`` makes instances hashable and rejects attribute assignment.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=0, le=U32_MAX)
    height: int = Field(..., ge=0, le=U32_MAX)


class AreaReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    rectangle: Rectangle
    area: int = Field(..., ge=0, description="width * height in square pixels.")


class Verse(BaseModel):
    """A rendered verse of the carol."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(..., ge=0, le=11, description="Zero-based day index.")
    ordinal: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
