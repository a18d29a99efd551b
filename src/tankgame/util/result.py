"""Outcome type shared by rule predicates and conditions."""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, model_validator

E = TypeVar("E")


class Result(BaseModel, Generic[E]):
    """Success with no payload, or failure carrying an error payload.

    Predicates produce ``Result[str]`` (a single message) and conditions
    produce ``Result[list[str]]`` (every failing message, in order).
    """

    model_config = ConfigDict(frozen=True)

    success: bool = True
    payload: Optional[E] = None

    @model_validator(mode="after")
    def check_payload(self) -> "Result[E]":
        if self.success and self.payload is not None:
            raise ValueError("successful result cannot carry an error payload")
        if not self.success and self.payload is None:
            raise ValueError("failed result requires an error payload")
        return self

    @classmethod
    def ok(cls) -> "Result[E]":
        return cls(success=True)

    @classmethod
    def error(cls, payload: E) -> "Result[E]":
        return cls(success=False, payload=payload)

    def is_ok(self) -> bool:
        return self.success

    def is_error(self) -> bool:
        return not self.success

    def get_error(self) -> E:
        """Return the error payload.

        Raises:
            ValueError: If the result is a success
        """
        if self.success:
            raise ValueError("cannot get error of a successful result")
        return self.payload

    def __bool__(self) -> bool:
        return self.success


__all__ = ["Result"]
