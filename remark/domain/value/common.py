"""Base classes for value objects."""

from typing import ClassVar, Generic, Self, TypeVar

import pydantic
from pydantic import ConfigDict, RootModel

from remark.domain.error import ValidationError


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive itself. ``parse`` is the entry point for untrusted input:
    it reports failures as a domain ``ValidationError`` carrying
    ``error_code`` instead of a pydantic error.
    """

    model_config = ConfigDict(frozen=True)

    error_code: ClassVar[str] = "invalid_request"

    @classmethod
    def parse(cls, raw: T) -> Self:
        """Validate untrusted input.

        Raises:
            ValidationError: With the class's error code
        """
        try:
            return cls(raw)
        except pydantic.ValidationError:
            raise ValidationError(cls.error_code)

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
