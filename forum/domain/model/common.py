"""Base model for all forum records."""

from typing import Any, Callable, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from forum.domain.error import AlreadyExistsError, ValidationError

T = TypeVar("T")


class DomainModel(BaseModel):
    """Base class for all domain records.

    Records are mutable, but every assignment goes through the same field
    validators as construction. Fields are validated in declaration order and
    the first rejection aborts construction. Every field defaults to None and
    validates its default, so an omitted value is rejected by the field's own
    rule rather than by pydantic.
    """

    model_config = ConfigDict(validate_assignment=True)

    # Fields that make up the storage identity; frozen once persisted
    identity_fields: ClassVar[tuple[str, ...]] = ()

    @property
    def is_persisted(self) -> bool:
        """Whether storage has assigned this record its identity."""
        return all(value is not None for value in self.identity)

    @property
    def identity(self) -> tuple[Any, ...]:
        """Current values of the identity fields."""
        return tuple(getattr(self, name) for name in self.identity_fields)

    @classmethod
    def _normalize(cls, rule: Callable[..., T], raw: Any, *args: Any, **kwargs: Any) -> T:
        """Apply a validation rule, tagging rejections with the record name."""
        try:
            return rule(raw, *args, **kwargs)
        except ValidationError as e:
            e.entity = cls.__name__
            raise

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.identity_fields and self.is_persisted:
            # Compare normalized values: "3" and 3 are the same id
            candidate = self.model_copy()
            BaseModel.__setattr__(candidate, name, value)
            if getattr(candidate, name) != getattr(self, name):
                raise AlreadyExistsError(type(self).__name__, str(self.identity))
        super().__setattr__(name, value)
