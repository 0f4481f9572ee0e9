
from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar


T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Destination(Protocol[T_contra]):
    """Anything a parsed option value can be written into."""

    def assign(self, value: T_contra) -> None: ...


@dataclass
class Box(Generic[T]):
    """A standalone variable owned by the caller."""

    value: Optional[T] = None

    def assign(self, value: T) -> None:
        self.value = value


@dataclass(frozen=True)
class Field(Generic[T]):
    """The attribute ``name`` of ``owner``, typically a field of SimParams."""

    owner: object
    name: str

    def assign(self, value: T) -> None:
        setattr(self.owner, self.name, value)
