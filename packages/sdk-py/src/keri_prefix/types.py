from typing import Protocol, runtime_checkable


@runtime_checkable
class Prefix(Protocol):
    """Capability shared by every prefix kind."""

    def derivation_code(self) -> str:
        ...

    def derivative(self) -> bytes:
        ...

    def to_str(self) -> str:
        ...
