"""Data records shared by the reader, collector and renderer"""

from dataclasses import dataclass

from .validation import NUM_PORT, validate_port


@dataclass(frozen=True)
class ReadResult:
    text: str
    length: int
    overflow: int = 0


@dataclass(frozen=True)
class Endpoint:
    """
    One side of the proxy: a host name plus a port.

    name_length mirrors the number of characters the reader actually stored,
    which is smaller than the typed input when it was truncated.
    """

    name: str
    name_length: int
    port: int

    def __post_init__(self):
        if not self.name:
            raise ValueError("Endpoint name cannot be empty")
        if self.name_length != len(self.name):
            raise ValueError("Endpoint name_length does not match name")
        if not validate_port(self.port):
            raise ValueError(f"Endpoint port must be between 1 and {NUM_PORT}")

    @property
    def address(self) -> str:
        return f"{self.name}:{self.port}"
