"""
Descriptor models for mock synthesis.

Created fresh for every synthesis, fully populated before rendering and
read-only afterwards.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from codegraph_mockgen.common.text import abbreviate


@dataclass(frozen=True, slots=True)
class RawSignature:
    """
    One method line split into its three textual parts.

    Attributes:
        name: Method identifier
        params: Text between the parameter parentheses (may be empty)
        returns: Return clause after the parameter list (may be empty)
    """

    name: str
    params: str
    returns: str


@dataclass(frozen=True, slots=True)
class MethodDescriptor:
    """
    Canonical method description consumed by the stub template.

    Attributes:
        name: Method identifier
        params: Comma-separated `name type` pairs, possibly empty
        returns: Single bare type, parenthesized type list, or empty
    """

    name: str
    params: str
    returns: str


@dataclass(frozen=True, slots=True)
class InterfaceDescriptor:
    """
    Interface to stub.

    Attributes:
        name: Interface identifier
        abbreviation: Receiver identifier derived from the upper-case letters of name
        methods: Methods in source declaration order
    """

    name: str
    abbreviation: str
    methods: tuple[MethodDescriptor, ...]

    @classmethod
    def create(cls, name: str, methods: Iterable[MethodDescriptor]) -> "InterfaceDescriptor":
        """Build a descriptor, deriving the abbreviation from the name."""
        return cls(name=name, abbreviation=abbreviate(name), methods=tuple(methods))

    @property
    def mock_name(self) -> str:
        return f"{self.name}Mock"

    @property
    def receiver(self) -> str:
        """Receiver identifier of the mock methods; `m` when the name has no upper-case letter."""
        return self.abbreviation or "m"
