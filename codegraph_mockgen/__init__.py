"""
CodeGraph Mockgen

Generates stub implementations ("mocks") of Go interfaces from source text:
the interface is located with tree-sitter, each method signature normalized,
and a struct returning canned zero values rendered from a template.

Used by:
- `mockgen` CLI (batch generation into a mocks directory)
- Mockgen HTTP API (single interface per request)
"""

__version__ = "0.1.0"

from .common.exceptions import (
    AmbiguousInputError,
    FormatterError,
    InterfaceNotFoundError,
    IOFailure,
    MethodNotFoundError,
    MockgenError,
    NotFoundError,
    RenderError,
    UsageError,
)
from .mocker import Mocker
from .models import InterfaceDescriptor, MethodDescriptor
from .service import BatchReport, MockService

__all__ = [
    "AmbiguousInputError",
    "BatchReport",
    "FormatterError",
    "IOFailure",
    "InterfaceDescriptor",
    "InterfaceNotFoundError",
    "MethodDescriptor",
    "MethodNotFoundError",
    "MockService",
    "Mocker",
    "MockgenError",
    "NotFoundError",
    "RenderError",
    "UsageError",
]
