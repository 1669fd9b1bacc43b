"""
Injection models — descriptors for the fixed tables and engine results.

Descriptors are frozen dataclasses: they live in module-level constant
tables and are never mutated. The report is a pydantic model because it
crosses the HTTP / CLI boundary as JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

from pydantic import BaseModel, Field


class Outcome(StrEnum):
    """What an ``ensure_*`` call did to its target file."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class HandlerDescriptor:
    """Handler exports found in one template file."""

    file_key: str
    export_names: tuple[str, ...]


@dataclass(frozen=True)
class InlineHandlerDescriptor:
    """A handler that must be defined inside the generated code file.

    The template exports a client component (``import_name``); the
    handler object wrapping it is written into code.tsx verbatim.
    """

    file_key: str
    import_name: str          # e.g. InlineFold
    handler_name: str         # entry in the handlers array, e.g. fold
    handler_definition: str   # full ``const fold: AnnotationHandler = {...}``


@dataclass(frozen=True)
class WrapperDescriptor:
    """A decorator component that wraps the ``<Pre />`` return."""

    file_key: str
    marker: str                       # presence means already applied
    wrap_return: Callable[[str], str]
    import_name: str | None = None

    @property
    def import_source(self) -> str:
        return f"./{self.file_key}"


@dataclass(frozen=True)
class MdxComponentDescriptor:
    """One entry of the object returned by ``useMDXComponents``."""

    file_key: str
    component_name: str
    register_as: str

    @property
    def entry(self) -> str:
        if self.register_as == self.component_name:
            return self.component_name
        return f"{self.register_as}: {self.component_name}"


@dataclass(frozen=True)
class MutationResult:
    """New text of a generated file plus what happened to it.

    ``text`` is None only when the input was absent and nothing was
    created.
    """

    text: str | None
    outcome: Outcome

    @property
    def changed(self) -> bool:
        return self.outcome != Outcome.UNCHANGED


class InjectionReport(BaseModel):
    """Result of one injection request."""

    injected: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)

    code_component: Outcome = Outcome.UNCHANGED
    code_wrappers: Outcome = Outcome.UNCHANGED
    mdx_registration: Outcome = Outcome.UNCHANGED
    hover_styles: bool = False

    errors: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
