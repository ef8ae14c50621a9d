"""Host-side capabilities consumed by the settings tree.

The admin host owns the field-kind registry, the set of installed modules
and the per-request render context. This module provides in-process
versions of those for the API and CLI.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from .enums import FieldKind
from .errors import UnknownFieldKindError
from .fields import FieldDescriptor, FieldGroup


class FieldKindRegistry:
    """Maps field kinds to the descriptor classes that implement them."""

    def __init__(self, kinds: Mapping[str, type[FieldDescriptor]] | None = None):
        self._kinds: dict[str, type[FieldDescriptor]] = dict(kinds or {})

    def register(self, kind: str, descriptor_cls: type[FieldDescriptor]) -> None:
        self._kinds[getattr(kind, "value", kind)] = descriptor_cls

    def resolve(self, kind: str) -> type[FieldDescriptor]:
        try:
            return self._kinds[kind]
        except KeyError:
            raise UnknownFieldKindError(kind) from None

    def __contains__(self, kind: object) -> bool:
        return getattr(kind, "value", kind) in self._kinds

    @property
    def kinds(self) -> list[str]:
        return sorted(self._kinds)


def default_field_kinds() -> FieldKindRegistry:
    registry = FieldKindRegistry()
    for kind in (FieldKind.WRAPPER, FieldKind.FIELDSET):
        registry.register(kind, FieldGroup)
    for kind in (FieldKind.RADIOS, FieldKind.CHECKBOX, FieldKind.TEXT, FieldKind.MARKUP):
        registry.register(kind, FieldDescriptor)
    return registry


class InstalledModules:
    """Answers whether a named module is installed on the host."""

    def __init__(self, names: Iterable[str] = ()):
        self._names = frozenset(names)

    def __call__(self, name: str) -> bool:
        return name in self._names


class RenderContext(BaseModel):
    """Per-request page state the settings tree publishes to the host."""

    scripts: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)
    js_config: dict[str, Any] = Field(default_factory=dict)

    def add_script(self, url: str) -> None:
        if url not in self.scripts:
            self.scripts.append(url)

    def add_style(self, url: str) -> None:
        if url not in self.styles:
            self.styles.append(url)

    def js(self, name: str, value: Any) -> None:
        self.js_config[name] = value
