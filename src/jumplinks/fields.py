"""Settings field descriptors and the factory that builds them."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, ClassVar, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from .enums import Collapsed, SkipLabel
from .errors import UnknownAttributeError, UnknownFieldKindError

logger = logging.getLogger(__name__)

# A metadata key is one attribute name or a tuple of aliases sharing a value.
MetadataKey = Union[str, tuple[str, ...]]


class FieldDescriptor(BaseModel):
    """One renderable settings element."""

    model_config = ConfigDict(extra="forbid")

    # Set by the factory, never through metadata.
    reserved: ClassVar[frozenset[str]] = frozenset({"kind"})

    kind: str
    name: Optional[str] = None
    id: Optional[str] = None
    label: str = ""
    label2: str = ""
    description: str = ""
    notes: str = ""
    options: dict[str, str] = Field(default_factory=dict)
    value: Any = None
    placeholder: str = ""
    spellcheck: Optional[str] = None
    column_width: Optional[int] = Field(default=None, ge=0, le=100)
    collapsed: Collapsed = Collapsed.NO
    skip_label: SkipLabel = SkipLabel.NO
    autocheck: bool = False

    @classmethod
    def attribute_names(cls) -> frozenset[str]:
        return frozenset(cls.model_fields) - cls.reserved

    @property
    def aliases(self) -> list[str]:
        """Distinct names this element binds to, ``name`` first."""
        names = []
        for alias in (self.name, self.id):
            if alias and alias not in names:
                names.append(alias)
        return names


class FieldGroup(FieldDescriptor):
    """An ordered container of fields and nested groups.

    Children render in insertion order. Groups only grow while being
    composed; nothing is ever removed.
    """

    reserved: ClassVar[frozenset[str]] = frozenset({"kind", "children"})

    children: list[SerializeAsAny[FieldDescriptor]] = Field(default_factory=list)

    def add(self, child: FieldDescriptor) -> FieldDescriptor:
        self.children.append(child)
        return child

    def walk(self) -> Iterator[FieldDescriptor]:
        """Yield every descendant depth-first, in render order."""
        for child in self.children:
            yield child
            if isinstance(child, FieldGroup):
                yield from child.walk()

    def get(self, alias: str) -> Optional[FieldDescriptor]:
        for field in self.walk():
            if alias in field.aliases:
                return field
        return None


class FieldKindResolver(Protocol):
    """Host capability mapping a field kind to its descriptor class.

    ``resolve`` raises ``LookupError`` for kinds the host does not provide.
    """

    def resolve(self, kind: str) -> type[FieldDescriptor]: ...


class FieldDescriptorFactory:
    """Builds descriptors for kinds known to the host's field-kind registry."""

    def __init__(self, resolver: FieldKindResolver):
        self.resolver = resolver

    def build(
        self,
        kind: str,
        metadata: Mapping[MetadataKey, Any] | None = None,
    ) -> FieldDescriptor:
        """Create a descriptor of ``kind`` populated from ``metadata``.

        Args:
            kind: Field kind registered with the host (e.g. "checkbox")
            metadata: Ordered attribute assignments. A tuple key such as
                ``("name", "id")`` assigns the same value to every alias in
                it. When two entries target one attribute the later one wins.

        Returns:
            The populated descriptor

        Raises:
            UnknownFieldKindError: If the host does not register ``kind``
            UnknownAttributeError: If metadata names an attribute the
                descriptor does not have
        """
        kind = getattr(kind, "value", kind)

        try:
            descriptor_cls = self.resolver.resolve(kind)
        except UnknownFieldKindError:
            logger.error(f"Cannot build field of unregistered kind: {kind}")
            raise
        except LookupError as e:
            logger.error(f"Cannot build field of unregistered kind: {kind}")
            raise UnknownFieldKindError(kind) from e

        allowed = descriptor_cls.attribute_names()
        attributes: dict[str, Any] = {}
        for key, value in (metadata or {}).items():
            aliases = (key,) if isinstance(key, str) else tuple(key)
            for alias in aliases:
                if alias not in allowed:
                    raise UnknownAttributeError(kind, alias)
                attributes[alias] = value

        return descriptor_cls(kind=kind, **attributes)
