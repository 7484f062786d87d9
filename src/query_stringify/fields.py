"""
Field and annotation introspection.

Turns a record into an ordered list of :class:`FieldDescriptor` objects.
Three record shapes are understood:

- dataclass instances, annotated with ``query_field("key")`` (i.e.
  ``field(metadata={"query": "key"})``) or ``Annotated[T, QueryKey("key")]``;
- pydantic models, annotated with ``Annotated[T, QueryKey("key")]`` or
  ``Field(json_schema_extra={"query": "key"})``;
- any class bound to an explicit mapping in a :class:`FieldRegistry`.

A registry binding wins over dataclass/pydantic introspection.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from .exceptions import UnsupportedRecordError
from .kinds import ValueKind, classify

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from pydantic.fields import FieldInfo

logger = logging.getLogger("query_stringify.fields")

DEFAULT_TAG = "query"


@dataclass(frozen=True)
class QueryKey:
    """
    ``Annotated`` marker binding a field to a query-parameter name.

    Usage::

        class Search(BaseModel):
            term: Annotated[str, QueryKey("q")]
    """

    key: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise TypeError(f"query key must be a str, got {type(self.key).__name__}")


def query_field(key: str, *, tag: str = DEFAULT_TAG, **kwargs: Any) -> Any:
    """
    ``dataclasses.field`` with the query key stored in its metadata.

    Any other ``field()`` argument (``default``, ``default_factory``, ...)
    is passed through; an existing ``metadata`` mapping is merged.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[tag] = key
    return dataclasses.field(metadata=metadata, **kwargs)


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of a record: its name, annotation and runtime value."""

    name: str
    key: str | None
    value: Any

    @property
    def kind(self) -> ValueKind:
        return classify(self.value)

    @property
    def annotated(self) -> bool:
        return self.key is not None


class FieldRegistry:
    """
    Explicit field bindings for types without introspectable declarations.

    Each registered type maps attribute names, in output order, to a query
    key (or ``None`` for a deliberately unannotated field). Lookups follow
    the MRO, so subclasses inherit their parent's binding.

    Usage::

        registry = FieldRegistry()
        registry.register(Point, {"x": "lon", "y": "lat", "label": None})

        stringify(Point(1, 2, "home"), registry=registry)  # "lat=2&lon=1"
    """

    def __init__(self) -> None:
        self._bindings: dict[type, tuple[tuple[str, str | None], ...]] = {}

    def register(self, record_type: type, mapping: Mapping[str, str | None]) -> None:
        """Bind *record_type* to *mapping* (``attribute -> key | None``)."""
        self._bindings[record_type] = tuple(mapping.items())
        logger.debug(
            "Registered query fields for %s: %s",
            record_type.__qualname__,
            ", ".join(name for name, _ in self._bindings[record_type]),
        )

    def unregister(self, record_type: type) -> None:
        """Remove the binding for *record_type*, if any."""
        if self._bindings.pop(record_type, None) is not None:
            logger.debug("Unregistered query fields for %s", record_type.__qualname__)

    def get(self, record_type: type) -> tuple[tuple[str, str | None], ...] | None:
        """Return the binding for *record_type* or its nearest base, or ``None``."""
        for klass in record_type.__mro__:
            binding = self._bindings.get(klass)
            if binding is not None:
                return binding
        return None

    def has(self, record_type: type) -> bool:
        return self.get(record_type) is not None


def describe(
    record: Any,
    registry: FieldRegistry | None = None,
    *,
    tag: str = DEFAULT_TAG,
) -> list[FieldDescriptor]:
    """
    Return the field descriptors of *record* in declaration order.

    Raises:
        UnsupportedRecordError: If *record* is not a dataclass instance,
            a pydantic model instance or a registered type.
    """
    if isinstance(record, type):
        raise UnsupportedRecordError(record)

    if registry is not None:
        binding = registry.get(type(record))
        if binding is not None:
            return [
                FieldDescriptor(name, key, getattr(record, name))
                for name, key in binding
            ]

    if isinstance(record, BaseModel):
        return list(_describe_model(record, tag))

    if dataclasses.is_dataclass(record):
        return list(_describe_dataclass(record, tag))

    raise UnsupportedRecordError(record)


def _describe_model(record: BaseModel, tag: str) -> Iterable[FieldDescriptor]:
    for name, info in type(record).model_fields.items():
        key = _model_field_key(info, tag)
        yield FieldDescriptor(name, key, getattr(record, name))


def _model_field_key(info: FieldInfo, tag: str) -> str | None:
    key = _key_from_metadata(info.metadata)
    if key is not None:
        return key
    extra = info.json_schema_extra
    if isinstance(extra, dict):
        value = extra.get(tag)
        if isinstance(value, str):
            return value
    return None


def _describe_dataclass(record: Any, tag: str) -> Iterable[FieldDescriptor]:
    hints = _annotated_hints(type(record))
    for f in dataclasses.fields(record):
        key = f.metadata.get(tag)
        if not isinstance(key, str):
            key = _key_from_hint(hints.get(f.name))
        try:
            value = getattr(record, f.name)
        except AttributeError:
            # init=False field without a default that was never assigned
            logger.debug("Skipping unset field %r", f.name)
            continue
        yield FieldDescriptor(f.name, key, value)


def _annotated_hints(record_type: type) -> dict[str, Any]:
    try:
        return get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError):
        logger.debug(
            "Could not resolve type hints of %s, resolving field by field",
            record_type.__qualname__,
            exc_info=True,
        )
    hints: dict[str, Any] = {}
    for klass in reversed(record_type.__mro__):
        try:
            annotations = inspect.get_annotations(klass)
        except NameError:
            continue
        for name, annotation in annotations.items():
            hints[name] = _resolve_hint(klass, name, annotation)
    return hints


def _resolve_hint(owner: type, name: str, annotation: Any) -> Any:
    """Resolve one annotation in the namespace of the class declaring it."""
    holder = type(
        owner.__name__,
        (),
        {"__annotations__": {name: annotation}, "__module__": owner.__module__},
    )
    try:
        return get_type_hints(
            holder, localns=dict(vars(owner)), include_extras=True
        )[name]
    except (NameError, TypeError):
        logger.debug("Could not resolve type hint of %s.%s", owner.__qualname__, name)
        return annotation


def _key_from_hint(hint: Any) -> str | None:
    if hint is None or get_origin(hint) is not Annotated:
        return None
    return _key_from_metadata(get_args(hint)[1:])


def _key_from_metadata(metadata: Iterable[Any]) -> str | None:
    for item in metadata:
        if isinstance(item, QueryKey):
            return item.key
    return None
