"""
Name-keyed registries for claim parameters and claim templates.

Entries are write-once: adding a name twice fails and keeps the first entry.
Access is guarded by a per-registry lock so registration and resolution may
interleave. Once sealed, a registry serves lookups from a read-only snapshot
and rejects further additions.
"""
import logging
import threading
from types import MappingProxyType
from typing import Dict, Generic, Iterator, List, Mapping, Optional, TypeVar

from .errors import DuplicateEntryError, NotFoundError, RegistrySealedError
from .models import ClaimParameters, ResourceClaimTemplate
from .schemas import decode_parameters

logger = logging.getLogger(__name__)

T = TypeVar("T", ClaimParameters, ResourceClaimTemplate)


class Registry(Generic[T]):
    """A write-once mapping from resource name to resource."""

    kind: str = "resource"

    def __init__(self):
        self._entries: Dict[str, T] = {}
        self._lock = threading.RLock()
        self._snapshot: Optional[Mapping[str, T]] = None

    @property
    def sealed(self) -> bool:
        return self._snapshot is not None

    def add(self, entry: T) -> None:
        """
        Register ``entry`` under its metadata name.

        The registry keeps its own deep copy, so later changes to ``entry``
        (or to its ``spec`` map) do not reach the stored resource.

        Raises:
            DuplicateEntryError: the name is already registered.
            RegistrySealedError: the registry no longer accepts entries.
        """
        entry = entry.model_copy(deep=True)
        name = entry.name
        with self._lock:
            if self._snapshot is not None:
                raise RegistrySealedError(self.kind, name)
            if name in self._entries:
                logger.warning("Duplicate %s %r rejected", self.kind, name)
                raise DuplicateEntryError(self.kind, name)
            self._validate(entry)
            self._entries[name] = entry
        logger.debug("Registered %s %r (%s)", self.kind, name, entry.api_version)

    def _validate(self, entry: T) -> None:
        """Hook for subclasses to reject entries before they are stored."""

    def get(self, name: str) -> T:
        """Return a copy of the entry registered under ``name`` or raise NotFoundError."""
        entries = self._snapshot
        if entries is None:
            with self._lock:
                entry = self._entries.get(name)
        else:
            entry = entries.get(name)
        if entry is None:
            raise NotFoundError(self.kind, name)
        return entry.model_copy(deep=True)

    def seal(self) -> None:
        """Freeze the registry into a read-only snapshot. Idempotent."""
        with self._lock:
            if self._snapshot is None:
                self._snapshot = MappingProxyType(dict(self._entries))
                logger.info("Sealed %s registry with %d entries", self.kind, len(self._snapshot))

    def names(self) -> List[str]:
        return [entry.name for entry in self]

    def _view(self) -> Mapping[str, T]:
        if self._snapshot is not None:
            return self._snapshot
        with self._lock:
            return dict(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._view()

    def __len__(self) -> int:
        return len(self._view())

    def __iter__(self) -> Iterator[T]:
        return iter([entry.model_copy(deep=True) for entry in self._view().values()])


class ParameterRegistry(Registry[ClaimParameters]):
    """
    Registry of claim parameter sets.

    With ``strict`` enabled each parameter set is decoded on ``add`` so an
    unsupported schema or a missing field is rejected at registration
    instead of at first resolution.
    """

    kind = "resource claim parameters"

    def __init__(self, strict: bool = False):
        super().__init__()
        self.strict = strict

    def _validate(self, entry: ClaimParameters) -> None:
        if self.strict:
            decode_parameters(entry)


class TemplateRegistry(Registry[ResourceClaimTemplate]):
    """Registry of resource claim templates."""

    kind = "resource claim template"
