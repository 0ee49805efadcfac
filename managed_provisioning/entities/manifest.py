"""
Manifest domain entities read from the package registry.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(frozen=True)
class ReceiverDescriptor:
    """One receiver component declared in a package manifest."""

    class_name: str
    permission: str = ""

    def __post_init__(self) -> None:
        if not self.class_name:
            raise ValueError("Receiver class name must be a non-empty string")
        # Undeclared permissions are always represented by the empty string
        if self.permission is None:
            object.__setattr__(self, "permission", "")

    def requires_permission(self, permission: str) -> bool:
        return bool(self.permission) and self.permission == permission


@dataclass(frozen=True)
class ManifestSnapshot:
    """
    Receivers declared by a single package, as read at query time.

    Order is the registry's order and stays stable for the life of the snapshot.
    """

    package_name: str
    receivers: tuple[ReceiverDescriptor, ...] = field(default_factory=tuple)

    @classmethod
    def of(
        cls,
        package_name: str,
        receivers: Iterable[ReceiverDescriptor],
    ) -> "ManifestSnapshot":
        return cls(package_name, tuple(receivers))

    def find_receiver(self, class_name: str) -> Optional[ReceiverDescriptor]:
        for receiver in self.receivers:
            if receiver.class_name == class_name:
                return receiver
        return None

    def receivers_requiring(self, permission: str) -> list[ReceiverDescriptor]:
        """Return every receiver guarded by the given permission."""
        return [r for r in self.receivers if r.requires_permission(permission)]
