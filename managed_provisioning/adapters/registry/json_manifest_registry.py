"""
File-backed package registry adapter reading manifests from a JSON document.
"""

import json
import logging
import os
from typing import Any, Optional

from typing_extensions import override

from managed_provisioning.adapters.registry.in_memory_registry import (
    InMemoryPackageRegistry,
)
from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.entities.manifest import ManifestSnapshot, ReceiverDescriptor
from managed_provisioning.exceptions import PackageRegistryError
from managed_provisioning.ports.registry.package_registry_port import (
    PackageRegistryPort,
)


class JsonManifestPackageRegistry(PackageRegistryPort):
    """
    Package registry loaded from a JSON file.

    Expected layout::

        {"packages": {"com.example.mdm": {"receivers": [
            {"name": ".AdminReceiver", "permission": "android.permission.BIND_DEVICE_ADMIN"}
        ]}}}

    Receiver names starting with "." are relative to their package. The file is
    read once; enabled state changes are kept in memory only.
    """

    def __init__(self, path: str, logger: Optional[logging.Logger] = None):
        """
        Initialize the adapter and load the registry file.

        Args:
            path: Path to the JSON registry file
            logger: Logger instance to use for logging. If None, a default logger will be created.

        Raises:
            PackageRegistryError: If the file is missing or malformed
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self.path = os.path.abspath(os.path.expanduser(path))
        self._registry = InMemoryPackageRegistry(
            self._load(self.path), logger=self._logger
        )

    def _load(self, path: str) -> dict[str, list[ReceiverDescriptor]]:
        if not os.path.isfile(path):
            raise PackageRegistryError(f"Registry file does not exist: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PackageRegistryError(f"Cannot read registry file {path}: {e}")

        packages = document.get("packages") if isinstance(document, dict) else None
        if not isinstance(packages, dict):
            raise PackageRegistryError(
                f"Registry file {path} must contain a 'packages' object"
            )

        manifests: dict[str, list[ReceiverDescriptor]] = {}
        for package_name, manifest in packages.items():
            manifests[package_name] = self._parse_receivers(package_name, manifest)

        self._logger.info(f"Loaded {len(manifests)} packages from {path}")
        return manifests

    def _parse_receivers(
        self, package_name: str, manifest: Any
    ) -> list[ReceiverDescriptor]:
        entries = manifest.get("receivers", []) if isinstance(manifest, dict) else None
        if not isinstance(entries, list):
            raise PackageRegistryError(
                f"Receivers of package {package_name} must be a list"
            )

        receivers: list[ReceiverDescriptor] = []
        for entry in entries:
            name = entry.get("name") if isinstance(entry, dict) else None
            if not isinstance(name, str) or not name:
                raise PackageRegistryError(
                    f"Receiver without a name in package {package_name}"
                )
            permission = entry.get("permission")
            if permission is None:
                permission = ""
            if not isinstance(permission, str):
                raise PackageRegistryError(
                    f"Permission of receiver {name} in package {package_name} must be a string"
                )
            if name.startswith("."):
                name = package_name + name
            receivers.append(ReceiverDescriptor(name, permission))
        return receivers

    @override
    def get_manifest_snapshot(self, package_name: str) -> ManifestSnapshot:
        return self._registry.get_manifest_snapshot(package_name)

    @override
    def set_component_enabled(self, component: ComponentRef, enabled: bool) -> None:
        self._registry.set_component_enabled(component, enabled)

    def is_component_enabled(self, component: ComponentRef) -> bool:
        return self._registry.is_component_enabled(component)
