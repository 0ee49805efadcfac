"""
Pytest configuration and shared fixtures.
"""

import json
import os
import tempfile
from unittest.mock import MagicMock

import pytest

from managed_provisioning.adapters.registry.in_memory_registry import (
    InMemoryPackageRegistry,
)
from managed_provisioning.container import DependencyContainer
from managed_provisioning.entities.manifest import ReceiverDescriptor
from managed_provisioning.entities.resolution import BIND_DEVICE_ADMIN

MDM_PACKAGE = "com.example.mdm"


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def registry(mock_logger):
    """
    Create an in-memory registry with a few installed packages.

    Returns:
        InMemoryPackageRegistry instance
    """
    return InMemoryPackageRegistry(
        {
            MDM_PACKAGE: [
                ReceiverDescriptor("com.example.mdm.BootReceiver"),
                ReceiverDescriptor("com.example.mdm.AdminReceiver", BIND_DEVICE_ADMIN),
            ],
            "com.example.twoadmins": [
                ReceiverDescriptor("com.example.twoadmins.First", BIND_DEVICE_ADMIN),
                ReceiverDescriptor("com.example.twoadmins.Second", BIND_DEVICE_ADMIN),
            ],
            "com.example.noadmin": [
                ReceiverDescriptor("com.example.noadmin.Bar", "android.permission.BOOT"),
            ],
        },
        logger=mock_logger,
    )


@pytest.fixture
def registry_file():
    """
    Create a temporary JSON registry file.

    Returns:
        Path to the registry file
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "registry.json")
        document = {
            "packages": {
                MDM_PACKAGE: {
                    "receivers": [
                        {"name": ".AdminReceiver", "permission": BIND_DEVICE_ADMIN},
                        {"name": "com.example.mdm.BootReceiver"},
                    ]
                },
                "com.example.empty": {"receivers": []},
            }
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(document, f)

        yield path


@pytest.fixture
def dependency_container(mock_logger, registry):
    """
    Create a dependency container wired to the in-memory registry.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    container.set_package_registry(registry)
    return container
