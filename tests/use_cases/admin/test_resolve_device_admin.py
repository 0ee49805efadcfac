"""
Tests for the ResolveDeviceAdminUseCase.
"""

from unittest.mock import MagicMock

import pytest

from managed_provisioning.adapters.registry.in_memory_registry import (
    InMemoryPackageRegistry,
)
from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.entities.manifest import ManifestSnapshot, ReceiverDescriptor
from managed_provisioning.entities.resolution import (
    BIND_DEVICE_ADMIN,
    FailureKind,
    ResolutionFailure,
    ResolutionInput,
)
from managed_provisioning.exceptions import (
    IllegalProvisioningArgumentError,
    PackageNotFoundError,
    PackageRegistryError,
)
from managed_provisioning.ports.registry.package_registry_port import (
    PackageRegistryPort,
)
from managed_provisioning.use_cases.admin.resolve_device_admin import (
    ResolveDeviceAdminUseCase,
)

MDM = "com.example.mdm"


def _registry(*receivers: ReceiverDescriptor) -> InMemoryPackageRegistry:
    return InMemoryPackageRegistry({MDM: receivers})


class TestResolveDeviceAdminUseCase:
    """Test cases for the ResolveDeviceAdminUseCase."""

    @pytest.mark.parametrize("package_name", [None, ""])
    def test_missing_identifier(self, package_name, mock_logger):
        """Nothing supplied: fail without touching the registry."""
        mock_registry = MagicMock(spec=PackageRegistryPort)
        use_case = ResolveDeviceAdminUseCase(mock_registry, mock_logger)

        result = use_case.execute(ResolutionInput(package_name=package_name))

        assert isinstance(result, ResolutionFailure)
        assert result.kind is FailureKind.MISSING_IDENTIFIER
        assert "Neither the package name nor the component name" in result.detail
        mock_registry.get_manifest_snapshot.assert_not_called()

    def test_package_not_found(self, mock_logger):
        """Scenario A: package not installed."""
        use_case = ResolveDeviceAdminUseCase(InMemoryPackageRegistry(), mock_logger)

        result = use_case.execute(ResolutionInput(package_name=MDM))

        assert isinstance(result, ResolutionFailure)
        assert result.kind is FailureKind.PACKAGE_NOT_FOUND
        assert MDM in result.detail
        assert isinstance(result.cause, PackageNotFoundError)
        mock_logger.warning.assert_called_once_with(
            f"Cannot resolve device admin: Mdm {MDM} is not installed"
        )

    def test_infers_single_admin(self, mock_logger):
        """Scenario B: exactly one receiver declares the binding permission."""
        registry = _registry(ReceiverDescriptor("AdminReceiver", BIND_DEVICE_ADMIN))
        use_case = ResolveDeviceAdminUseCase(registry, mock_logger)

        result = use_case.execute(ResolutionInput(package_name=MDM))

        assert result == ComponentRef(MDM, "AdminReceiver")
        mock_logger.info.assert_any_call(f"Reading manifest of package: {MDM}")

    def test_ambiguous_admin(self, mock_logger):
        """Scenario C: two receivers declare the binding permission."""
        registry = _registry(
            ReceiverDescriptor("AdminReceiver", BIND_DEVICE_ADMIN),
            ReceiverDescriptor("OtherAdminReceiver", BIND_DEVICE_ADMIN),
        )
        use_case = ResolveDeviceAdminUseCase(registry, mock_logger)

        result = use_case.execute(ResolutionInput(package_name=MDM))

        assert isinstance(result, ResolutionFailure)
        assert result.kind is FailureKind.AMBIGUOUS_ADMIN
        assert MDM in result.detail

    def test_explicit_component_not_found(self, mock_logger):
        """Scenario D: explicit component missing from the manifest."""
        use_case = ResolveDeviceAdminUseCase(
            _registry(ReceiverDescriptor("Bar")), mock_logger
        )

        result = use_case.execute(ResolutionInput(component=ComponentRef(MDM, "Foo")))

        assert isinstance(result, ResolutionFailure)
        assert result.kind is FailureKind.COMPONENT_NOT_FOUND
        assert f"{MDM}/Foo" in result.detail

    def test_explicit_component_without_permission(self, mock_logger):
        """Scenario E: explicit component is trusted without the binding permission."""
        use_case = ResolveDeviceAdminUseCase(
            _registry(ReceiverDescriptor("Foo")), mock_logger
        )
        resolution_input = ResolutionInput(component=ComponentRef(MDM, "Foo"))

        first = use_case.execute(resolution_input)
        second = use_case.execute(resolution_input)

        assert first == ComponentRef(MDM, "Foo")
        assert first == second

    def test_explicit_component_ignores_ambiguity(self, mock_logger):
        registry = _registry(
            ReceiverDescriptor("A", BIND_DEVICE_ADMIN),
            ReceiverDescriptor("B", BIND_DEVICE_ADMIN),
        )
        use_case = ResolveDeviceAdminUseCase(registry, mock_logger)

        result = use_case.execute(ResolutionInput(component=ComponentRef(MDM, "B")))

        assert result == ComponentRef(MDM, "B")

    def test_component_package_overrides_package_name(self, mock_logger):
        """The component's package is queried, never the supplied package name."""
        mock_registry = MagicMock(spec=PackageRegistryPort)
        mock_registry.get_manifest_snapshot.return_value = ManifestSnapshot.of(
            MDM, [ReceiverDescriptor("Foo")]
        )
        use_case = ResolveDeviceAdminUseCase(mock_registry, mock_logger)

        result = use_case.execute(
            ResolutionInput(
                package_name="com.example.other", component=ComponentRef(MDM, "Foo")
            )
        )

        assert result == ComponentRef(MDM, "Foo")
        mock_registry.get_manifest_snapshot.assert_called_once_with(MDM)

    def test_inferred_admin_uses_queried_package_name(self, mock_logger):
        """The inferred component belongs to the package that was asked for."""
        mock_registry = MagicMock(spec=PackageRegistryPort)
        mock_registry.get_manifest_snapshot.return_value = ManifestSnapshot.of(
            "com.example.renamed",
            [ReceiverDescriptor("AdminReceiver", BIND_DEVICE_ADMIN)],
        )
        use_case = ResolveDeviceAdminUseCase(mock_registry, mock_logger)

        result = use_case.execute(ResolutionInput(package_name=MDM))

        assert result == ComponentRef(MDM, "AdminReceiver")

    def test_no_admin_found(self, mock_logger):
        registry = _registry(
            ReceiverDescriptor("Bar", ""),
            ReceiverDescriptor("Baz", "android.permission.RECEIVE_BOOT_COMPLETED"),
        )
        use_case = ResolveDeviceAdminUseCase(registry, mock_logger)

        result = use_case.execute(ResolutionInput(package_name=MDM))

        assert isinstance(result, ResolutionFailure)
        assert result.kind is FailureKind.NO_ADMIN_FOUND
        assert MDM in result.detail

    def test_no_admin_in_empty_manifest(self, mock_logger):
        use_case = ResolveDeviceAdminUseCase(_registry(), mock_logger)

        result = use_case.execute(ResolutionInput(package_name=MDM))

        assert isinstance(result, ResolutionFailure)
        assert result.kind is FailureKind.NO_ADMIN_FOUND

    def test_counts_every_candidate(self, mock_logger):
        """An eligible first receiver must not win when a later one is eligible too."""
        registry = _registry(
            ReceiverDescriptor("First", BIND_DEVICE_ADMIN),
            ReceiverDescriptor("Plain"),
            ReceiverDescriptor("Other", "android.permission.BOOT"),
            ReceiverDescriptor("Last", BIND_DEVICE_ADMIN),
        )
        use_case = ResolveDeviceAdminUseCase(registry, mock_logger)

        result = use_case.execute(ResolutionInput(package_name=MDM))

        assert isinstance(result, ResolutionFailure)
        assert result.kind is FailureKind.AMBIGUOUS_ADMIN

    def test_registry_error_propagates(self, mock_logger):
        mock_registry = MagicMock(spec=PackageRegistryPort)
        mock_registry.get_manifest_snapshot.side_effect = PackageRegistryError(
            "Registry offline"
        )
        use_case = ResolveDeviceAdminUseCase(mock_registry, mock_logger)

        with pytest.raises(PackageRegistryError, match="Registry offline"):
            use_case.execute(ResolutionInput(package_name=MDM))

    def test_unexpected_error_is_wrapped(self, mock_logger):
        mock_registry = MagicMock(spec=PackageRegistryPort)
        mock_registry.get_manifest_snapshot.side_effect = Exception("Unexpected error")
        use_case = ResolveDeviceAdminUseCase(mock_registry, mock_logger)

        with pytest.raises(
            PackageRegistryError,
            match=f"Failed to read manifest of {MDM}: Unexpected error",
        ):
            use_case.execute(ResolutionInput(package_name=MDM))

        mock_logger.error.assert_called_once_with(
            f"Error reading manifest of {MDM}: Unexpected error"
        )

    def test_execute_or_raise_success(self, registry, mock_logger):
        use_case = ResolveDeviceAdminUseCase(registry, mock_logger)

        assert use_case.execute_or_raise(ResolutionInput(package_name=MDM)) == (
            ComponentRef(MDM, "com.example.mdm.AdminReceiver")
        )

    def test_execute_or_raise_failure(self, mock_logger):
        use_case = ResolveDeviceAdminUseCase(InMemoryPackageRegistry(), mock_logger)

        with pytest.raises(IllegalProvisioningArgumentError) as exc:
            use_case.execute_or_raise(ResolutionInput(package_name=MDM))

        assert exc.value.failure.kind is FailureKind.PACKAGE_NOT_FOUND
        assert isinstance(exc.value.__cause__, PackageNotFoundError)

    def test_initialization_without_logger(self):
        """Test use case initialization without providing a logger."""
        mock_registry = MagicMock(spec=PackageRegistryPort)

        use_case = ResolveDeviceAdminUseCase(mock_registry)

        assert use_case._logger is not None
        assert use_case._registry == mock_registry
