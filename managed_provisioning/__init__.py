"""managed_provisioning: find and validate the device-admin component of a provisioning request.

Entities, ports, adapters and use cases live in their own subpackages; import them directly.
"""

__all__: list[str] = []
