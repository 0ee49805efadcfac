import argparse
import json
import logging
import sys
from typing import Any

from managed_provisioning.config.settings import settings
from managed_provisioning.container import DependencyContainer
from managed_provisioning.entities.component import ComponentRef
from managed_provisioning.entities.resolution import ResolutionInput
from managed_provisioning.exceptions import (
    BaseAppError,
    IllegalProvisioningArgumentError,
)


def _print_pretty(payload: dict[str, Any], failed: bool) -> None:
    from rich import box
    from rich.console import Console
    from rich.panel import Panel
    from rich.syntax import Syntax

    console = Console(soft_wrap=True)
    console.print(
        Panel(
            Syntax(json.dumps(payload, ensure_ascii=False, indent=2), "json"),
            title="failure" if failed else "device admin",
            box=box.ROUNDED,
            border_style="red" if failed else "green",
            expand=True,
        )
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="provision-admin",
        description=(
            "Resolve the device admin component of a package, or check an explicit one."
        ),
    )
    parser.add_argument("--package", default=None, help="Package to infer the admin from")
    parser.add_argument(
        "--component",
        default=None,
        help="Explicit admin component ('pkg/cls' or 'pkg/.Cls'); wins over --package",
    )
    parser.add_argument(
        "--registry",
        default=None,
        help="JSON registry file (default: PROVISIONING_REGISTRY_PATH)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print output with colors",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log resolution steps to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        component = (
            ComponentRef.unflatten_from_string(args.component)
            if args.component
            else None
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        resolver = DependencyContainer(
            args.registry
        ).get_resolve_device_admin_use_case()
        admin = resolver.execute_or_raise(
            ResolutionInput(package_name=args.package, component=component)
        )
        failed = False
        payload: dict[str, Any] = {
            "package_name": admin.package_name,
            "class_name": admin.class_name,
            "flattened": admin.flatten_to_string(),
        }
    except IllegalProvisioningArgumentError as e:
        failed = True
        payload = {"kind": e.failure.kind.value, "detail": e.failure.detail}
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.pretty:
        _print_pretty(payload, failed)
    else:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 1 if failed else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
