"""
Component reference domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComponentRef:
    """
    Identifies an application component by its package and class name.

    Equality and hashing are structural on both fields.
    """

    package_name: str
    class_name: str

    def __post_init__(self) -> None:
        if not self.package_name or not isinstance(self.package_name, str):
            raise ValueError("Component package name must be a non-empty string")
        if not self.class_name or not isinstance(self.class_name, str):
            raise ValueError("Component class name must be a non-empty string")

    @classmethod
    def unflatten_from_string(cls, text: str) -> "ComponentRef":
        """
        Build a ComponentRef from its flattened form.

        Accepts both "pkg/cls" and the short "pkg/.Cls" form, where a class
        starting with "." is relative to the package.

        Raises:
            ValueError: If the text is not a flattened component name
        """
        sep = (text or "").find("/")
        if sep <= 0 or sep + 1 >= len(text):
            raise ValueError(f"Not a flattened component name: {text!r}")

        package_name = text[:sep]
        class_name = text[sep + 1 :]
        if class_name.startswith("."):
            class_name = package_name + class_name
        return cls(package_name, class_name)

    def flatten_to_string(self) -> str:
        """Return the unambiguous "pkg/cls" form."""
        return f"{self.package_name}/{self.class_name}"

    def flatten_to_short_string(self) -> str:
        """Return "pkg/.Cls" when the class lives under the package namespace."""
        prefix = self.package_name + "."
        if self.class_name.startswith(prefix):
            return f"{self.package_name}/{self.class_name[len(self.package_name):]}"
        return self.flatten_to_string()

    def __str__(self) -> str:
        return f"ComponentRef{{{self.flatten_to_string()}}}"
