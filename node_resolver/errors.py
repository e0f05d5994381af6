"""Error taxonomy for module resolution.

- ModuleNotFoundError: no candidate existed for a specifier
- InvalidMappingError: a moduleNameMapper rule cannot be compiled
- PluginLoadError: a resolver plugin reference cannot be imported
- SettingsError: a settings file cannot be read or validated

Errors raised by a resolver plugin are never wrapped.
"""

from __future__ import annotations


class ResolverError(Exception):
    """Base class for all resolver errors."""


class ModuleNotFoundError(ResolverError):  # noqa: A001
    """Raised when a specifier cannot be resolved from a file.

    Attributes:
        specifier: The specifier as written by the requiring module
        from_file: The file the specifier was required from
        mapped_name: The name produced by moduleNameMapper, if any
    """

    def __init__(self, specifier: str, from_file: str, mapped_name: str | None = None):
        self.specifier = specifier
        self.from_file = from_file
        self.mapped_name = mapped_name

        if mapped_name is not None and mapped_name != specifier:
            message = f"Cannot find module '{specifier}' (mapped as '{mapped_name}') from '{from_file}'"
        else:
            message = f"Cannot find module '{specifier}' from '{from_file}'"
        super().__init__(message)


class InvalidMappingError(ResolverError, ValueError):
    """Raised when a moduleNameMapper rule is malformed."""

    def __init__(self, pattern: str, template: str, reason: str):
        self.pattern = pattern
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid moduleNameMapper rule {pattern!r} -> {template!r}: {reason}")


class PluginLoadError(ResolverError):
    """Raised when a resolver plugin reference cannot be loaded."""

    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(f"Cannot load resolver plugin '{reference}': {reason}")


class SettingsError(ResolverError):
    """Raised when a settings file is unreadable or invalid."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid settings in {path}: {reason}")
