"""Pydantic schemas for resolver configuration.

Field aliases follow the camelCase keys used by jest-style configuration so
that existing config dictionaries load unchanged; snake_case names are
accepted as well.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from .path_ops import PathConvention

# (specifier, options) -> path
ResolverPlugin = Callable[[str, dict[str, Any]], str]


class ModuleNameMapping(BaseModel):
    """A single moduleNameMapper rule."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True, frozen=True)

    regex: Any = Field(..., description="Pattern (string or compiled re.Pattern) matched against the specifier")
    module_name: Any = Field(..., alias="moduleName", description="Replacement template, may use $1..$n")


class ResolverOptions(BaseModel):
    """Configuration of a Resolver instance."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True, frozen=True)

    extensions: list[str] = Field(default_factory=lambda: [".js"], description="Extensions tried in order")
    platforms: list[str] = Field(
        default_factory=list, description="Platform suffixes tried before bare extensions (name.platform.ext)"
    )
    module_directories: list[str] = Field(
        default_factory=lambda: ["node_modules"],
        alias="moduleDirectories",
        description="Directory names joined onto every ancestor, or absolute search roots",
    )
    module_paths: list[str] = Field(
        default_factory=list, alias="modulePaths", description="Extra search roots probed after the walked ones"
    )
    module_name_mapper: list[ModuleNameMapping] = Field(
        default_factory=list, alias="moduleNameMapper", description="Ordered specifier rewrite rules"
    )
    browser: bool = Field(default=False, description="Prefer the package.json browser field")
    has_core_modules: bool = Field(default=True, alias="hasCoreModules", description="Recognise builtin modules")
    resolver: ResolverPlugin | None = Field(default=None, description="External resolver that replaces the default")
    root_dir: str | None = Field(default=None, alias="rootDir", description="Project root, forwarded to plugins")
    path_convention: PathConvention | None = Field(
        default=None, alias="pathConvention", description="posix or win32; None selects the host convention"
    )


class FindOptions(BaseModel):
    """Options for the stateless find_node_module entry point."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True, frozen=True)

    basedir: str = Field(..., description="Directory relative specifiers and the search walk start from")
    browser: bool = False
    extensions: list[str] = Field(default_factory=lambda: [".js"])
    platforms: list[str] = Field(default_factory=list)
    module_directory: list[str] = Field(default_factory=lambda: ["node_modules"], alias="moduleDirectory")
    paths: list[str] = Field(default_factory=list)
    resolver: ResolverPlugin | None = None
    root_dir: str | None = Field(default=None, alias="rootDir")
    path_convention: PathConvention | None = Field(default=None, alias="pathConvention")

    def plugin_options(self, paths: list[str]) -> dict[str, Any]:
        """Options dictionary handed to a resolver plugin, keyed the way jest-style plugins expect."""
        result: dict[str, Any] = {
            "basedir": self.basedir,
            "browser": self.browser,
            "extensions": list(self.extensions),
            "moduleDirectory": list(self.module_directory),
            "paths": list(paths),
        }
        if self.root_dir is not None:
            result["rootDir"] = self.root_dir
        return result
