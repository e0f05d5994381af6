"""moduleNameMapper: rewrite specifiers before resolution.

Rules are evaluated in configured order and the first matching rule wins.
Templates may reference capture groups as ``$1``..``$n`` (``$0`` is the whole
match) and the ``<rootDir>`` token.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import InvalidMappingError

if TYPE_CHECKING:
    from .options import ModuleNameMapping

logger = logging.getLogger(__name__)

ROOT_DIR_TOKEN = "<rootDir>"
_GROUP_REF = re.compile(r"\$(\d+)")


@dataclass(frozen=True)
class CompiledRule:
    """A validated mapping rule."""

    regex: re.Pattern[str]
    template: str


@dataclass(frozen=True)
class MappedName:
    """Result of a successful mapping."""

    specifier: str
    name: str
    rule: CompiledRule


def compile_rule(regex: str | re.Pattern[str], template: str, root_dir: str | None = None) -> CompiledRule:
    """Compile and validate a single rule.

    Raises:
        InvalidMappingError: Bad pattern, non-string template, unknown group
            reference, or ``<rootDir>`` without a root directory
    """
    pattern_text = regex.pattern if isinstance(regex, re.Pattern) else str(regex)

    if not isinstance(template, str):
        raise InvalidMappingError(pattern_text, repr(template), "moduleName must be a string")

    if isinstance(regex, re.Pattern):
        compiled = regex
    elif isinstance(regex, str):
        try:
            compiled = re.compile(regex)
        except re.error as e:
            raise InvalidMappingError(pattern_text, template, f"bad regular expression: {e}") from e
    else:
        raise InvalidMappingError(pattern_text, template, "regex must be a string or compiled pattern")

    for ref in _GROUP_REF.findall(template):
        if int(ref) > compiled.groups:
            raise InvalidMappingError(
                pattern_text, template, f"references group ${ref} but pattern has {compiled.groups} group(s)"
            )

    if ROOT_DIR_TOKEN in template:
        if root_dir is None:
            raise InvalidMappingError(pattern_text, template, f"uses {ROOT_DIR_TOKEN} but no rootDir is configured")
        template = template.replace(ROOT_DIR_TOKEN, root_dir)

    return CompiledRule(regex=compiled, template=template)


class NameMapper:
    """Ordered list of (pattern, replacement) rules."""

    def __init__(self, rules: Iterable[ModuleNameMapping] | None = None, root_dir: str | None = None):
        self.rules: list[CompiledRule] = [
            compile_rule(rule.regex, rule.module_name, root_dir) for rule in (rules or [])
        ]

    def map(self, specifier: str) -> MappedName | None:
        """Return the first rule's rewrite of ``specifier``, or None if no rule matches."""
        for rule in self.rules:
            match = rule.regex.search(specifier)
            if match is None:
                continue
            name = _GROUP_REF.sub(lambda ref: match.group(int(ref.group(1))) or "", rule.template)
            logger.debug(f"[resolve:map] {specifier} -> {name} (via /{rule.regex.pattern}/)")
            return MappedName(specifier=specifier, name=name, rule=rule)
        return None

    def apply(self, specifier: str) -> str:
        """Mapped name, or ``specifier`` unchanged when no rule matches."""
        mapped = self.map(specifier)
        return mapped.name if mapped else specifier

    def __bool__(self) -> bool:
        return bool(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        return f"NameMapper({len(self.rules)} rules)"
