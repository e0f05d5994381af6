"""Tests for the core module table."""

import pytest

from node_resolver.core_modules import CORE_MODULES
from node_resolver.core_modules import is_core_module


@pytest.mark.parametrize("name", sorted(CORE_MODULES))
def test_every_core_name_is_core(name):
    assert is_core_module(name) is True


@pytest.mark.parametrize("name", ["assert", "fs", "not-a-core-module", "lodash"])
def test_disabled_core_modules(name):
    assert is_core_module(name, has_core_modules=False) is False


def test_non_core_names():
    assert is_core_module("lodash") is False
    assert is_core_module("./fs") is False
    assert is_core_module("fs/") is False
    assert is_core_module("FS") is False


def test_node_scheme_prefix():
    assert is_core_module("node:fs") is True
    assert is_core_module("node:not-a-module") is False
