"""Static table of platform builtin (core) module names."""

from __future__ import annotations

NODE_SCHEME_PREFIX = "node:"

CORE_MODULES: frozenset[str] = frozenset(
    {
        "assert",
        "assert/strict",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "dns/promises",
        "domain",
        "events",
        "fs",
        "fs/promises",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "path/posix",
        "path/win32",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "readline/promises",
        "repl",
        "stream",
        "stream/consumers",
        "stream/promises",
        "stream/web",
        "string_decoder",
        "sys",
        "timers",
        "timers/promises",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "util/types",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)


def is_core_module(name: str, has_core_modules: bool = True) -> bool:
    """Check whether ``name`` is a builtin module.

    Args:
        name: Bare module name, optionally with the "node:" scheme
        has_core_modules: When False, nothing is treated as core

    Returns:
        True if the name is a builtin and core modules are enabled
    """
    if not has_core_modules:
        return False
    if name.startswith(NODE_SCHEME_PREFIX):
        name = name[len(NODE_SCHEME_PREFIX) :]
    return name in CORE_MODULES
