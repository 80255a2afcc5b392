# topmark:header:start
#
#   project      : Autoexec
#   file         : __init__.py
#   file_relpath : src/autoexec/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Autoexec package.

Autoexec assembles the ``AUTOEXEC.BAT`` startup script of a DOS-compatible
runtime from launch arguments, configuration and environment variables, and
exposes it on the runtime's virtual drive in the active DOS code page. It
ships both a CLI and a small typed API built around
[`AutoexecModule`][autoexec.core.module.AutoexecModule].
"""

from __future__ import annotations
