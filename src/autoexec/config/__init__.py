# topmark:header:start
#
#   project      : Autoexec
#   file         : __init__.py
#   file_relpath : src/autoexec/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Autoexec configuration: TOML I/O, logging setup and the config model.

Import the model from [`autoexec.config.model`][autoexec.config.model]; this
package initializer stays import-free so that `autoexec.config.logging` can
be loaded from anywhere without cycles.
"""
