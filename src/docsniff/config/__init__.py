# topmark:header:start
#
#   project      : DocSniff
#   file         : __init__.py
#   file_relpath : src/docsniff/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""DocSniff configuration and logging.

Submodules:
    - `docsniff.config.logging`: logger class, TRACE level and colored output.
    - `docsniff.config.keys`: TOML section and key names.
    - `docsniff.config.types`: `SniffStrategy` and shared aliases.
    - `docsniff.config.io`: tomlkit-based loading and typed getters.
    - `docsniff.config.model`: `MutableConfig` / `Config` and layered discovery.

This package re-exports nothing: `docsniff.config.logging` is
imported by every module of the library and must stay import-light.
"""
