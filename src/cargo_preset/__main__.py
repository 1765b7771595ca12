"""Allow ``python -m cargo_preset`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cargo_preset`` behaves identically to the ``cargo-preset``
console script.
"""

from __future__ import annotations

from cargo_preset.cli.app import cli

if __name__ == "__main__":
    cli()
