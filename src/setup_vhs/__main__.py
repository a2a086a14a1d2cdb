"""Allow ``python -m setup_vhs`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m setup_vhs`` behaves identically to the ``setup-vhs``
console script.
"""

from __future__ import annotations

from setup_vhs.cli.app import cli

if __name__ == "__main__":
    cli()
