"""Allow ``python -m rn_boilerplate`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m rn_boilerplate`` behaves identically to the
``rn-boilerplate`` console script.
"""

from __future__ import annotations

from rn_boilerplate.cli.app import cli

if __name__ == "__main__":
    cli()
