"""Entry point for ``python -m resign_demo``.

Runs the same :func:`~resign_demo.cli.app.cli` boundary as the
``resign-demo`` console script.
"""

from __future__ import annotations

from resign_demo.cli.app import cli

if __name__ == "__main__":
    cli()
