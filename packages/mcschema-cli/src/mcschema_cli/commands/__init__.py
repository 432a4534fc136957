"""CLI command modules.

Commands are registered lazily by ``mcschema_cli.main.LAZY_COMMANDS``.
"""

from __future__ import annotations

__all__: list[str] = []
