"""Commandes WP-CLI."""

from wp_climate.commands.wp.cache import (FlushCachesCommand,
                                          FlushTransientCommand,
                                          RewriteFlushCommand)
from wp_climate.commands.wp.database import (CheckDbCommand, ExportDbCommand,
                                             ImportDbCommand, RepairDbCommand)
from wp_climate.commands.wp.search_replace import SearchReplaceCommand

__all__ = [
    "CheckDbCommand",
    "ExportDbCommand",
    "FlushCachesCommand",
    "FlushTransientCommand",
    "ImportDbCommand",
    "RepairDbCommand",
    "RewriteFlushCommand",
    "SearchReplaceCommand",
]
