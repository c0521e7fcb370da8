"""Vidage des caches, transients et règles de réécriture."""

from wp_climate.commands.base import BaseWpCommand
from wp_climate.shell.result import ExecutionResult


class FlushCachesCommand(BaseWpCommand):
    """wp cache flush"""

    def execute(self) -> ExecutionResult:
        return self._run(self._wp("cache", "flush"))


class FlushTransientCommand(BaseWpCommand):
    """wp transient delete --all"""

    def execute(self) -> ExecutionResult:
        return self._run(
            self._wp("transient", "delete").with_flag("--all")
        )


class RewriteFlushCommand(BaseWpCommand):
    """wp rewrite flush"""

    def execute(self) -> ExecutionResult:
        return self._run(self._wp("rewrite", "flush"))
