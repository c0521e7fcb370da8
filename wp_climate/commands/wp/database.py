"""Commandes « wp db » : vérification, réparation, export, import.

Le client mysql configuré est ajouté au PATH de ces commandes.
"""

from typing import Any, Mapping, Optional

from wp_climate.commands.base import BaseWpCommand
from wp_climate.commands.context import WpCliContext
from wp_climate.commands.params import CommandParam, ParamType
from wp_climate.shell.result import ExecutionResult


class CheckDbCommand(BaseWpCommand):
    """wp db check"""

    def execute(self) -> ExecutionResult:
        return self._run_database(self._wp("db", "check"))


class RepairDbCommand(BaseWpCommand):
    """wp db repair"""

    def execute(self) -> ExecutionResult:
        return self._run_database(self._wp("db", "repair"))


class ExportDbCommand(BaseWpCommand):
    """Exporte la base vers un fichier SQL.

    Sans ``file_name``, WP-CLI choisit le nom
    (``<base>-<date>-<hash>.sql``) dans le répertoire WordPress.
    """

    PARAMS = (
        CommandParam(
            "file_name",
            ParamType.PATH,
            description="Fichier SQL de destination",
        ),
    )

    def __init__(
        self,
        context: WpCliContext,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(context)
        self.file_name: Optional[str] = self._resolve(params)["file_name"]

    def execute(self) -> ExecutionResult:
        builder = self._wp("db", "export")
        if self.file_name:
            builder.with_args([self.file_name])
        return self._run_database(builder)


class ImportDbCommand(BaseWpCommand):
    """Importe un fichier SQL dans la base."""

    PARAMS = (
        CommandParam(
            "file_name",
            ParamType.PATH,
            required=True,
            description="Fichier SQL à importer",
        ),
    )

    def __init__(
        self, context: WpCliContext, params: Mapping[str, Any]
    ) -> None:
        super().__init__(context)
        self.file_name: str = self._resolve(params)["file_name"]

    def execute(self) -> ExecutionResult:
        return self._run_database(self._wp("db", "import", self.file_name))
