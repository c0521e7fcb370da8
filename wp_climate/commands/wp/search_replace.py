"""Recherche et remplacement dans la base WordPress."""

from typing import Any, Mapping

from wp_climate.commands.base import BaseWpCommand
from wp_climate.commands.context import WpCliContext
from wp_climate.commands.params import CommandParam, ParamType
from wp_climate.shell.result import ExecutionResult


class SearchReplaceCommand(BaseWpCommand):
    """wp search-replace <old> <new> [--all-tables] [--dry-run]

    Typiquement utilisé lors d'un changement de domaine :

        {"old_value": "http://old.example",
         "new_value": "https://new.example",
         "dry_run": "true"}
    """

    PARAMS = (
        CommandParam("old_value", required=True,
                  description="Valeur recherchée"),
        CommandParam("new_value", required=True,
                  description="Valeur de remplacement"),
        CommandParam("all_tables", ParamType.BOOLEAN, default=False,
                  description="Inclure toutes les tables"),
        CommandParam("dry_run", ParamType.BOOLEAN, default=False,
                  description="Simuler sans écrire"),
    )

    def __init__(
        self, context: WpCliContext, params: Mapping[str, Any]
    ) -> None:
        super().__init__(context)
        values = self._resolve(params)
        self.old_value: str = values["old_value"]
        self.new_value: str = values["new_value"]
        self.all_tables: bool = values["all_tables"]
        self.dry_run: bool = values["dry_run"]

    def execute(self) -> ExecutionResult:
        builder = (
            self._wp("search-replace", self.old_value, self.new_value)
            .with_flag_if("--all-tables", self.all_tables)
            .with_flag_if("--dry-run", self.dry_run)
        )
        return self._run(builder)
