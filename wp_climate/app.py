"""Assemblage de l'application : shell, vérificateurs, contextes, fabrique.

Un seul LocalShell est partagé par toutes les commandes et par les
vérifications de dépendances.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from wp_climate.commands.base import Command
from wp_climate.commands.context import GitContext, WpCliContext
from wp_climate.commands.factory import CommandFactory
from wp_climate.commands.registrar import build_default_registry
from wp_climate.commands.registry import CommandGroup, CommandRegistry
from wp_climate.config.models import AppSettings
from wp_climate.dependency.base import DependencyStatus
from wp_climate.dependency.git import GitDependency
from wp_climate.dependency.wpcli import WpCliDependency
from wp_climate.logging.base import Logger
from wp_climate.shell.facade import LocalShell, Shell
from wp_climate.shell.result import ExecutionResult
from wp_climate.shell.sink import OutputSink


class WpClimateApp:
    """Point d'entrée programmatique des commandes WP-CLI et git.

    Example:
        >>> app = WpClimateApp("/var/www/site", AppSettings())
        >>> result = app.run("search-replace", {
        ...     "old_value": "http://old", "new_value": "https://new",
        ... })
        >>> result.successful
        True
    """

    def __init__(
        self,
        working_directory: Union[str, Path],
        settings: Optional[AppSettings] = None,
        logger: Optional[Logger] = None,
        sink: Optional[OutputSink] = None,
        shell: Optional[Shell] = None,
        registry: Optional[CommandRegistry] = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.working_directory = Path(working_directory)
        self._logger = logger
        self.shell = shell or LocalShell.from_settings(
            self.working_directory, self.settings.shell, logger, sink
        )
        self.wpcli_dependency = WpCliDependency(
            self.shell, self.settings.wpcli, logger
        )
        self.git_dependency = GitDependency(
            self.shell, self.settings.git, logger
        )
        self.contexts: Dict[CommandGroup, Any] = {
            CommandGroup.WP: WpCliContext(
                self.shell,
                self.settings.wpcli,
                self.wpcli_dependency,
                self.working_directory,
            ),
            CommandGroup.GIT: GitContext(
                self.shell,
                self.settings.git,
                self.git_dependency,
                self.working_directory,
            ),
        }
        self.registry = registry or build_default_registry(logger)
        self.factory = CommandFactory(self.registry, logger)

    @property
    def logger(self) -> Optional[Logger]:
        return self._logger

    def create(
        self, name: str, params: Optional[Mapping[str, Any]] = None
    ) -> Command:
        """Construit la commande avec le contexte de son groupe."""
        entry = self.registry.resolve(name)
        return self.factory.create(name, self.contexts[entry.group], params)

    def run(
        self, name: str, params: Optional[Mapping[str, Any]] = None
    ) -> ExecutionResult:
        """Construit puis exécute une commande.

        Raises:
            DispatchError: Commande inconnue ou paramètres invalides.
            DependencyError: Outil requis absent.
            LaunchError: Processus impossible à démarrer.
        """
        command = self.create(name, params)
        if self._logger:
            self._logger.log_info(f"Commande « {name} »")
        return command.execute()

    def check(self) -> Dict[str, DependencyStatus]:
        """État des dépendances WP-CLI et git."""
        return {
            CommandGroup.WP.value: self.wpcli_dependency.status(),
            CommandGroup.GIT.value: self.git_dependency.status(),
        }

    def stop(self) -> None:
        """Interrompt les commandes en cours."""
        self.shell.stop()
