"""Contrat commun des commandes et classes de base WP-CLI / git.

Une commande construit sa ligne à partir des paramètres liés à la
construction et du contexte partagé, puis délègue à la façade
Shell. La fabrique n'a besoin de rien savoir d'autre.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from wp_climate.commands.context import GitContext, WpCliContext
from wp_climate.commands.params import CommandParam, resolve_params
from wp_climate.shell.builder import CommandBuilder
from wp_climate.shell.result import ExecutionResult


class Command(ABC):
    """Interface de toutes les commandes exécutables."""

    # Paramètres déclarés, lus par l'enregistrement et la CLI
    PARAMS: Tuple[CommandParam, ...] = ()

    @abstractmethod
    def execute(self) -> ExecutionResult:
        """Exécute la commande via la façade Shell.

        Returns:
            Résultat de l'exécution.

        Raises:
            DependencyError: Outil requis absent.
            LaunchError: Processus impossible à démarrer.
        """
        pass

    @classmethod
    def _resolve(
        cls, params: Optional[Mapping[str, Any]]
    ) -> Dict[str, Any]:
        return resolve_params(cls.PARAMS, params)


class BaseWpCommand(Command):
    """Base des commandes WP-CLI.

    Toute commande vérifie d'abord WP-CLI et le répertoire WordPress
    puis exécute « php wp --path=<répertoire> ... ».
    """

    def __init__(self, context: WpCliContext) -> None:
        self.context = context

    def _wp(self, *args: str) -> CommandBuilder:
        """Prépare « php wp --path=<répertoire> args... »."""
        settings = self.context.settings
        return (
            CommandBuilder(settings.php, settings.wp)
            .with_option("--path", self.context.working_directory)
            .with_args(args)
        )

    def _run(
        self,
        builder: CommandBuilder,
        environment: Optional[Mapping[str, str]] = None,
    ) -> ExecutionResult:
        self.context.dependency.is_wordpress_directory()
        return self.context.shell.execute_command(
            builder.build(), environment
        )

    def _run_database(self, builder: CommandBuilder) -> ExecutionResult:
        """Exécute une commande « db » avec le client mysql dans le PATH."""
        return self._run(builder, self.context.settings.database_environment())


class BaseGitCommand(Command):
    """Base des commandes git, exécutées avec l'environnement git."""

    def __init__(self, context: GitContext) -> None:
        self.context = context

    def _git(self, subcommand: str, *leading: str) -> CommandBuilder:
        return CommandBuilder(self.context.settings.git, subcommand, *leading)

    def _run(self, builder: CommandBuilder) -> ExecutionResult:
        return self.context.shell.execute_command(
            builder.build(), self.context.environment()
        )

    @staticmethod
    def _paths(files: Optional[Iterable[str]]) -> list:
        """Sépare les options des chemins (« -- »)."""
        files = list(files or [])
        return ["--", *files] if files else []
