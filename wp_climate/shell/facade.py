"""Point d'entrée unique pour l'exécution de commandes.

Les vérifications de dépendances et toutes les commandes passent
par Shell.execute_command ; aucune autre couche ne construit de
lanceur. La politique d'exécution (délais, classement de stderr,
câblage des pipelines) reste ainsi en un seul endroit.
"""

import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional, Set, Union

from wp_climate.config.models import ShellSettings
from wp_climate.errors.exceptions import CommandLineError
from wp_climate.logging.base import Logger
from wp_climate.shell.collector import DEFAULT_JOIN_TIMEOUT, OutputCollector
from wp_climate.shell.command_line import CommandLine
from wp_climate.shell.executor import CommandExecutor
from wp_climate.shell.launcher import DEFAULT_TERMINATE_TIMEOUT, ProcessLauncher
from wp_climate.shell.result import ExecutionResult
from wp_climate.shell.sink import OutputSink


class Shell(ABC):
    """Interface abstraite d'exécution synchrone de commandes."""

    @abstractmethod
    def execute_command(
        self,
        command_line: Union[str, CommandLine],
        environment: Optional[Mapping[str, str]] = None,
    ) -> ExecutionResult:
        """Exécute une ligne de commande et retourne son résultat.

        Args:
            command_line: Ligne textuelle (assainie puis découpée)
                ou CommandLine déjà construite.
            environment: Surcouche d'environnement.

        Returns:
            Résultat de l'exécution.

        Raises:
            CommandLineError: Ligne vide ou étape vide.
            LaunchError: Processus impossible à démarrer.
        """
        pass

    def stop(self) -> None:
        """Interrompt les exécutions en cours (aucune par défaut)."""
        pass


class LocalShell(Shell):
    """Exécute les commandes localement dans un répertoire fixe.

    Une instance est partagée par tous les appelants ; chaque appel
    est indépendant. Les exécutions en cours sont suivies pour que
    stop() puisse les interrompre depuis un autre thread.

    Attributes:
        working_directory: Répertoire de travail de toutes les commandes.
    """

    def __init__(
        self,
        working_directory: Optional[Union[str, Path]] = None,
        logger: Optional[Logger] = None,
        sink: Optional[OutputSink] = None,
        terminate_timeout: float = DEFAULT_TERMINATE_TIMEOUT,
        join_timeout: float = DEFAULT_JOIN_TIMEOUT,
        launcher: Optional[ProcessLauncher] = None,
    ) -> None:
        """Initialise le shell.

        Args:
            working_directory: Répertoire de travail (cwd par défaut).
            logger: Logger optionnel.
            sink: Affichage temps réel optionnel des lignes.
            terminate_timeout: Délai de grâce de stop(), en secondes.
            join_timeout: Attente maximale des lecteurs, en secondes.
            launcher: Lanceur injectable (tests).
        """
        self.working_directory = Path(working_directory or os.getcwd())
        self._logger = logger
        self._sink = sink
        self._terminate_timeout = terminate_timeout
        self._join_timeout = join_timeout
        self._launcher = launcher or ProcessLauncher(logger=logger)
        self._lock = threading.Lock()
        self._active: Set[CommandExecutor] = set()

    @classmethod
    def from_settings(
        cls,
        working_directory: Union[str, Path],
        settings: ShellSettings,
        logger: Optional[Logger] = None,
        sink: Optional[OutputSink] = None,
    ) -> "LocalShell":
        """Construit le shell à partir de la section [shell]."""
        return cls(
            working_directory,
            logger=logger,
            sink=sink,
            terminate_timeout=settings.terminate_timeout,
            join_timeout=settings.join_timeout,
        )

    def execute_command(
        self,
        command_line: Union[str, CommandLine],
        environment: Optional[Mapping[str, str]] = None,
    ) -> ExecutionResult:
        line = self._to_command_line(command_line)
        executor = CommandExecutor(
            line,
            self.working_directory,
            environment,
            launcher=self._launcher,
            collector=OutputCollector(
                sink=self._sink,
                logger=self._logger,
                join_timeout=self._join_timeout,
            ),
            logger=self._logger,
            terminate_timeout=self._terminate_timeout,
        )
        with self._lock:
            self._active.add(executor)
        try:
            return executor.execute()
        finally:
            with self._lock:
                self._active.discard(executor)

    def stop(self) -> None:
        """Interrompt toutes les exécutions en cours de ce shell."""
        with self._lock:
            active = list(self._active)
        for executor in active:
            executor.stop()

    @property
    def active_count(self) -> int:
        """Nombre d'exécutions en cours."""
        with self._lock:
            return len(self._active)

    def _to_command_line(
        self, command_line: Union[str, CommandLine]
    ) -> CommandLine:
        if isinstance(command_line, CommandLine):
            return command_line
        try:
            return CommandLine.parse(command_line)
        except CommandLineError as e:
            if self._logger:
                self._logger.log_error(str(e))
            raise
