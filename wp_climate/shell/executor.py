"""Exécution unique d'une CommandLine, arrêtable depuis un autre thread."""

import dataclasses
import threading
import time
from pathlib import Path
from typing import Mapping, Optional, Union

from wp_climate.logging.base import Logger
from wp_climate.shell.collector import OutputCollector
from wp_climate.shell.command_line import CommandLine
from wp_climate.shell.launcher import (DEFAULT_TERMINATE_TIMEOUT,
                                       ProcessGroup, ProcessLauncher)
from wp_climate.shell.result import ExecutionResult

STOPPED_MESSAGE = "Exécution interrompue."


class CommandExecutor:
    """Lance une ligne de commande et collecte son résultat.

    Une instance correspond à une seule exécution : execute() ne
    peut être appelée qu'une fois. stop() peut être appelée à tout
    moment depuis un autre thread ; le verrou ne protège que l'accès
    au groupe de processus, jamais l'attente de la fin d'exécution.

    Une exécution interrompue n'est jamais réussie : STOPPED_MESSAGE
    est ajouté à la sortie d'erreur.
    """

    def __init__(
        self,
        command_line: CommandLine,
        working_directory: Union[str, Path],
        environment: Optional[Mapping[str, str]] = None,
        launcher: Optional[ProcessLauncher] = None,
        collector: Optional[OutputCollector] = None,
        logger: Optional[Logger] = None,
        terminate_timeout: float = DEFAULT_TERMINATE_TIMEOUT,
    ) -> None:
        """Prépare l'exécution.

        Args:
            command_line: Ligne à exécuter.
            working_directory: Répertoire de travail.
            environment: Surcouche d'environnement.
            launcher: Lanceur (ProcessLauncher par défaut).
            collector: Collecteur (OutputCollector par défaut).
            logger: Logger optionnel.
            terminate_timeout: Délai de grâce de stop(), en secondes.
        """
        self.command_line = command_line
        self.working_directory = working_directory
        self.environment = environment
        self._logger = logger
        self._launcher = launcher or ProcessLauncher(logger=logger)
        self._collector = collector or OutputCollector(logger=logger)
        self._terminate_timeout = terminate_timeout
        self._lock = threading.Lock()
        self._group: Optional[ProcessGroup] = None
        self._started = False
        self._stop_requested = False

    @property
    def is_running(self) -> bool:
        """True si des processus de cette exécution sont vivants."""
        with self._lock:
            group = self._group
        return group is not None and group.is_running

    def execute(self) -> ExecutionResult:
        """Exécute la ligne et bloque jusqu'à la fin des processus.

        Returns:
            Résultat de l'exécution.

        Raises:
            LaunchError: Si un processus ne peut être démarré.
            RuntimeError: Si execute() a déjà été appelée.
        """
        with self._lock:
            if self._started:
                raise RuntimeError(
                    "Une exécution ne peut être lancée qu'une fois."
                )
            self._started = True
            if self._stop_requested:
                return ExecutionResult(
                    error_output=f"{STOPPED_MESSAGE}\n",
                    command_line=str(self.command_line),
                )
            started_at = time.monotonic()
            self._group = self._launcher.launch(
                self.command_line, self.working_directory, self.environment
            )
            group = self._group

        try:
            result = self._collector.collect(group, started_at=started_at)
        except KeyboardInterrupt:
            self.stop()
            raise

        with self._lock:
            stopped = self._stop_requested
        if stopped:
            result = dataclasses.replace(
                result,
                error_output=f"{result.error_output}{STOPPED_MESSAGE}\n",
            )
        return result

    def stop(self) -> None:
        """Arrête l'exécution en deux temps (SIGTERM puis SIGKILL).

        Sans effet si les processus sont déjà terminés.
        """
        with self._lock:
            self._stop_requested = True
            group = self._group
        if group is None:
            return
        if self._logger:
            self._logger.log_info(f"Arrêt demandé : {self.command_line}")
        group.terminate(self._terminate_timeout)
