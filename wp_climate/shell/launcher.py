"""Lancement de processus et de pipelines natifs via subprocess.

Ce module fournit :
    - ProcessGroup : les processus d'une exécution (une étape ou un
      pipeline) et leur arrêt en deux temps.
    - ProcessLauncher : démarrage des étapes d'une CommandLine.

Dans un pipeline, la sortie standard de l'étape i est passée
directement comme entrée standard de l'étape i+1 : le noyau relie
les processus, l'application ne recopie aucun octet. Seuls les flux
de la dernière étape sont exposés au collecteur ; la sortie d'erreur
des étapes intermédiaires est redirigée vers /dev/null et seul le
code retour de la dernière étape est observé.

Example:
    launcher = ProcessLauncher(logger=logger)
    group = launcher.launch(
        CommandLine.parse("git ls-files | wc -l"),
        working_directory="/var/www/site",
        environment={"GIT_FLUSH": "1"},
    )
"""

import os
import subprocess  # nosec B404
import threading
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

from wp_climate.errors.exceptions import LaunchError
from wp_climate.logging.base import Logger
from wp_climate.shell.command_line import CommandLine

DEFAULT_TERMINATE_TIMEOUT = 1.0


class ProcessGroup:
    """Processus démarrés pour une exécution.

    Attributes:
        command_line: Ligne de commande à l'origine du groupe.
        processes: Processus dans l'ordre des étapes.
    """

    def __init__(
        self,
        command_line: CommandLine,
        processes: List[subprocess.Popen],
        logger: Optional[Logger] = None,
    ) -> None:
        if not processes:
            raise ValueError("Un groupe de processus ne peut être vide.")
        self.command_line = command_line
        self.processes: Tuple[subprocess.Popen, ...] = tuple(processes)
        self._logger = logger
        self._terminate_lock = threading.Lock()

    @property
    def last(self) -> subprocess.Popen:
        """Dernière étape, dont les flux sont collectés."""
        return self.processes[-1]

    @property
    def is_running(self) -> bool:
        """True si au moins une étape est encore vivante."""
        return any(p.poll() is None for p in self.processes)

    def wait(self) -> int:
        """Attend la fin de toutes les étapes.

        Returns:
            Code retour de la dernière étape.
        """
        return_code = self.last.wait()
        for process in self.processes[:-1]:
            process.wait()
        return return_code

    def terminate(
        self, timeout: float = DEFAULT_TERMINATE_TIMEOUT
    ) -> None:
        """Arrête toutes les étapes : SIGTERM puis SIGKILL.

        Le signal de terminaison est d'abord envoyé à chaque étape
        vivante ; chacune dispose ensuite de timeout secondes pour
        se terminer avant d'être tuée. L'arrêt forcé est journalisé,
        jamais levé. Appelable depuis un autre thread que celui qui
        attend la fin du groupe.

        Args:
            timeout: Délai de grâce par étape, en secondes.
        """
        with self._terminate_lock:
            for process in self.processes:
                if process.poll() is None:
                    try:
                        process.terminate()
                    except ProcessLookupError:
                        pass  # terminé entre poll() et le signal
            for process in self.processes:
                try:
                    process.wait(timeout=timeout)
                except subprocess.TimeoutExpired:
                    process.kill()
                    process.wait()
                    self._log_warning(
                        f"Processus {process.pid} tué après {timeout}s "
                        f"sans réponse au signal d'arrêt : "
                        f"{self.command_line}"
                    )

    def _log_warning(self, message: str) -> None:
        if self._logger:
            self._logger.log_warning(message)


class ProcessLauncher:
    """Démarre une CommandLine sous forme de processus natifs.

    Attributes:
        _logger: Logger optionnel.
        _default_env: Variables fusionnées à chaque lancement.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        default_env: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._logger = logger
        self._default_env = dict(default_env) if default_env else None

    def _build_env(
        self,
        environment: Optional[Mapping[str, str]] = None,
    ) -> Optional[Dict[str, str]]:
        """Construit l'environnement d'exécution.

        Fusionne os.environ, default_env puis la surcouche de l'appel.
        Retourne None si aucune surcouche (subprocess hérite alors de
        os.environ).
        """
        if self._default_env is None and not environment:
            return None
        merged = os.environ.copy()
        if self._default_env:
            merged.update(self._default_env)
        if environment:
            merged.update(environment)
        return merged

    def launch(
        self,
        command_line: CommandLine,
        working_directory: Union[str, Path],
        environment: Optional[Mapping[str, str]] = None,
    ) -> ProcessGroup:
        """Démarre une étape unique ou un pipeline.

        Répertoire de travail et environnement s'appliquent à toutes
        les étapes. L'entrée standard de la première étape est
        /dev/null.

        Args:
            command_line: Étapes à démarrer.
            working_directory: Répertoire de travail des processus.
            environment: Surcouche d'environnement.

        Returns:
            ProcessGroup dont la dernière étape expose stdout/stderr
            en mode texte.

        Raises:
            LaunchError: Si une étape ne peut être démarrée ; les
                étapes déjà démarrées sont tuées.
        """
        env = self._build_env(environment)
        cwd = str(working_directory)
        stages = command_line.stages
        processes: List[subprocess.Popen] = []
        upstream = None

        if self._logger:
            kind = "pipeline" if command_line.is_pipeline else "commande"
            self._logger.log_info(
                f"Exécution ({kind}) : {command_line} [cwd={cwd}]"
            )

        try:
            for index, stage in enumerate(stages):
                is_last = index == len(stages) - 1
                process = subprocess.Popen(  # nosec B603
                    list(stage),
                    stdin=upstream if upstream is not None
                    else subprocess.DEVNULL,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE if is_last
                    else subprocess.DEVNULL,
                    cwd=cwd,
                    env=env,
                    text=is_last,
                    encoding="utf-8" if is_last else None,
                    errors="replace" if is_last else None,
                )
                if upstream is not None:
                    # L'étape suivante détient sa copie du descripteur
                    upstream.close()
                upstream = None if is_last else process.stdout
                processes.append(process)
        except OSError as e:
            if upstream is not None:
                upstream.close()
            self._abort(processes)
            message = (
                f"Impossible de démarrer « {' '.join(stages[len(processes)])} »"
                f" : {e}"
            )
            if self._logger:
                self._logger.log_error(message)
            raise LaunchError(message, str(command_line)) from e

        return ProcessGroup(command_line, processes, logger=self._logger)

    @staticmethod
    def _abort(processes: List[subprocess.Popen]) -> None:
        """Tue les étapes déjà démarrées d'un pipeline avorté."""
        for process in processes:
            process.kill()
            process.wait()
            for stream in (process.stdout, process.stderr):
                if stream is not None:
                    stream.close()
