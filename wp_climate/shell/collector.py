"""Collecte concurrente des flux de sortie d'un processus.

Les sorties standard et d'erreur de la dernière étape sont vidées
par deux lecteurs parallèles. Une lecture séquentielle bloquerait
dès que le tampon d'un tube est plein alors que le processus attend
de pouvoir écrire sur l'autre.

Chaque lecteur possède ses propres listes de lignes et les remet
via un Future ; le résultat immuable est assemblé une fois les deux
lecteurs rejoints.
"""

import threading
import time
from concurrent.futures import Future
from typing import Callable, List, NamedTuple, Optional, TextIO

from wp_climate.logging.base import Logger
from wp_climate.shell.launcher import ProcessGroup
from wp_climate.shell.result import (ExecutionResult, is_informational,
                                     join_lines)
from wp_climate.shell.sink import OutputSink

DEFAULT_JOIN_TIMEOUT = 5.0


class Drained(NamedTuple):
    """Lignes recueillies par un lecteur.

    Attributes:
        standard: Lignes destinées à la sortie standard du résultat.
        errors: Lignes destinées à la sortie d'erreur du résultat.
    """

    standard: List[str]
    errors: List[str]


class OutputCollector:
    """Vide stdout/stderr en parallèle et construit l'ExecutionResult.

    Les lignes stderr contenant « remote » sont reclassées en
    sortie standard (voir result.is_informational). Elles y sont
    placées après toutes les lignes lues sur stdout : l'entrelacement
    d'origine des deux flux n'est pas conservé dans le résultat,
    seul le sink les reçoit dans l'ordre d'arrivée.

    Attributes:
        _sink: Destination temps réel optionnelle.
        _logger: Logger optionnel.
        _join_timeout: Attente maximale de chaque lecteur après la
            fin du processus, en secondes.
    """

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        logger: Optional[Logger] = None,
        join_timeout: float = DEFAULT_JOIN_TIMEOUT,
    ) -> None:
        self._sink = sink
        self._logger = logger
        self._join_timeout = join_timeout
        self._sink_failed = False

    def collect(
        self,
        group: ProcessGroup,
        started_at: Optional[float] = None,
    ) -> ExecutionResult:
        """Vide les flux de la dernière étape et attend la fin du groupe.

        Args:
            group: Processus lancés par ProcessLauncher.
            started_at: Instant du lancement (time.monotonic()) pour
                le calcul de la durée ; maintenant si None.

        Returns:
            Résultat complet et immuable.
        """
        start = started_at if started_at is not None else time.monotonic()
        process = group.last

        stdout_future = self._spawn("stdout", self._drain_stdout,
                                    process.stdout)
        stderr_future = self._spawn("stderr", self._drain_stderr,
                                    process.stderr)

        return_code = group.wait()

        out = self._join(stdout_future, "stdout")
        err = self._join(stderr_future, "stderr")

        result = ExecutionResult(
            standard_output=join_lines(out.standard + err.standard),
            error_output=join_lines(out.errors + err.errors),
            command_line=str(group.command_line),
            return_code=return_code,
            duration=time.monotonic() - start,
        )
        self._log_outcome(result)
        return result

    def _spawn(
        self,
        name: str,
        target: Callable[[TextIO], Drained],
        stream: TextIO,
    ) -> "Future[Drained]":
        """Démarre un lecteur dans un thread démon.

        Le thread démon ne retient pas l'interpréteur si un
        petit-enfant garde le tube ouvert après le délai de jointure.
        """
        future: "Future[Drained]" = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(target(stream))
            except Exception as e:
                future.set_exception(e)

        threading.Thread(
            target=run, name=f"wp-climate-{name}", daemon=True
        ).start()
        return future

    def _drain_stdout(self, stream: TextIO) -> Drained:
        drained = Drained([], [])
        try:
            for raw in stream:
                line = raw.rstrip("\r\n")
                drained.standard.append(line)
                self._forward(line, is_error=False)
        except (OSError, ValueError) as e:
            drained.errors.append(f"Erreur de lecture stdout : {e}")
        finally:
            stream.close()
        return drained

    def _drain_stderr(self, stream: TextIO) -> Drained:
        drained = Drained([], [])
        try:
            for raw in stream:
                line = raw.rstrip("\r\n")
                if is_informational(line):
                    drained.standard.append(line)
                    self._forward(line, is_error=False)
                else:
                    drained.errors.append(line)
                    self._forward(line, is_error=True)
        except (OSError, ValueError) as e:
            drained.errors.append(f"Erreur de lecture stderr : {e}")
        finally:
            stream.close()
        return drained

    def _forward(self, line: str, is_error: bool) -> None:
        """Transmet une ligne au sink sans interrompre la lecture.

        Un lecteur qui s'arrête laisserait le tube se remplir et
        bloquerait le processus : une défaillance du sink est
        journalisée une fois puis le sink est ignoré.
        """
        if self._sink is None or self._sink_failed:
            return
        try:
            self._sink.display_message(line, is_error)
        except Exception as e:
            self._sink_failed = True
            if self._logger:
                self._logger.log_error(
                    f"Affichage temps réel désactivé : {e}"
                )

    def _join(self, future: "Future[Drained]", name: str) -> Drained:
        try:
            return future.result(timeout=self._join_timeout)
        except TimeoutError:
            message = (
                f"Lecteur {name} toujours bloqué après "
                f"{self._join_timeout}s : sortie tronquée."
            )
            if self._logger:
                self._logger.log_warning(message)
            return Drained([], [message])

    def _log_outcome(self, result: ExecutionResult) -> None:
        if not self._logger:
            return
        if result.successful:
            self._logger.log_debug(
                f"Terminé (code {result.return_code}, "
                f"{result.duration:.2f}s) : {result.command_line}"
            )
        else:
            self._logger.log_warning(
                f"Sortie d'erreur non vide (code {result.return_code}) : "
                f"{result.command_line}"
            )
