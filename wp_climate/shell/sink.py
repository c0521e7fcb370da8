"""Destinations temps réel des lignes produites par une commande.

Le collecteur transmet chaque ligne dès sa lecture, étiquetée
erreur ou non. Les deux lecteurs (stdout, stderr) tournent dans
des threads distincts : une implémentation doit tolérer des appels
concurrents.

Classes :
    OutputSink : Interface abstraite.
    LoggerOutputSink : Lignes vers un Logger (fichier).
    ConsoleOutputSink : Lignes vers la console, erreurs en rouge.
"""

import sys
import threading
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from wp_climate.logging.base import Logger


class OutputSink(ABC):
    """Interface abstraite pour l'affichage temps réel des lignes."""

    @abstractmethod
    def display_message(self, message: str, is_error: bool) -> None:
        """Affiche une ligne de sortie.

        Args:
            message: Ligne sans saut de ligne final.
            is_error: True pour une ligne de la sortie d'erreur.
        """
        pass


class LoggerOutputSink(OutputSink):
    """Transmet les lignes au Logger (info ou erreur)."""

    def __init__(self, logger: Logger, prefix: str = "") -> None:
        self._logger = logger
        self._prefix = prefix

    def display_message(self, message: str, is_error: bool) -> None:
        if is_error:
            self._logger.log_error(f"{self._prefix}{message}")
        else:
            self._logger.log_info(f"{self._prefix}{message}")


class ConsoleOutputSink(OutputSink):
    """Affiche les lignes sur la console.

    Les lignes d'erreur vont sur stderr, en rouge si le flux est
    un terminal (TTY), afin de ne pas polluer les redirections.

    Styles ANSI :
        erreur → \\033[0;31m (rouge)
        reset  → \\033[0m
    """

    RESET = "\033[0m"
    ERROR_STYLE = "\033[0;31m"

    def __init__(
        self,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self._out = out
        self._err = err
        self._lock = threading.Lock()

    @staticmethod
    def _is_tty(stream: TextIO) -> bool:
        return hasattr(stream, "isatty") and stream.isatty()

    def display_message(self, message: str, is_error: bool) -> None:
        stream = (self._err or sys.stderr) if is_error else (
            self._out or sys.stdout
        )
        if is_error and self._is_tty(stream):
            message = f"{self.ERROR_STYLE}{message}{self.RESET}"
        with self._lock:
            stream.write(f"{message}\n")
            stream.flush()
