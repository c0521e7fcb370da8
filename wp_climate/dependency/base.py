"""Base commune des vérificateurs de dépendances externes."""

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Optional

from wp_climate.errors.exceptions import (DependencyError,
                                          GitNotConfiguredError,
                                          LaunchError,
                                          MissingDependencyError,
                                          NotAWordPressDirectoryError,
                                          PhpNotConfiguredError,
                                          WpCliNotConfiguredError)
from wp_climate.logging.base import Logger
from wp_climate.shell.builder import sanitize_token
from wp_climate.shell.command_line import CommandLine
from wp_climate.shell.facade import Shell
from wp_climate.shell.result import ExecutionResult

NOT_CONFIGURED_ERRORS = (
    PhpNotConfiguredError,
    WpCliNotConfiguredError,
    GitNotConfiguredError,
)


class DependencyStatus(StrEnum):
    """États d'une chaîne de vérification."""

    UNCHECKED = "unchecked"
    NOT_CONFIGURED = "not_configured"
    NOT_RUNNABLE = "not_runnable"
    INVALID_PROJECT = "invalid_project"
    VERIFIED = "verified"


class DependencyChecker(ABC):
    """Interface des vérificateurs.

    Chaque vérification est rejouée à chaque appel, sans cache :
    un appelant qui a besoin d'un cache l'ajoute lui-même.

    Attributes:
        last_status: État de la dernière vérification via status(),
            UNCHECKED avant le premier appel. Purement informatif.
    """

    def __init__(self, shell: Shell, logger: Optional[Logger] = None):
        if shell is None:
            raise ValueError("Le shell est requis.")
        self._shell = shell
        self._logger = logger
        self.last_status = DependencyStatus.UNCHECKED

    @abstractmethod
    def validate(self) -> None:
        """Exécute la chaîne complète de vérifications.

        Raises:
            DependencyError: À la première condition non remplie.
        """
        pass

    def status(self) -> DependencyStatus:
        """Résume la chaîne de vérifications en un état affichable."""
        try:
            self.validate()
            status = DependencyStatus.VERIFIED
        except NOT_CONFIGURED_ERRORS:
            status = DependencyStatus.NOT_CONFIGURED
        except NotAWordPressDirectoryError:
            status = DependencyStatus.INVALID_PROJECT
        except MissingDependencyError:
            status = DependencyStatus.NOT_RUNNABLE
        self.last_status = status
        return status

    def _require_program(
        self,
        program: str,
        error_type: type[DependencyError],
        label: str,
    ) -> str:
        """Vérifie qu'un exécutable configuré survit à l'assainissement.

        Un chemin vide, ou modifié par la liste blanche des jetons,
        désignerait un autre programme : il est traité comme non
        configuré.

        Args:
            program: Valeur de la configuration.
            error_type: Exception *NotConfiguredError à lever.
            label: Nom de l'outil pour le message (ex: "PHP").

        Returns:
            Le chemin tel que configuré.
        """
        if not program or not program.strip():
            raise error_type(f"Le chemin de {label} n'est pas configuré.")
        if sanitize_token(program) != program.strip():
            self._log_failure(
                f"Chemin de {label} refusé : {program!r}"
            )
            raise error_type(
                f"Le chemin de {label} contient des caractères non "
                f"autorisés : {program!r}"
            )
        return program

    def _run_version_check(
        self,
        command_line: CommandLine,
        error_type: type[DependencyError],
        message: str,
    ) -> ExecutionResult:
        """Exécute une commande sans effet de bord et classe l'échec.

        Un échec de lancement ou une sortie d'erreur non vide lève
        error_type.

        Args:
            command_line: Commande de vérification (ex: php --version).
            error_type: Exception levée en cas d'échec.
            message: Message de l'exception.

        Returns:
            Résultat de la vérification réussie.
        """
        try:
            result = self._shell.execute_command(command_line)
        except LaunchError as e:
            self._log_failure(f"{message} ({e})")
            raise error_type(message) from e
        if not result.successful:
            self._log_failure(f"{message} : {result.error_output.strip()}")
            raise error_type(message)
        return result

    def _log_failure(self, message: str) -> None:
        if self._logger:
            self._logger.log_warning(message)
