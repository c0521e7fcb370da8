"""Vérification de l'exécutable git."""

from typing import Optional

from wp_climate.config.models import GitSettings
from wp_climate.dependency.base import DependencyChecker
from wp_climate.errors.exceptions import (GitNotConfiguredError,
                                          GitNotInstalledError)
from wp_climate.logging.base import Logger
from wp_climate.shell.builder import CommandBuilder
from wp_climate.shell.facade import Shell


class GitDependency(DependencyChecker):
    """Vérifie que git est configuré et répond à « git --version »."""

    def __init__(
        self,
        shell: Shell,
        settings: Optional[GitSettings] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        super().__init__(shell, logger)
        self._settings = settings or GitSettings()

    def validate(self) -> None:
        self.is_git_installed()

    def is_git_installed(self) -> bool:
        """
        Raises:
            GitNotConfiguredError: Chemin de git vide ou altéré.
            GitNotInstalledError: « git --version » échoue.
        """
        self._require_program(
            self._settings.git, GitNotConfiguredError, "git"
        )
        self._run_version_check(
            CommandBuilder(self._settings.git).with_flag("--version").build(),
            GitNotInstalledError,
            "Git n'est pas installé.",
        )
        return True
