"""Vérification de PHP, de WP-CLI et du répertoire WordPress.

Chaque vérification n'est exécutée que si la précédente réussit :

    PHP configuré → PHP exécutable → WP-CLI configuré
        → WP-CLI exécutable → « wp core version » réussit
"""

from typing import Optional

from wp_climate.config.models import WpCliSettings
from wp_climate.dependency.base import DependencyChecker
from wp_climate.errors.exceptions import (NotAWordPressDirectoryError,
                                          PhpNotConfiguredError,
                                          PhpNotInstalledError,
                                          WpCliNotConfiguredError,
                                          WpCliNotInstalledError)
from wp_climate.logging.base import Logger
from wp_climate.shell.builder import CommandBuilder
from wp_climate.shell.facade import Shell

VERSION_FLAG = "--version"
CORE_VERSION = ("core", "version")


class WpCliDependency(DependencyChecker):
    """Vérifie la chaîne PHP → WP-CLI → installation WordPress."""

    def __init__(
        self,
        shell: Shell,
        settings: WpCliSettings,
        logger: Optional[Logger] = None,
    ) -> None:
        super().__init__(shell, logger)
        self._settings = settings

    def validate(self) -> None:
        self.is_wordpress_directory()

    def is_php_installed(self) -> bool:
        """Vérifie que PHP est configuré et s'exécute.

        Raises:
            PhpNotConfiguredError: Chemin de PHP vide ou altéré par
                l'assainissement.
            PhpNotInstalledError: « php --version » échoue.
        """
        self._require_program(
            self._settings.php, PhpNotConfiguredError, "PHP"
        )
        self._run_version_check(
            CommandBuilder(self._settings.php).with_flag(VERSION_FLAG).build(),
            PhpNotInstalledError,
            "PHP n'est pas installé.",
        )
        return True

    def is_wp_cli_installed(self) -> bool:
        """Vérifie WP-CLI, après PHP.

        Raises:
            PhpNotConfiguredError, PhpNotInstalledError: Voir
                is_php_installed.
            WpCliNotConfiguredError: Chemin de WP-CLI vide ou altéré.
            WpCliNotInstalledError: « php wp --version » échoue.
        """
        self.is_php_installed()
        self._require_program(
            self._settings.wp, WpCliNotConfiguredError, "WP-CLI"
        )
        self._run_version_check(
            CommandBuilder(self._settings.php, self._settings.wp)
            .with_flag(VERSION_FLAG)
            .build(),
            WpCliNotInstalledError,
            "WP-CLI n'est pas installé.",
        )
        return True

    def is_wordpress_directory(self) -> bool:
        """Vérifie que le répertoire du shell est une installation WordPress.

        Raises:
            NotAWordPressDirectoryError: « wp core version » échoue.
            Ainsi que les exceptions de is_wp_cli_installed.
        """
        self.is_wp_cli_installed()
        self._run_version_check(
            CommandBuilder(self._settings.php, self._settings.wp)
            .with_args(CORE_VERSION)
            .build(),
            NotAWordPressDirectoryError,
            "Le répertoire n'est pas une installation WordPress.",
        )
        return True
