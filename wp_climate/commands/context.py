"""Contextes partagés passés aux commandes par la fabrique."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from wp_climate.config.models import GitSettings, WpCliSettings
from wp_climate.dependency.git import GitDependency
from wp_climate.dependency.wpcli import WpCliDependency
from wp_climate.shell.facade import Shell


@dataclass(frozen=True)
class WpCliContext:
    """Contexte des commandes WP-CLI.

    Attributes:
        shell: Façade d'exécution partagée.
        settings: Chemins de php, wp-cli et mysql.
        dependency: Vérificateur PHP / WP-CLI / WordPress.
        working_directory: Racine de l'installation WordPress.
    """

    shell: Shell
    settings: WpCliSettings
    dependency: WpCliDependency
    working_directory: Path


@dataclass(frozen=True)
class GitContext:
    """Contexte des commandes git.

    Attributes:
        shell: Façade d'exécution partagée.
        settings: Exécutable git, dépôt distant et clé SSH.
        dependency: Vérificateur git.
        working_directory: Racine du dépôt.
    """

    shell: Shell
    settings: GitSettings
    dependency: GitDependency
    working_directory: Path

    def environment(self) -> Dict[str, str]:
        """Surcouche d'environnement (GIT_SSH_COMMAND, GIT_FLUSH)."""
        return self.settings.environment()
