"""Modèles Pydantic de la configuration wp-climate.

Structure d'un fichier TOML complet :

    [wpcli]
    php = "/usr/bin/php"
    wp = "/usr/local/bin/wp-cli.phar"
    mysql = "/usr/bin/mysql"

    [git]
    git = "git"
    repo_url = "git@github.com:example/site.git"
    ssh_private_key = "~/.ssh/id_ed25519"

    [shell]
    terminate_timeout = 1.0
    join_timeout = 5.0

    [logging]
    level = "INFO"
    file = "~/.local/state/wp-climate/wp-climate.log"

    [flows]
    directory = "~/.config/wp-climate/flows"

Toutes les sections sont optionnelles.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, field_validator


def expand_home_path(value: str) -> str:
    """Développe « ~ » dans un chemin d'exécutable.

    « ~ » ne fait pas partie de la liste blanche des jetons :
    non développé, « ~/bin/php » deviendrait « /bin/php ».
    """
    value = value.strip()
    return os.path.expanduser(value) if value else value


class WpCliSettings(BaseModel):
    """Chemins des exécutables utilisés par les commandes WP-CLI.

    Attributes:
        php: Interpréteur PHP (chemin ou nom dans le PATH).
        wp: Archive ou script WP-CLI exécuté par PHP.
        mysql: Client mysql, dont le répertoire est ajouté au PATH
            des commandes de base de données.
    """

    php: str = ""
    wp: str = ""
    mysql: str = ""

    model_config = {"extra": "forbid"}

    @field_validator("php", "wp")
    @classmethod
    def expand_home(cls, v: str) -> str:
        return expand_home_path(v)

    def database_environment(self) -> Dict[str, str]:
        """Surcouche d'environnement pour les commandes « db ».

        WP-CLI invoque mysql/mysqldump par leur nom : le répertoire
        du client configuré est placé en tête du PATH.

        Returns:
            {"PATH": ...} ou dict vide si mysql n'est pas configuré.
        """
        if not self.mysql:
            return {}
        mysql_dir = os.path.dirname(os.path.expanduser(self.mysql))
        if not mysql_dir:
            return {}
        current = os.environ.get("PATH", "")
        return {"PATH": os.pathsep.join(p for p in (mysql_dir, current) if p)}


class GitSettings(BaseModel):
    """Configuration des commandes git.

    Attributes:
        git: Exécutable git.
        repo_url: Dépôt distant par défaut (clone).
        ssh_private_key: Clé privée injectée via GIT_SSH_COMMAND.
    """

    git: str = "git"
    repo_url: Optional[str] = None
    ssh_private_key: Optional[str] = None

    model_config = {"extra": "forbid"}

    @field_validator("git")
    @classmethod
    def expand_home(cls, v: str) -> str:
        return expand_home_path(v)

    def environment(self) -> Dict[str, str]:
        """Retourne la surcouche d'environnement des commandes git."""
        env = {"GIT_FLUSH": "1"}
        if self.ssh_private_key:
            key = os.path.expanduser(self.ssh_private_key)
            env["GIT_SSH_COMMAND"] = (
                f"ssh -i {key} -o StrictHostKeyChecking=no "
                "-o UserKnownHostsFile=/dev/null"
            )
        return env


class ShellSettings(BaseModel):
    """Délais du moteur d'exécution, en secondes."""

    terminate_timeout: float = 1.0
    join_timeout: float = 5.0

    model_config = {"extra": "forbid"}

    @field_validator("terminate_timeout", "join_timeout")
    @classmethod
    def must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Le délai doit être strictement positif")
        return v


class LoggingSettings(BaseModel):
    """Niveau, format et fichier du journal."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Path = Path("~/.local/state/wp-climate/wp-climate.log")

    model_config = {"extra": "forbid"}

    @field_validator("level")
    @classmethod
    def must_be_known_level(cls, v: str) -> str:
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Niveau de log inconnu: {v}")
        return v.upper()


class FlowSettings(BaseModel):
    """Répertoire des flux enregistrés (un fichier JSON par flux)."""

    directory: Path = Path("~/.config/wp-climate/flows")

    model_config = {"extra": "forbid"}

    @field_validator("directory")
    @classmethod
    def expand_home(cls, v: Path) -> Path:
        return v.expanduser()


class AppSettings(BaseModel):
    """Configuration complète de l'application."""

    wpcli: WpCliSettings = WpCliSettings()
    git: GitSettings = GitSettings()
    shell: ShellSettings = ShellSettings()
    logging: LoggingSettings = LoggingSettings()
    flows: FlowSettings = FlowSettings()

    model_config = {"extra": "forbid"}
