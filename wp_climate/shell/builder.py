"""Constructeur fluent de lignes de commande.

Les commandes WP-CLI et Git interpolent des valeurs issues de la
configuration (chemins, URL de dépôt, messages). Le constructeur
assainit chaque jeton individuellement avec la même liste blanche
que CommandLine.parse, mais conserve les espaces internes : un
message de commit « corrige le thème » reste un seul argument.

Example:
    Construction d'une commande WP-CLI :

        line = (
            CommandBuilder("php", "/opt/wp-cli.phar")
            .with_option("--path", "/var/www/site")
            .with_args(["search-replace", "http://old", "https://new"])
            .with_flag_if("--dry-run", dry_run)
            .build()
        )
"""

import re
from typing import Iterable, List, Optional

from wp_climate.errors.exceptions import CommandLineError
from wp_climate.shell.command_line import CommandLine, QUOTES

# Même liste blanche que sanitize(), sans le séparateur de pipeline
_DISALLOWED_IN_TOKEN = re.compile(r"[^a-zA-Z0-9\s/_\-=\"'.:@]")


def sanitize_token(value: object) -> str:
    """Assainit une valeur interpolée destinée à un seul argument."""
    return _DISALLOWED_IN_TOKEN.sub("", str(value)).strip().strip(QUOTES)


class CommandBuilder:
    """Constructeur fluent pour assembler une CommandLine."""

    def __init__(self, program: str, *leading: str) -> None:
        """Initialise le constructeur avec le programme.

        Args:
            program: Nom ou chemin du programme à exécuter.
            *leading: Jetons placés juste après le programme
                (ex: sous-commande git, script WP-CLI).

        Raises:
            CommandLineError: Si program est vide après assainissement.
        """
        self._stages: List[List[str]] = []
        self._start_stage(program, leading)

    def _start_stage(self, program: str, leading: Iterable[str]) -> None:
        cleaned = sanitize_token(program or "")
        if not cleaned:
            raise CommandLineError("Le programme est requis.")
        self._options: List[str] = []
        self._args: List[str] = []
        self._head: List[str] = [cleaned]
        self._head.extend(t for t in map(sanitize_token, leading) if t)

    def _flush_stage(self) -> None:
        self._stages.append(self._head + self._options + self._args)

    def _append(self, target: List[str], *values: object) -> None:
        target.extend(t for t in map(sanitize_token, values) if t)

    def with_options(self, options: List[str]) -> "CommandBuilder":
        """Ajoute une liste d'options (ex: ['--all-tables'])."""
        self._append(self._options, *options)
        return self

    def with_flag(self, flag: str) -> "CommandBuilder":
        """Ajoute un flag simple."""
        self._append(self._options, flag)
        return self

    def with_flag_if(
        self, flag: str, condition: bool
    ) -> "CommandBuilder":
        """Ajoute un flag seulement si la condition est vraie."""
        if condition:
            self._append(self._options, flag)
        return self

    def with_option(self, key: str, value: object) -> "CommandBuilder":
        """Ajoute une option au format 'clé=valeur'."""
        self._append(self._options, f"{key}={sanitize_token(value)}")
        return self

    def with_option_if(
        self,
        key: str,
        value: Optional[object],
        condition: bool = True,
    ) -> "CommandBuilder":
        """Ajoute une option 'clé=valeur' si condition et value non None."""
        if condition and value is not None:
            self.with_option(key, value)
        return self

    def with_separate_option(
        self, key: str, value: object
    ) -> "CommandBuilder":
        """Ajoute une option en deux arguments : clé puis valeur.

        La valeur est conservée même si elle contient des espaces.
        """
        self._append(self._options, key)
        self._append(self._options, value)
        return self

    def with_args(self, args: Iterable[object]) -> "CommandBuilder":
        """Ajoute les arguments positionnels finaux de l'étape."""
        self._append(self._args, *args)
        return self

    def pipe_to(self, program: str, *leading: str) -> "CommandBuilder":
        """Termine l'étape courante et ouvre une nouvelle étape."""
        self._flush_stage()
        self._start_stage(program, leading)
        return self

    def build(self) -> CommandLine:
        """Construit la ligne de commande.

        Le constructeur reste utilisable : build() peut être rappelé
        après l'ajout d'options à la dernière étape.
        """
        stages = self._stages + [self._head + self._options + self._args]
        return CommandLine.from_stages(stages)
