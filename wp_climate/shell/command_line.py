"""Modèle de ligne de commande : assainissement et découpage en étapes.

Une ligne textuelle est transformée en une suite d'étapes (argv),
jamais en une chaîne passée à un shell système. Le caractère « | »
sépare les étapes d'un pipeline.

Le découpage est volontairement naïf : séparation sur les blancs,
sans gestion des guillemets contenant des espaces, des échappements
ni des sous-shells. Les guillemets simples ou doubles en début et
en fin de jeton sont retirés après découpage.

Example:
    >>> line = CommandLine.parse("git log --oneline | head -n 5")
    >>> line.stages
    (('git', 'log', '--oneline'), ('head', '-n', '5'))
    >>> line.is_pipeline
    True
"""

import re
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from wp_climate.errors.exceptions import CommandLineError

PIPE = "|"
QUOTES = "'\""

# Lettres, chiffres, blancs et / _ - | = " ' . : @
_DISALLOWED = re.compile(r"[^a-zA-Z0-9\s/_\-|=\"'.:@]")


def sanitize(raw: str) -> str:
    """Retire tout caractère hors liste blanche puis les blancs de bord.

    L'opération est idempotente : sanitize(sanitize(x)) == sanitize(x).

    Args:
        raw: Ligne de commande brute.

    Returns:
        Ligne assainie, éventuellement vide.
    """
    return _DISALLOWED.sub("", raw).strip()


def tokenize(segment: str) -> Tuple[str, ...]:
    """Découpe une étape sur les blancs et retire les guillemets de bord.

    Les jetons réduits à des guillemets sont ignorés.
    """
    tokens = (token.strip(QUOTES) for token in segment.split())
    return tuple(token for token in tokens if token)


@dataclass(frozen=True)
class CommandLine:
    """Ligne de commande immuable, découpée en étapes.

    Attributes:
        stages: Étapes ordonnées ; chacune est un argv non vide.
    """

    stages: Tuple[Tuple[str, ...], ...]

    def __post_init__(self) -> None:
        if not self.stages:
            raise CommandLineError("La ligne de commande est vide.")
        for index, stage in enumerate(self.stages):
            if not stage:
                raise CommandLineError(
                    f"L'étape {index + 1} de la ligne de commande est vide."
                )

    @classmethod
    def parse(cls, raw: str) -> "CommandLine":
        """Construit le modèle depuis une ligne textuelle.

        Args:
            raw: Ligne brute (ex: "php wp-cli.phar --version").

        Returns:
            CommandLine assainie.

        Raises:
            CommandLineError: Ligne vide après assainissement,
                ou étape sans jeton (ex: "ls | | wc").
        """
        sanitized = sanitize(raw)
        if not sanitized:
            raise CommandLineError(
                f"Ligne de commande vide après assainissement: {raw!r}"
            )
        return cls(tuple(tokenize(part) for part in sanitized.split(PIPE)))

    @classmethod
    def from_stages(
        cls, stages: Iterable[Sequence[str]]
    ) -> "CommandLine":
        """Construit le modèle depuis des argv déjà découpés.

        Aucun assainissement n'est appliqué : l'appelant fournit
        des jetons exacts (ex: un message de commit avec espaces).
        """
        return cls(tuple(tuple(str(token) for token in s) for s in stages))

    @property
    def is_pipeline(self) -> bool:
        """True si la ligne comporte plusieurs étapes."""
        return len(self.stages) > 1

    @property
    def program(self) -> str:
        """Programme de la première étape."""
        return self.stages[0][0]

    def __str__(self) -> str:
        return f" {PIPE} ".join(" ".join(stage) for stage in self.stages)
