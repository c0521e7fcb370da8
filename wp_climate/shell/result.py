"""Résultat immuable d'une exécution de commande."""

from dataclasses import dataclass
from typing import Iterable, Optional

# Sous-chaîne marquant une ligne stderr informative (progression git)
INFORMATIONAL_MARKER = "remote"


def is_informational(line: str) -> bool:
    """Indique si une ligne stderr doit être traitée comme informative.

    Heuristique conservée pour git, qui écrit sa progression
    (« remote: Counting objects ») sur stderr. Une vraie erreur d'un
    autre outil contenant « remote » est classée à tort comme
    informative.
    """
    return INFORMATIONAL_MARKER in line


def join_lines(lines: Iterable[str]) -> str:
    """Concatène des lignes en terminant chacune par un saut de ligne."""
    return "".join(f"{line}\n" for line in lines)


@dataclass(frozen=True)
class ExecutionResult:
    """Résultat de l'exécution d'une ligne de commande.

    Le succès est dérivé de la seule sortie d'erreur : toute ligne
    stderr non informative rend l'exécution non réussie, quel que
    soit le code retour.

    Attributes:
        standard_output: Sortie standard, chaque ligne terminée par
            un saut de ligne (inclut les lignes stderr informatives).
        error_output: Sortie d'erreur, même format.
        command_line: Ligne exécutée, pour les logs.
        return_code: Code retour de la dernière étape (None si inconnu).
        duration: Durée d'exécution en secondes.
    """

    standard_output: str = ""
    error_output: str = ""
    command_line: str = ""
    return_code: Optional[int] = None
    duration: float = 0.0

    @property
    def successful(self) -> bool:
        """True si la sortie d'erreur est vide."""
        return not self.error_output

    @property
    def has_errors(self) -> bool:
        return bool(self.error_output)

    def contains_in_standard_output(self, text: str) -> bool:
        return text in self.standard_output

    def contains_in_error_output(self, text: str) -> bool:
        return text in self.error_output
