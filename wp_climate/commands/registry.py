"""Registre des commandes par nom.

Chaque commande est enregistrée explicitement avec ses
constructeurs : aucune découverte par introspection. Une entrée
porte un constructeur paramétré ``(context, params)``, un
constructeur simple ``(context)``, ou les deux.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import (Any, Callable, Dict, Iterator, List, Mapping, Optional,
                    Sequence, Tuple)

from wp_climate.commands.base import Command
from wp_climate.commands.params import CommandParam
from wp_climate.errors.exceptions import UnknownCommandError
from wp_climate.logging.base import Logger

CommandBuild = Callable[[Any, Mapping[str, Any]], Command]
SimpleCommandBuild = Callable[[Any], Command]


class CommandGroup(StrEnum):
    """Groupes de commandes, chacun associé à un contexte."""

    WP = "wp"
    GIT = "git"


@dataclass(frozen=True)
class CommandEntry:
    """Constructeurs et métadonnées d'une commande enregistrée.

    Attributes:
        name: Nom unique (ex: "export-db").
        group: Groupe déterminant le contexte à fournir.
        build: Constructeur (context, params) -> Command.
        build_simple: Constructeur (context) -> Command.
        params: Paramètres déclarés.
        description: Texte d'aide.
    """

    name: str
    group: CommandGroup
    build: Optional[CommandBuild] = None
    build_simple: Optional[SimpleCommandBuild] = None
    params: Tuple[CommandParam, ...] = ()
    description: str = ""

    @property
    def required_params(self) -> List[str]:
        return [param.name for param in self.params if param.required]


class CommandRegistry:
    """Table nom → CommandEntry."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger
        self._entries: Dict[str, CommandEntry] = {}

    def register(
        self,
        name: str,
        build: Optional[CommandBuild] = None,
        *,
        build_simple: Optional[SimpleCommandBuild] = None,
        group: CommandGroup = CommandGroup.WP,
        params: Sequence[CommandParam] = (),
        description: str = "",
    ) -> CommandEntry:
        """Enregistre une commande.

        Un second enregistrement sous le même nom remplace le
        premier.

        Args:
            name: Nom de la commande.
            build: Constructeur paramétré.
            build_simple: Constructeur sans paramètres.
            group: Groupe de la commande.
            params: Paramètres déclarés.
            description: Texte d'aide.

        Returns:
            L'entrée enregistrée.

        Raises:
            ValueError: Nom vide.
        """
        if not name or not name.strip():
            raise ValueError("Le nom de commande est requis.")
        if name in self._entries and self._logger:
            self._logger.log_warning(
                f"Commande « {name} » déjà enregistrée, remplacée."
            )
        entry = CommandEntry(
            name=name,
            group=CommandGroup(group),
            build=build,
            build_simple=build_simple,
            params=tuple(params),
            description=description,
        )
        self._entries[name] = entry
        return entry

    def register_simple(
        self,
        name: str,
        build_simple: SimpleCommandBuild,
        *,
        group: CommandGroup = CommandGroup.WP,
        description: str = "",
    ) -> CommandEntry:
        """Enregistre une commande qui ne prend que le contexte."""
        return self.register(
            name,
            build_simple=build_simple,
            group=group,
            description=description,
        )

    def resolve(self, name: str) -> CommandEntry:
        """
        Raises:
            UnknownCommandError: Aucun enregistrement sous ce nom.
        """
        entry = self._entries.get(name)
        if entry is None:
            raise UnknownCommandError(f"Commande introuvable : {name}")
        return entry

    def get(self, name: str) -> Optional[CommandEntry]:
        return self._entries.get(name)

    def entries(
        self, group: Optional[CommandGroup] = None
    ) -> List[CommandEntry]:
        """Entrées triées par nom, éventuellement filtrées par groupe."""
        return [
            self._entries[name]
            for name in sorted(self._entries)
            if group is None or self._entries[name].group == group
        ]

    def names(self, group: Optional[CommandGroup] = None) -> List[str]:
        return [entry.name for entry in self.entries(group)]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self.entries())
