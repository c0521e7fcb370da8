"""Fabrique de commandes à partir du registre."""

from typing import Any, Mapping, Optional

from wp_climate.commands.base import Command
from wp_climate.commands.registry import CommandRegistry
from wp_climate.errors.exceptions import (CommandConstructionError,
                                          CommandParameterError)
from wp_climate.logging.base import Logger


class CommandFactory:
    """Construit une commande par son nom.

    Le constructeur paramétré est préféré ; à défaut, le
    constructeur simple est utilisé et les paramètres ignorés.

    Example:
        >>> factory = CommandFactory(build_default_registry())
        >>> command = factory.create(
        ...     "export-db", wp_context, {"file_name": "backup.sql"}
        ... )
        >>> result = command.execute()
    """

    def __init__(
        self,
        registry: CommandRegistry,
        logger: Optional[Logger] = None,
    ) -> None:
        self._registry = registry
        self._logger = logger

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def create(
        self,
        name: str,
        context: Any,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Command:
        """Construit la commande enregistrée sous ``name``.

        Args:
            name: Nom de la commande.
            context: Contexte partagé (WpCliContext, GitContext).
            params: Paramètres de construction.

        Returns:
            La commande, prête à être exécutée.

        Raises:
            UnknownCommandError: Nom inconnu.
            CommandParameterError: Paramètre requis absent ou invalide.
            CommandConstructionError: Aucun constructeur utilisable,
                ou échec inattendu du constructeur.
        """
        entry = self._registry.resolve(name)
        try:
            if entry.build is not None:
                return entry.build(context, dict(params or {}))
            if entry.build_simple is not None:
                if params and self._logger:
                    self._logger.log_debug(
                        f"Paramètres ignorés pour « {name} » : "
                        f"{sorted(params)}"
                    )
                return entry.build_simple(context)
        except (CommandParameterError, CommandConstructionError):
            raise
        except (TypeError, ValueError, KeyError) as e:
            raise CommandConstructionError(
                f"Impossible de construire « {name} » : {e}"
            ) from e
        raise CommandConstructionError(
            f"Aucun constructeur pour la commande « {name} »."
        )
