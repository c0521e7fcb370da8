"""Enregistrement explicite des commandes WP-CLI et git."""

from typing import Optional

from wp_climate.commands.git import (GitAddCommand, GitCloneCommand,
                                     GitCommitCommand, GitDiffCommand,
                                     GitLsFilesCommand, GitPullCommand,
                                     GitPushCommand, GitResetCommand,
                                     GitStatusCommand)
from wp_climate.commands.registry import CommandGroup, CommandRegistry
from wp_climate.commands.wp import (CheckDbCommand, ExportDbCommand,
                                    FlushCachesCommand, FlushTransientCommand,
                                    ImportDbCommand, RepairDbCommand,
                                    RewriteFlushCommand, SearchReplaceCommand)
from wp_climate.logging.base import Logger


def register_wp_commands(registry: CommandRegistry) -> CommandRegistry:
    wp = CommandGroup.WP
    registry.register_simple(
        "check-db", CheckDbCommand, group=wp,
        description="Vérifie les tables de la base",
    )
    registry.register_simple(
        "repair-db", RepairDbCommand, group=wp,
        description="Répare les tables de la base",
    )
    registry.register(
        "export-db", ExportDbCommand, build_simple=ExportDbCommand,
        group=wp, params=ExportDbCommand.PARAMS,
        description="Exporte la base vers un fichier SQL",
    )
    registry.register(
        "import-db", ImportDbCommand, group=wp,
        params=ImportDbCommand.PARAMS,
        description="Importe un fichier SQL",
    )
    registry.register_simple(
        "flush-caches", FlushCachesCommand, group=wp,
        description="Vide le cache objet",
    )
    registry.register_simple(
        "flush-transient", FlushTransientCommand, group=wp,
        description="Supprime tous les transients",
    )
    registry.register_simple(
        "rewrite-flush", RewriteFlushCommand, group=wp,
        description="Régénère les règles de réécriture",
    )
    registry.register(
        "search-replace", SearchReplaceCommand, group=wp,
        params=SearchReplaceCommand.PARAMS,
        description="Recherche et remplace dans la base",
    )
    return registry


def register_git_commands(registry: CommandRegistry) -> CommandRegistry:
    git = CommandGroup.GIT
    registry.register_simple(
        "git-status", GitStatusCommand, group=git,
        description="État de l'arbre de travail",
    )
    parameterized = (
        ("git-add", GitAddCommand, "Ajoute des fichiers à l'index"),
        ("git-commit", GitCommitCommand, "Enregistre un commit"),
        ("git-push", GitPushCommand, "Pousse vers le dépôt distant"),
        ("git-pull", GitPullCommand, "Récupère depuis le dépôt distant"),
        ("git-clone", GitCloneCommand, "Clone le dépôt distant"),
        ("git-diff", GitDiffCommand, "Affiche les différences"),
        ("git-reset", GitResetCommand, "Réinitialise l'index"),
        ("git-ls-files", GitLsFilesCommand, "Liste les fichiers suivis"),
    )
    for name, command_class, description in parameterized:
        registry.register(
            name, command_class, group=git,
            params=command_class.PARAMS, description=description,
        )
    return registry


def build_default_registry(
    logger: Optional[Logger] = None,
) -> CommandRegistry:
    """Registre contenant toutes les commandes WP-CLI et git."""
    registry = CommandRegistry(logger)
    register_wp_commands(registry)
    register_git_commands(registry)
    return registry
