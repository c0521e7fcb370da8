"""Registre, fabrique et implémentations des commandes."""

from wp_climate.commands.base import BaseGitCommand, BaseWpCommand, Command
from wp_climate.commands.context import GitContext, WpCliContext
from wp_climate.commands.factory import CommandFactory
from wp_climate.commands.params import (CommandParam, ParamType, resolve_params,
                                        to_bool, to_list)
from wp_climate.commands.registrar import (build_default_registry,
                                           register_git_commands,
                                           register_wp_commands)
from wp_climate.commands.registry import (CommandEntry, CommandGroup,
                                          CommandRegistry)

__all__ = [
    "BaseGitCommand",
    "BaseWpCommand",
    "Command",
    "CommandEntry",
    "CommandFactory",
    "CommandGroup",
    "CommandRegistry",
    "GitContext",
    "CommandParam",
    "ParamType",
    "WpCliContext",
    "build_default_registry",
    "register_git_commands",
    "register_wp_commands",
    "resolve_params",
    "to_bool",
    "to_list",
]
