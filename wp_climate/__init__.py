"""
WP Climate - Maintenance d'installations WordPress via WP-CLI et git.

Modules disponibles:
- shell: Moteur d'exécution (CommandLine, CommandBuilder, LocalShell,
  ExecutionResult, sinks temps réel)
- dependency: Vérification de PHP, WP-CLI, WordPress et git
- commands: Registre, fabrique et commandes WP-CLI / git
- flows: Enchaînements nommés de commandes (JSON), arrêt au premier échec
- config: Chargement de configuration (TOML, JSON) validée par pydantic
- logging: Gestion des logs (Logger, FileLogger)
- errors: Hiérarchie d'exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from wp_climate.logging import Logger, FileLogger
from wp_climate.config import AppSettings, FileConfigLoader, load_settings
from wp_climate.errors import (
    ApplicationError,
    DependencyError,
    DispatchError,
    LaunchError,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from wp_climate.shell import (
    CommandBuilder,
    CommandLine,
    ConsoleOutputSink,
    ExecutionResult,
    LocalShell,
    OutputSink,
    Shell,
)
from wp_climate.dependency import GitDependency, WpCliDependency
from wp_climate.commands import (
    CommandFactory,
    CommandRegistry,
    build_default_registry,
)
from wp_climate.app import WpClimateApp
from wp_climate.flows import Flow, FlowRunner, FlowStep, JsonFlowRepository

__all__ = [
    "__version__",
    "Logger",
    "FileLogger",
    "AppSettings",
    "FileConfigLoader",
    "load_settings",
    "ApplicationError",
    "DependencyError",
    "DispatchError",
    "LaunchError",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "CommandBuilder",
    "CommandLine",
    "ConsoleOutputSink",
    "ExecutionResult",
    "LocalShell",
    "OutputSink",
    "Shell",
    "GitDependency",
    "WpCliDependency",
    "CommandFactory",
    "CommandRegistry",
    "build_default_registry",
    "WpClimateApp",
    "Flow",
    "FlowStep",
    "FlowRunner",
    "JsonFlowRepository",
]
