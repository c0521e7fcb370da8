"""Module de gestion des erreurs."""

from wp_climate.errors.base import ErrorHandler, ErrorHandlerChain
from wp_climate.errors.exceptions import (ApplicationError,
                                          CommandConstructionError,
                                          CommandLineError,
                                          CommandParameterError,
                                          ConfigurationError,
                                          DependencyError,
                                          DispatchError,
                                          FileConfigurationError,
                                          FlowError,
                                          FlowNotFoundError,
                                          GitNotConfiguredError,
                                          GitNotInstalledError,
                                          LaunchError,
                                          InvalidFlowError,
                                          MissingDependencyError,
                                          NotAWordPressDirectoryError,
                                          PhpNotConfiguredError,
                                          PhpNotInstalledError,
                                          UnknownCommandError,
                                          WpCliNotConfiguredError,
                                          WpCliNotInstalledError)
from wp_climate.errors.console_handler import ConsoleErrorHandler
from wp_climate.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "CommandLineError",
    "LaunchError",
    "DependencyError",
    "MissingDependencyError",
    "PhpNotConfiguredError",
    "PhpNotInstalledError",
    "WpCliNotConfiguredError",
    "WpCliNotInstalledError",
    "GitNotConfiguredError",
    "GitNotInstalledError",
    "NotAWordPressDirectoryError",
    "DispatchError",
    "UnknownCommandError",
    "CommandConstructionError",
    "CommandParameterError",
    "FlowError",
    "FlowNotFoundError",
    "InvalidFlowError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
]
