"""Moteur d'exécution de commandes système.

Ce module transforme une ligne de commande en processus natifs
(ou en pipeline), collecte leurs sorties en parallèle et expose
un contrat synchrone unique : Shell.execute_command.

Classes disponibles :
    CommandLine : Ligne assainie et découpée en étapes.
    CommandBuilder : Constructeur fluent de CommandLine.
    ProcessLauncher / ProcessGroup : Démarrage et arrêt des processus.
    OutputCollector : Lecture concurrente de stdout/stderr.
    ExecutionResult : Résultat immuable.
    OutputSink : Affichage temps réel (LoggerOutputSink,
        ConsoleOutputSink).
    CommandExecutor : Une exécution, arrêtable.
    Shell / LocalShell : Façade synchrone.
"""

from wp_climate.shell.builder import CommandBuilder, sanitize_token
from wp_climate.shell.collector import OutputCollector
from wp_climate.shell.command_line import CommandLine, sanitize, tokenize
from wp_climate.shell.executor import CommandExecutor
from wp_climate.shell.facade import LocalShell, Shell
from wp_climate.shell.launcher import ProcessGroup, ProcessLauncher
from wp_climate.shell.result import ExecutionResult, is_informational
from wp_climate.shell.sink import (ConsoleOutputSink, LoggerOutputSink,
                                   OutputSink)

__all__ = [
    # Modèle de ligne de commande
    "CommandLine",
    "CommandBuilder",
    "sanitize",
    "sanitize_token",
    "tokenize",
    # Processus
    "ProcessLauncher",
    "ProcessGroup",
    # Collecte et résultat
    "OutputCollector",
    "ExecutionResult",
    "is_informational",
    # Affichage temps réel
    "OutputSink",
    "LoggerOutputSink",
    "ConsoleOutputSink",
    # Exécution
    "CommandExecutor",
    "Shell",
    "LocalShell",
]
