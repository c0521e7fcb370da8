"""Interfaces de traitement des erreurs de wp-climate."""

import sys
from abc import ABC, abstractmethod


class ErrorHandler(ABC):
    """Stratégie de traitement d'une erreur remontée à la CLI."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur (affichage, journalisation...)."""
        pass


class ErrorHandlerChain:
    """Transmet chaque erreur à tous les handlers, dans l'ordre d'ajout.

    La CLI y place la console dès le démarrage, puis le journal une
    fois la configuration chargée : une configuration invalide n'est
    donc affichée que sur la console.
    """

    def __init__(self) -> None:
        self.handlers: list[ErrorHandler] = []

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute un handler et retourne la chaîne."""
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> None:
        """Traite l'erreur puis termine le programme.

        Args:
            error: Erreur à traiter avant la sortie.
            exit_code: Code de sortie (défaut: 1).
        """
        self.handle(error)
        sys.exit(exit_code)
