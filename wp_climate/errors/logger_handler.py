"""
    LoggerErrorHandler : journalisation des erreurs par couche du moteur.
"""
from wp_climate.errors.base import ErrorHandler
from wp_climate.errors.exceptions import (ApplicationError,
                                          CommandLineError,
                                          ConfigurationError,
                                          DependencyError,
                                          DispatchError,
                                          FlowError,
                                          LaunchError)
from wp_climate.logging.base import Logger

# Étiquette de journal par famille d'erreurs, du plus précis au plus large
LAYER_LABELS: tuple[tuple[type[Exception], str], ...] = (
    (CommandLineError, "ligne de commande"),
    (LaunchError, "lancement"),
    (DependencyError, "dépendance"),
    (DispatchError, "commande"),
    (ConfigurationError, "configuration"),
    (FlowError, "flux"),
)


def layer_of(error: Exception) -> str:
    """Retourne l'étiquette de la couche ayant levé l'erreur."""
    for error_type, label in LAYER_LABELS:
        if isinstance(error, error_type):
            return label
    return "application"


class LoggerErrorHandler(ErrorHandler):
    """Enregistre les erreurs dans le journal wp-climate.

    Chaque entrée est préfixée par la couche concernée, par exemple
    « [dépendance] PhpNotInstalledError: PHP n'est pas installé. ».
    Une LaunchError porte en plus la ligne de commande refusée.
    """

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = ApplicationError
                 ) -> None:
        """
        Args:
            logger: Logger de l'application.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        if not isinstance(error, self.base_error_type):
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {error}"
            )
            return
        message = f"[{layer_of(error)}] {type(error).__name__}: {error}"
        if isinstance(error, LaunchError) and error.command_line:
            message += f" (ligne : {error.command_line})"
        self.logger.log_error(message)
