"""
Exceptions personnalisées de wp-climate.

Chaque famille d'erreurs correspond à une couche du moteur :
    - CommandLineError : ligne de commande vide ou invalide.
    - LaunchError : processus impossible à démarrer.
    - DependencyError : outil externe absent ou non configuré.
    - DispatchError : commande inconnue ou paramètres invalides.
    - ConfigurationError : fichier de configuration invalide.
    - FlowError : flux introuvable ou mal formé.

Une sortie d'erreur non vide n'est pas une exception : elle est
signalée par ExecutionResult.successful == False.
"""


class ApplicationError(Exception):
    """Exception de base pour toute l'application."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration illisible ou invalide."""
    pass


class CommandLineError(ApplicationError, ValueError):
    """Ligne de commande vide après assainissement ou étape vide."""
    pass


class LaunchError(ApplicationError):
    """Le processus n'a pas pu être démarré.

    Distincte d'une exécution ayant écrit sur stderr : l'exécutable
    est introuvable, non exécutable, ou le répertoire de travail
    n'existe pas.

    Attributes:
        command_line: Ligne de commande dont le lancement a échoué.
    """

    def __init__(self, message: str, command_line: str = "") -> None:
        super().__init__(message)
        self.command_line = command_line


class DependencyError(ApplicationError):
    """Exception de base pour les vérifications de dépendances."""
    pass


class MissingDependencyError(DependencyError):
    """Exception de base pour les outils manquants."""
    pass


class PhpNotConfiguredError(MissingDependencyError):
    """Le chemin de l'interpréteur PHP n'est pas configuré."""
    pass


class PhpNotInstalledError(MissingDependencyError):
    """PHP est configuré mais ne s'exécute pas correctement."""
    pass


class WpCliNotConfiguredError(MissingDependencyError):
    """Le chemin de WP-CLI n'est pas configuré."""
    pass


class WpCliNotInstalledError(MissingDependencyError):
    """WP-CLI est configuré mais ne s'exécute pas correctement."""
    pass


class GitNotConfiguredError(MissingDependencyError):
    """Le chemin de l'exécutable git n'est pas configuré."""
    pass


class GitNotInstalledError(MissingDependencyError):
    """Git est configuré mais ne s'exécute pas correctement."""
    pass


class NotAWordPressDirectoryError(DependencyError):
    """Le répertoire de travail n'est pas une installation WordPress."""
    pass


class DispatchError(ApplicationError):
    """Exception de base pour la résolution des commandes."""
    pass


class UnknownCommandError(DispatchError, LookupError):
    """Aucune commande enregistrée sous ce nom."""
    pass


class CommandConstructionError(DispatchError):
    """Aucun constructeur utilisable pour la commande demandée."""
    pass


class CommandParameterError(DispatchError, ValueError):
    """Paramètre requis manquant ou valeur invalide."""
    pass


class FlowError(ApplicationError):
    """Exception de base pour les enchaînements de commandes (flux)."""
    pass


class FlowNotFoundError(FlowError, LookupError):
    """Aucun flux enregistré sous ce nom."""
    pass


class InvalidFlowError(FlowError, ValueError):
    """Flux illisible, mal formé ou incohérent avec le registre."""
    pass
