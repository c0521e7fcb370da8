"""
    ConsoleErrorHandler : affichage des erreurs avec une solution adaptée.
"""
from wp_climate.errors.base import ErrorHandler
from wp_climate.errors.exceptions import (ApplicationError,
                                          CommandLineError,
                                          ConfigurationError,
                                          DispatchError,
                                          FlowError,
                                          FlowNotFoundError,
                                          GitNotConfiguredError,
                                          GitNotInstalledError,
                                          LaunchError,
                                          NotAWordPressDirectoryError,
                                          PhpNotConfiguredError,
                                          PhpNotInstalledError,
                                          WpCliNotConfiguredError,
                                          WpCliNotInstalledError)


DEFAULT_SOLUTIONS: dict[type[Exception], str] = {
    PhpNotConfiguredError:
        "Renseignez le chemin de PHP (wpcli.php) dans la configuration.",
    PhpNotInstalledError:
        "Installez PHP ou corrigez le chemin wpcli.php.",
    WpCliNotConfiguredError:
        "Renseignez le chemin de WP-CLI (wpcli.wp) dans la configuration.",
    WpCliNotInstalledError:
        "Installez WP-CLI ou corrigez le chemin wpcli.wp.",
    GitNotConfiguredError:
        "Renseignez le chemin de git (git.git) dans la configuration.",
    GitNotInstalledError:
        "Installez git ou corrigez le chemin git.git.",
    NotAWordPressDirectoryError:
        "Lancez la commande depuis la racine d'une installation WordPress.",
    LaunchError:
        "Vérifiez que l'exécutable existe et que le répertoire est valide.",
    CommandLineError:
        "Vérifiez la ligne de commande : elle est vide après nettoyage.",
    DispatchError:
        "Listez les commandes disponibles avec « wp-climate list ».",
    ConfigurationError:
        "Vérifiez votre fichier de configuration.",
    FlowNotFoundError:
        "Listez les flux enregistrés avec « wp-climate flow list ».",
    FlowError:
        "Vérifiez les étapes du flux : groupe, commande et paramètres.",
}


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur. La recherche suit le MRO de l'exception : une sous-classe
    sans entrée dédiée hérite de la solution de son parent.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}
                fusionné avec DEFAULT_SOLUTIONS.
        """
        self.base_error_type = base_error_type
        self.solutions = {**DEFAULT_SOLUTIONS, **(solutions or {})}

    def handle(self, error: Exception) -> None:
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def solution_for(self, error: Exception) -> str:
        """Retourne la solution la plus spécifique pour une erreur."""
        for klass in type(error).__mro__:
            if klass in self.solutions:
                return self.solutions[klass]
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self.solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. "
            "Veuillez ouvrir une issue avec ces informations."
        )
