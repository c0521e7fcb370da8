"""Déclaration et conversion des paramètres de commandes.

Chaque commande paramétrée déclare ses paramètres via un tuple
de CommandParam. Les valeurs reçues (dict issu de la CLI, de l'IHM
ou du code) sont converties vers le type déclaré : la CLI ne
transmet que des chaînes (« true », « a.php,b.php »).
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from wp_climate.errors.exceptions import CommandParameterError

TRUE_VALUES = ("true", "1", "yes", "on", "oui")
FALSE_VALUES = ("false", "0", "no", "off", "non", "")


class ParamType(StrEnum):
    """Types de paramètres acceptés par les commandes."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    PATH = "path"
    LIST = "list"


@dataclass(frozen=True)
class CommandParam:
    """Description d'un paramètre de commande.

    Attributes:
        name: Clé dans le dictionnaire de paramètres.
        type: Type attendu après conversion.
        required: True si le paramètre doit être fourni.
        default: Valeur utilisée quand le paramètre est absent.
        description: Texte d'aide (CLI, IHM).
    """

    name: str
    type: ParamType = ParamType.STRING
    required: bool = False
    default: Any = None
    description: str = ""

    def coerce(self, value: Any) -> Any:
        """Convertit une valeur vers le type déclaré.

        Raises:
            CommandParameterError: Valeur non convertible.
        """
        try:
            if self.type is ParamType.BOOLEAN:
                return to_bool(value)
            if self.type is ParamType.INTEGER:
                return int(value)
            if self.type is ParamType.FLOAT:
                return float(value)
            if self.type is ParamType.LIST:
                return to_list(value)
            return str(value)
        except (TypeError, ValueError) as e:
            raise CommandParameterError(
                f"Valeur invalide pour « {self.name} » "
                f"({self.type}) : {value!r}"
            ) from e

    def __str__(self) -> str:
        suffix = " (requis)" if self.required else ""
        return f"{self.name}{suffix}: {self.description}"


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Booléen invalide: {value!r}")


def to_list(value: Any) -> List[str]:
    """Accepte une liste ou une chaîne séparée par des virgules."""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, Iterable):
        return [str(item) for item in value]
    raise ValueError(f"Liste invalide: {value!r}")


def resolve_params(
    declared: Iterable[CommandParam],
    params: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Applique valeurs par défaut, conversions et paramètres requis.

    Les clés non déclarées sont ignorées.

    Args:
        declared: Paramètres déclarés par la commande.
        params: Valeurs fournies par l'appelant.

    Returns:
        Dictionnaire {nom: valeur convertie} pour chaque CommandParam.

    Raises:
        CommandParameterError: Paramètre requis absent ou vide,
            ou valeur non convertible.
    """
    params = params or {}
    resolved: Dict[str, Any] = {}
    for param in declared:
        value = params.get(param.name)
        if value is None or value == [] or (
            isinstance(value, str) and not value.strip()
        ):
            if param.required:
                raise CommandParameterError(
                    f"Le paramètre « {param.name} » est requis."
                )
            resolved[param.name] = param.default
        else:
            resolved[param.name] = param.coerce(value)
    return resolved
