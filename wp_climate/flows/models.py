"""Modèles Pydantic des flux de commandes.

Un flux est une suite ordonnée d'étapes (groupe, commande,
paramètres) exécutées l'une après l'autre. Format JSON :

    {
      "name": "deploiement",
      "description": "Sauvegarde puis mise à jour",
      "steps": [
        {"group": "wp", "command": "export-db",
         "params": {"file_name": "avant.sql"}},
        {"group": "git", "command": "git-pull"},
        {"group": "wp", "command": "flush-caches"}
      ]
    }
"""

import re
from typing import Any, Dict, List

from pydantic import BaseModel, field_validator

from wp_climate.commands.registry import CommandGroup

# Le nom sert de nom de fichier : pas de séparateur ni de point
FLOW_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


class FlowStep(BaseModel):
    """Une commande du flux et ses paramètres.

    Attributes:
        group: Groupe de la commande ("wp" ou "git", casse ignorée).
        command: Nom enregistré dans le registre (ex: "export-db").
        params: Paramètres transmis tels quels à la fabrique.
    """

    group: CommandGroup
    command: str
    params: Dict[str, Any] = {}

    model_config = {"extra": "forbid"}

    @field_validator("group", mode="before")
    @classmethod
    def lower_group(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("command")
    @classmethod
    def command_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom de commande est requis")
        return v.strip()

    def __str__(self) -> str:
        return f"{self.group}:{self.command}"


class Flow(BaseModel):
    """Flux nommé d'étapes.

    Les méthodes de réorganisation ignorent un index hors bornes.
    """

    name: str
    description: str = ""
    steps: List[FlowStep] = []

    model_config = {"extra": "forbid"}

    @field_validator("name")
    @classmethod
    def name_is_file_safe(cls, v: str) -> str:
        if not FLOW_NAME_PATTERN.match(v):
            raise ValueError(
                f"Nom de flux invalide : {v!r} "
                "(lettres, chiffres, « - » et « _ »)"
            )
        return v

    def add_step(self, step: FlowStep) -> "Flow":
        self.steps.append(step)
        return self

    def move_step_up(self, index: int) -> None:
        if 0 < index < len(self.steps):
            self.steps.insert(index - 1, self.steps.pop(index))

    def move_step_down(self, index: int) -> None:
        if 0 <= index < len(self.steps) - 1:
            self.steps.insert(index + 1, self.steps.pop(index))

    def remove_step(self, index: int) -> None:
        if 0 <= index < len(self.steps):
            del self.steps[index]

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, text: str) -> "Flow":
        """
        Raises:
            pydantic.ValidationError: JSON invalide ou étape mal formée.
        """
        return cls.model_validate_json(text)
