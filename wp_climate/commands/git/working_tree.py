"""Commandes git locales : état, index, commits, différences."""

from typing import Any, List, Mapping, Optional

from wp_climate.commands.base import BaseGitCommand
from wp_climate.commands.context import GitContext
from wp_climate.commands.params import CommandParam, ParamType
from wp_climate.shell.result import ExecutionResult


class GitStatusCommand(BaseGitCommand):
    """git status"""

    def execute(self) -> ExecutionResult:
        return self._run(self._git("status"))


class GitAddCommand(BaseGitCommand):
    """Ajoute des fichiers à l'index.

    ``files`` accepte une liste ou une chaîne séparée par des
    virgules ; « . » ajoute tout le répertoire.
    """

    PARAMS = (
        CommandParam("files", ParamType.LIST, required=True,
                  description="Fichiers à ajouter"),
    )

    def __init__(
        self, context: GitContext, params: Mapping[str, Any]
    ) -> None:
        super().__init__(context)
        self.files: List[str] = self._resolve(params)["files"]

    def execute(self) -> ExecutionResult:
        return self._run(self._git("add").with_args(self._paths(self.files)))


class GitCommitCommand(BaseGitCommand):
    """git commit -m <message> [--amend]"""

    PARAMS = (
        CommandParam("message", required=True,
                  description="Message du commit"),
        CommandParam("amend", ParamType.BOOLEAN, default=False,
                  description="Modifier le dernier commit"),
    )

    def __init__(
        self, context: GitContext, params: Mapping[str, Any]
    ) -> None:
        super().__init__(context)
        values = self._resolve(params)
        self.message: str = values["message"]
        self.amend: bool = values["amend"]

    def execute(self) -> ExecutionResult:
        builder = (
            self._git("commit")
            .with_separate_option("-m", self.message)
            .with_flag_if("--amend", self.amend)
        )
        return self._run(builder)


class GitDiffCommand(BaseGitCommand):
    """Différences de l'arbre de travail, de l'index ou entre commits."""

    PARAMS = (
        CommandParam("file", ParamType.PATH,
                  description="Limiter à un fichier"),
        CommandParam("staged", ParamType.BOOLEAN, default=False,
                  description="Différences de l'index"),
        CommandParam("commit1", description="Premier commit"),
        CommandParam("commit2", description="Second commit"),
    )

    def __init__(
        self,
        context: GitContext,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(context)
        values = self._resolve(params)
        self.file: Optional[str] = values["file"]
        self.staged: bool = values["staged"]
        self.commit1: Optional[str] = values["commit1"]
        self.commit2: Optional[str] = values["commit2"]

    def execute(self) -> ExecutionResult:
        builder = self._git("diff").with_flag_if("--staged", self.staged)
        commits = [c for c in (self.commit1, self.commit2) if c]
        builder.with_args(commits)
        if self.file:
            builder.with_args(self._paths([self.file]))
        return self._run(builder)


class GitResetCommand(BaseGitCommand):
    """git reset --hard, ou retrait de fichiers de l'index.

    Avec ``hard``, les fichiers éventuels sont ignorés.
    """

    PARAMS = (
        CommandParam("files", ParamType.LIST, default=[],
                  description="Fichiers à retirer de l'index"),
        CommandParam("hard", ParamType.BOOLEAN, default=False,
                  description="Réinitialiser l'arbre de travail"),
    )

    def __init__(
        self,
        context: GitContext,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(context)
        values = self._resolve(params)
        self.files: List[str] = list(values["files"])
        self.hard: bool = values["hard"]

    def execute(self) -> ExecutionResult:
        builder = self._git("reset")
        if self.hard:
            builder.with_flag("--hard")
        elif self.files:
            builder.with_args(["HEAD", *self._paths(self.files)])
        return self._run(builder)


class GitLsFilesCommand(BaseGitCommand):
    """git ls-files, par défaut avec --stage."""

    PARAMS = (
        CommandParam("stage", ParamType.BOOLEAN, default=True,
                  description="Afficher mode, objet et étape"),
        CommandParam("cached", ParamType.BOOLEAN, default=False,
                  description="Fichiers de l'index"),
        CommandParam("deleted", ParamType.BOOLEAN, default=False,
                  description="Fichiers supprimés"),
        CommandParam("others", ParamType.BOOLEAN, default=False,
                  description="Fichiers non suivis"),
    )

    def __init__(
        self,
        context: GitContext,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(context)
        self.flags = self._resolve(params)

    def execute(self) -> ExecutionResult:
        builder = self._git("ls-files")
        for name in ("stage", "cached", "deleted", "others"):
            builder.with_flag_if(f"--{name}", self.flags[name])
        return self._run(builder)
