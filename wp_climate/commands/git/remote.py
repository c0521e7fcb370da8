"""Commandes git distantes : clone, pull, push.

L'authentification SSH passe par GIT_SSH_COMMAND, injecté dans
l'environnement par GitSettings.
"""

from typing import Any, Mapping, Optional

from wp_climate.commands.base import BaseGitCommand
from wp_climate.commands.context import GitContext
from wp_climate.commands.params import CommandParam, ParamType
from wp_climate.errors.exceptions import CommandParameterError
from wp_climate.shell.result import ExecutionResult

DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "main"


class GitCloneCommand(BaseGitCommand):
    """Clone le dépôt distant.

    Sans ``remote``, le dépôt configuré (``git.repo_url``) est utilisé.
    """

    PARAMS = (
        CommandParam("remote", description="URL SSH ou HTTP du dépôt"),
        CommandParam("directory", ParamType.PATH, default=".",
                  description="Répertoire de destination"),
    )

    def __init__(
        self,
        context: GitContext,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(context)
        values = self._resolve(params)
        remote = values["remote"] or context.settings.repo_url
        if not remote:
            raise CommandParameterError(
                "Le dépôt distant doit être fourni (remote ou git.repo_url)."
            )
        self.remote: str = remote
        self.directory: str = values["directory"]

    def execute(self) -> ExecutionResult:
        return self._run(
            self._git("clone").with_args([self.remote, self.directory])
        )


class GitPullCommand(BaseGitCommand):
    """git pull [--rebase] [--quiet] <remote> [<branch>]"""

    PARAMS = (
        CommandParam("remote", default=DEFAULT_REMOTE,
                  description="Dépôt distant"),
        CommandParam("branch", description="Branche distante"),
        CommandParam("rebase", ParamType.BOOLEAN, default=False,
                  description="Rebaser au lieu de fusionner"),
        CommandParam("quiet", ParamType.BOOLEAN, default=False,
                  description="Sortie réduite"),
    )

    def __init__(
        self,
        context: GitContext,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(context)
        values = self._resolve(params)
        self.remote: str = values["remote"]
        self.branch: Optional[str] = values["branch"]
        self.rebase: bool = values["rebase"]
        self.quiet: bool = values["quiet"]

    def execute(self) -> ExecutionResult:
        builder = (
            self._git("pull")
            .with_flag_if("--rebase", self.rebase)
            .with_flag_if("--quiet", self.quiet)
            .with_args([self.remote])
        )
        if self.branch:
            builder.with_args([self.branch])
        return self._run(builder)


class GitPushCommand(BaseGitCommand):
    """Pousse une branche vers le dépôt distant.

    Sans ``branch``, la branche courante est détectée via
    « git rev-parse --abbrev-ref HEAD », puis DEFAULT_BRANCH.
    """

    PARAMS = (
        CommandParam("remote", default=DEFAULT_REMOTE,
                  description="Dépôt distant"),
        CommandParam("branch", description="Branche à pousser"),
        CommandParam("set_upstream", ParamType.BOOLEAN, default=False,
                  description="Définir la branche amont"),
        CommandParam("force", ParamType.BOOLEAN, default=False,
                  description="Forcer la mise à jour"),
    )

    def __init__(
        self,
        context: GitContext,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(context)
        values = self._resolve(params)
        self.remote: str = values["remote"]
        self.branch: Optional[str] = values["branch"]
        self.set_upstream: bool = values["set_upstream"]
        self.force: bool = values["force"]

    def current_branch(self) -> str:
        result = self._run(
            self._git("rev-parse").with_separate_option("--abbrev-ref", "HEAD")
        )
        branch = result.standard_output.strip()
        if result.successful and branch and branch != "HEAD":
            return branch
        return DEFAULT_BRANCH

    def execute(self) -> ExecutionResult:
        branch = self.branch or self.current_branch()
        builder = (
            self._git("push")
            .with_flag_if("--force", self.force)
            .with_flag_if("--set-upstream", self.set_upstream)
            .with_args([self.remote, branch])
        )
        return self._run(builder)
