"""Commandes git."""

from wp_climate.commands.git.remote import (GitCloneCommand, GitPullCommand,
                                            GitPushCommand)
from wp_climate.commands.git.working_tree import (GitAddCommand,
                                                  GitCommitCommand,
                                                  GitDiffCommand,
                                                  GitLsFilesCommand,
                                                  GitResetCommand,
                                                  GitStatusCommand)

__all__ = [
    "GitAddCommand",
    "GitCloneCommand",
    "GitCommitCommand",
    "GitDiffCommand",
    "GitLsFilesCommand",
    "GitPullCommand",
    "GitPushCommand",
    "GitResetCommand",
    "GitStatusCommand",
]
