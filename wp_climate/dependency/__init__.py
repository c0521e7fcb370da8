"""Vérification des outils externes (PHP, WP-CLI, git)."""

from wp_climate.dependency.base import DependencyChecker, DependencyStatus
from wp_climate.dependency.git import GitDependency
from wp_climate.dependency.wpcli import WpCliDependency

__all__ = [
    "DependencyChecker",
    "DependencyStatus",
    "GitDependency",
    "WpCliDependency",
]
