"""Interface en ligne de commande ``wp-climate``.

Exemples :

    wp-climate list
    wp-climate --cwd /var/www/site check
    wp-climate --config wp-climate.toml run export-db -p file_name=backup.sql
    wp-climate run git-commit -p "message=Mise à jour du thème" -p amend=true
    wp-climate flow import deploiement.json
    wp-climate flow run deploiement
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from wp_climate import __version__
from wp_climate.app import WpClimateApp
from wp_climate.commands.registry import CommandGroup, CommandRegistry
from wp_climate.config.loader import load_settings
from wp_climate.dependency.base import DependencyStatus
from wp_climate.errors.base import ErrorHandlerChain
from wp_climate.errors.console_handler import ConsoleErrorHandler
from wp_climate.errors.exceptions import ApplicationError
from wp_climate.errors.logger_handler import LoggerErrorHandler
from wp_climate.flows.models import Flow
from wp_climate.flows.repository import JsonFlowRepository, read_flow_file
from wp_climate.flows.runner import FlowReport, FlowRunner
from wp_climate.logging.file_logger import FileLogger
from wp_climate.shell.sink import ConsoleOutputSink

EXIT_INTERRUPTED = 130


def parse_param(value: str) -> Tuple[str, str]:
    """Découpe « clé=valeur » au premier « = »."""
    key, sep, raw = value.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(
            f"Paramètre attendu au format clé=valeur : {value!r}"
        )
    return key.strip(), raw


def create_argument_parser() -> argparse.ArgumentParser:
    """Construit le parseur avec les sous-commandes list, check, run et flow."""
    parser = argparse.ArgumentParser(
        prog="wp-climate",
        description="Maintenance WordPress via WP-CLI et git",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Fichier de configuration TOML ou JSON",
    )
    parser.add_argument(
        "--cwd",
        metavar="DIR",
        default=".",
        help="Racine WordPress / dépôt git (défaut: répertoire courant)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Recopier le journal sur la console",
    )

    subparsers = parser.add_subparsers(dest="target", required=True)
    subparsers.add_parser("list", help="Lister les commandes disponibles")
    subparsers.add_parser("check", help="Vérifier PHP, WP-CLI et git")

    run_parser = subparsers.add_parser("run", help="Exécuter une commande")
    run_parser.add_argument("name", help="Nom de la commande (voir list)")
    run_parser.add_argument(
        "-p", "--param",
        dest="params",
        action="append",
        type=parse_param,
        default=[],
        metavar="KEY=VALUE",
        help="Paramètre de la commande (répétable)",
    )

    flow_parser = subparsers.add_parser(
        "flow", help="Gérer et exécuter les flux de commandes"
    )
    flow_actions = flow_parser.add_subparsers(dest="action", required=True)
    flow_actions.add_parser("list", help="Lister les flux enregistrés")
    for action, help_text in (
        ("show", "Afficher les étapes d'un flux"),
        ("run", "Exécuter un flux jusqu'au premier échec"),
        ("delete", "Supprimer un flux"),
    ):
        action_parser = flow_actions.add_parser(action, help=help_text)
        action_parser.add_argument("flow_name", help="Nom du flux")
    import_parser = flow_actions.add_parser(
        "import", help="Enregistrer un flux depuis un fichier JSON"
    )
    import_parser.add_argument("file", help="Fichier JSON du flux")
    return parser


def format_registry(registry: CommandRegistry) -> str:
    lines: List[str] = []
    for group in CommandGroup:
        lines.append(f"[{group}]")
        for entry in registry.entries(group):
            lines.append(f"  {entry.name:<16} {entry.description}")
            for param in entry.params:
                lines.append(f"      - {param}")
    return "\n".join(lines)


def format_status(statuses: Dict[str, DependencyStatus]) -> str:
    lines = []
    for group, status in statuses.items():
        mark = "✅" if status is DependencyStatus.VERIFIED else "❌"
        lines.append(f"{mark} {group}: {status}")
    return "\n".join(lines)


def format_flow(flow: Flow) -> str:
    lines = [f"{flow.name} : {flow.description}" if flow.description
             else flow.name]
    for number, step in enumerate(flow.steps, start=1):
        params = " ".join(f"{k}={v}" for k, v in step.params.items())
        lines.append(f"  {number}. {step} {params}".rstrip())
    return "\n".join(lines)


def format_report(report: FlowReport) -> str:
    total = len(report.flow.steps)
    lines = []
    for outcome in report.outcomes:
        mark = "✅" if outcome.result.successful else "❌"
        lines.append(
            f"{mark} [{outcome.index + 1}/{total}] {outcome.step} "
            f"({outcome.result.duration:.1f}s)"
        )
    start = len(report.outcomes)
    for offset, step in enumerate(report.skipped, start=start + 1):
        lines.append(f"⏭️  [{offset}/{total}] {step} (non exécutée)")
    return "\n".join(lines)


def dispatch_flow(app: WpClimateApp, args: argparse.Namespace) -> int:
    """Exécute une action « flow » et retourne le code de sortie."""
    repository = JsonFlowRepository(app.settings.flows.directory, app.logger)

    if args.action == "list":
        for name in repository.names():
            print(name)
        return 0

    if args.action == "show":
        print(format_flow(repository.load(args.flow_name)))
        return 0

    if args.action == "import":
        flow = read_flow_file(args.file)
        FlowRunner(app, app.logger).validate(flow)
        repository.save(flow)
        print(f"✅ Flux « {flow.name} » enregistré")
        return 0

    if args.action == "delete":
        repository.delete(args.flow_name)
        print(f"🗑️  Flux « {args.flow_name} » supprimé")
        return 0

    report = FlowRunner(app, app.logger).run(repository.load(args.flow_name))
    print(format_report(report))
    return 0 if report.successful else 1


def dispatch_command(app: WpClimateApp, args: argparse.Namespace) -> int:
    """Exécute la sous-commande et retourne le code de sortie.

    Un Ctrl-C interrompt les processus en cours (commande ou vérifications
    de check) et retourne 130.
    """
    try:
        return _dispatch(app, args)
    except KeyboardInterrupt:
        app.stop()
        print("\n⏹️  Commande interrompue.", file=sys.stderr)
        return EXIT_INTERRUPTED


def _dispatch(app: WpClimateApp, args: argparse.Namespace) -> int:
    if args.target == "list":
        print(format_registry(app.registry))
        return 0

    if args.target == "check":
        statuses = app.check()
        print(format_status(statuses))
        verified = all(
            s is DependencyStatus.VERIFIED for s in statuses.values()
        )
        return 0 if verified else 1

    if args.target == "flow":
        return dispatch_flow(app, args)

    result = app.run(args.name, dict(args.params))
    if result.successful:
        print(f"✅ {args.name} terminée en {result.duration:.1f}s")
        return 0
    print(f"❌ {args.name} a échoué", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Point d'entrée de la console ``wp-climate``.

    Returns:
        Code de sortie de la sous-commande. Une ApplicationError
        est affichée, journalisée puis termine le programme (code 1).
    """
    args = create_argument_parser().parse_args(argv)
    chain = ErrorHandlerChain().add_handler(ConsoleErrorHandler())

    try:
        settings = load_settings(args.config)
        logger = FileLogger.from_settings(
            settings.logging, console_output=args.verbose
        )
        chain.add_handler(LoggerErrorHandler(logger))
        app = WpClimateApp(
            Path(args.cwd).resolve(),
            settings,
            logger=logger,
            sink=ConsoleOutputSink(),
        )
        return dispatch_command(app, args)
    except ApplicationError as e:
        chain.handle_and_exit(e)


if __name__ == "__main__":
    sys.exit(main())
