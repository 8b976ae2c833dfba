"""Command-line interface handler for vortex."""

import argparse
import json
import os
import sys

from rich.console import Console
from rich.markup import escape

from . import backends
from . import editor
from . import environment
from . import shlex_parser
from . import templates
from .errors import VortexException
from .request_config import RequestConfig

console = Console()


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: vortex [-h | --help] <command> [<args>]

Commands:
  tokenize                 Split a command line the way vortex does
      --json               Print the tokens as a JSON array
      <line>               The line to split (read from stdin if omitted)

  show                     Print templates, editing those whose name ends with "!"
      -e, --env-file FILE  Environment file to load first (default ./.env)
      <template>...        Template files (or pipe the names on stdin)

  body                     Stage the [Body] of a template in a temp file
      -k, --keep           Keep the temp file instead of deleting it
      -v, --verbose        Create the temp file in the current directory
      <template>           The template file

  init                     Write a starter template
      -b, --backend NAME   Backend to list in the template (repeatable)
      <output>             The output file

  backends                 List installed backends, marking the one used by default
  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    print("0.1")


def fail(message: str) -> None:
    console.print(f"[red]✗ {escape(message)}[/red]", highlight=False)
    sys.exit(1)


def cmd_tokenize(args: argparse.Namespace) -> None:
    """Execute the tokenize command."""
    line = args.line if args.line is not None else sys.stdin.read()

    try:
        tokens = shlex_parser.split(line)
    except VortexException as e:
        fail(str(e))

    if args.json:
        print(json.dumps(tokens))
    else:
        for token in tokens:
            print(token)


def cmd_show(args: argparse.Namespace) -> None:
    """Execute the show command."""
    env_file = args.env_file if args.env_file else environment.default_env_path()

    try:
        # Only an explicitly requested env file has to exist
        environment.read_environment_file(env_file, args.env_file is not None)
        filenames = templates.get_template_filenames(args.templates)
        if not filenames:
            print("Please specify at least one template\n", file=sys.stderr)
            print_usage()
            sys.exit(1)

        for filename in filenames:
            content = editor.read_raw_template_string(filename)
            console.rule(filename.removesuffix(editor.EDIT_FILE_SUFFIX))
            print(content, end="" if content.endswith("\n") else "\n")
    except VortexException as e:
        fail(str(e))


def cmd_body(args: argparse.Namespace) -> None:
    """Execute the body command."""
    if not args.template:
        print("Please specify a template\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    try:
        content = editor.read_raw_template_string(args.template)
        request = RequestConfig(
            body=templates.body_lines(content),
            verbose=args.verbose,
            tempfile=args.keep,
        )
        request.create_body_tempfile()
        if not request.tempfile_name:
            console.print("[yellow]Template has no body[/yellow]")
            return

        name = request.tempfile_name
        console.print(
            f"[green]✓ {len(request.body)} body lines written to {name}[/green]"
        )
        request.remove_body_tempfile()
        if not args.keep:
            console.print(f"[dim]Removed {name}[/dim]")
    except VortexException as e:
        fail(str(e))


def cmd_init(args: argparse.Namespace) -> None:
    """Execute the init command."""
    if not args.output:
        print("Please specify an output path for the template\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    if os.path.exists(args.output):
        fail(f"{args.output} already exists")

    names = args.backend if args.backend else backends.available_backends()
    unknown = [n for n in names if n not in backends.BACKEND_PRIORITY_ORDER]
    if unknown:
        fail(
            f"Unknown backend {', '.join(unknown)}; "
            f"choose from {', '.join(backends.BACKEND_PRIORITY_ORDER)}"
        )
    if not names:
        names = backends.BACKEND_PRIORITY_ORDER

    with open(args.output, "w") as f:
        f.write(backends.render_starter_template(names))
    console.print(f"[green]✓ Created {args.output}[/green]")


def cmd_backends(args: argparse.Namespace) -> None:
    """Execute the backends command."""
    try:
        selected = backends.select_backend()
    except VortexException as e:
        fail(str(e))

    installed = backends.available_backends()
    for name in backends.BACKEND_PRIORITY_ORDER:
        if name == selected:
            console.print(f"[green]✓[/green] {name} [bold](default)[/bold]")
        elif name in installed:
            console.print(f"[green]✓[/green] {name}")
        else:
            console.print(f"[dim]✗ {name}[/dim]")


def main() -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Vortex", add_help=False)

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Tokenize command
    tokenize_parser = subparsers.add_parser("tokenize", add_help=False)
    tokenize_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for tokenize"
    )
    tokenize_parser.add_argument(
        "--json", action="store_true", help="Print tokens as JSON"
    )
    tokenize_parser.add_argument("line", nargs="?", help="Line to split")

    # Show command
    show_parser = subparsers.add_parser("show", add_help=False)
    show_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for show"
    )
    show_parser.add_argument(
        "-e", "--env-file", type=str, dest="env_file", help="Environment file"
    )
    show_parser.add_argument("templates", nargs="*", help="Template files")

    # Body command
    body_parser = subparsers.add_parser("body", add_help=False)
    body_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for body"
    )
    body_parser.add_argument(
        "-k", "--keep", action="store_true", help="Keep the body temp file"
    )
    body_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Use the current directory"
    )
    body_parser.add_argument("template", nargs="?", help="Template file")

    # Init command
    init_parser = subparsers.add_parser("init", add_help=False)
    init_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for init"
    )
    init_parser.add_argument(
        "-b", "--backend", action="append", help="Backend to list"
    )
    init_parser.add_argument("output", nargs="?", help="Output file path")

    # Backends command
    subparsers.add_parser("backends", add_help=False)

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    # Parse arguments
    if len(sys.argv) < 2:
        print_usage()
        return

    args = parser.parse_args()

    # Handle global help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    # Execute commands
    if args.command == "tokenize":
        cmd_tokenize(args)
    elif args.command == "show":
        cmd_show(args)
    elif args.command == "body":
        cmd_body(args)
    elif args.command == "init":
        cmd_init(args)
    elif args.command == "backends":
        cmd_backends(args)
    else:
        print_usage()
