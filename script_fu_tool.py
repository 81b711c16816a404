"""
Inspects script registrations and the procedures built from them.
Run `python script_fu_tool.py scripts.json --list` to list the scripts in a file, `--describe NAME` to print a
script's procedure parameters, or `--command NAME` to print the command that runs a script with its defaults.
`--settings` prints the current config values, with or without a script file.
"""
import logging
import os
import sys
from typing import Optional

from PySide6.QtCore import QCoreApplication

from scriptfu.config.config import Config
from scriptfu.config.script_fu_config import ScriptFuConfig, DEFAULT_CONFIG_PATH
from scriptfu.procedure.procedure_metadata import ProcedureMetadata
from scriptfu.procedure.procedure_registry import ProcedureRegistry
from scriptfu.script.command import get_command
from scriptfu.script.script_file import load_scripts
from scriptfu.script.script_table import ScriptTable
from scriptfu.util.arg_parser import build_arg_parser
from scriptfu.util.shared_constants import LOG_DIR

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> str:
    log_file_path = os.path.join(LOG_DIR, 'script_fu_tool.log')
    log_file_handler = logging.FileHandler(log_file_path)
    log_file_handler.setLevel(logging.INFO)
    log_file_handler.setFormatter(logging.Formatter('%(asctime)s: %(levelname)s: %(name)s: %(message)s'))
    handlers: list[logging.Handler] = [log_file_handler]
    if verbose:  # Also log to stdout if --verbose is set:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setLevel(logging.INFO)
        stdout_handler.setFormatter(logging.Formatter('#%(levelname)s: %(name)s:  %(message)s'))
        handlers.append(stdout_handler)
    logging.basicConfig(level=logging.INFO, handlers=handlers)
    return log_file_path


def _describe(metadata: ProcedureMetadata) -> str:
    lines = [metadata.name,
             f'  menu: {metadata.menu_label if metadata.menu_label is not None else "(none)"}',
             f'  image types: {metadata.image_types}',
             f'  {metadata.blurb}',
             f'  by {metadata.author}, {metadata.copyright}, {metadata.date}',
             '  parameters:']
    for param in metadata.parameters:
        lines.append(f'    {param.name} ({param.param_type}): {param.nick}, {param.blurb}')
    return '\n'.join(lines)


def _settings(config: Config) -> str:
    keys_by_category: dict[str, list[str]] = {}
    for key in config.get_keys():
        keys_by_category.setdefault(config.get_category(key), []).append(key)
    lines = []
    for category, keys in keys_by_category.items():
        lines.append(f'{category}:')
        for key in keys:
            lines.append(f'  {key} = {config.get(key)}')
            lines.append(f'    {config.get_label(key)}: {config.get_tooltip(key)}')
    return '\n'.join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    """Runs the script tool, returning the process exit code."""
    args = build_arg_parser().parse_args(argv)
    _setup_logging(args.verbose)
    _app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    config = ScriptFuConfig(args.config if args.config is not None else DEFAULT_CONFIG_PATH)
    if args.settings:
        print(_settings(config))
    if args.script_file is None:
        if args.list_scripts or args.describe is not None or args.command is not None:
            print('A script file is required with --list, --describe and --command', file=sys.stderr)
            return 1
        return 0

    table = ScriptTable(ProcedureRegistry())
    try:
        for script in load_scripts(args.script_file):
            table.add(script)
    except (OSError, RuntimeError, ValueError) as err:
        logger.error(f'Loading {args.script_file} failed: {err}')
        print(err, file=sys.stderr)
        return 1

    if args.list_scripts:
        for name in table.names():
            script = table.get(name)
            assert script is not None
            print(f'{name}: {script.get_title()}')
    for name in (args.describe, args.command):
        if name is not None and name not in table:
            print(f'No script named "{name}"', file=sys.stderr)
            return 1
    if args.describe is not None:
        metadata = table.registry.get(args.describe)
        assert metadata is not None
        print(_describe(metadata))
    if args.command is not None:
        script = table.get(args.command)
        assert script is not None
        precision = args.precision if args.precision is not None \
            else config.get(ScriptFuConfig.COMMAND_FLOAT_PRECISION)
        print(get_command(script, precision))
    table.clear()
    return 0


if __name__ == '__main__':
    sys.exit(main())
