"""
Builds the argument parser for the script tool.
"""
import argparse


def build_arg_parser() -> argparse.ArgumentParser:
    """Create a command-line argument parser for inspecting script files."""
    parser = argparse.ArgumentParser(description='Inspect script registrations and the procedures built from them.')
    parser.add_argument('script_file', type=str, nargs='?', default=None,
                        help='JSON file containing a list of script registrations')
    parser.add_argument('--list', dest='list_scripts', action='store_true',
                        help='list registered script names and titles')
    parser.add_argument('--describe', type=str, required=False, default=None, metavar='NAME',
                        help='print the procedure generated for a script')
    parser.add_argument('--command', type=str, required=False, default=None, metavar='NAME',
                        help='print the command that runs a script with its default arguments')
    parser.add_argument('--precision', type=int, required=False, default=None,
                        help='digits after the decimal point in printed commands (defaults to the configured value)')
    parser.add_argument('--settings', action='store_true',
                        help='print every config setting with its current value, grouped by category')
    parser.add_argument('--config', type=str, required=False, default=None,
                        help='alternate config file path')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser
