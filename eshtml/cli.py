"""
# EsHTML: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys
import warnings

from eshtml._version import __version__
from eshtml.constants import (
    CANONICAL_FILE_EXTENSION,
    COMMAND_LINE_ERROR_EXIT_CODE,
    GENERIC_ERROR_EXIT_CODE,
    LOCALISED_FILE_EXTENSION,
)
from eshtml.core import Transpiler
from eshtml.exceptions import ValidationFailedException, ValidationWarning

DESCRIPTION = '''
    Convert EsHTML (HTML with Spanish vocabulary) to HTML, or HTML back to EsHTML.
'''
FILE_NAME_HELP = '''
    name of file to be converted
    (can be abbreviated as `file` or `file.` for increased productivity)
'''
ALL_MODE_HELP = '''
    convert all eligible files under the working directory
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every pass applied)
'''
STRICT_MODE_HELP = '''
    run in strict mode (do not write a file with validation errors)
'''
IGNORE_WARNINGS_HELP = '''
    do not print validation warnings
'''
REVERSE_MODE_HELP = '''
    convert HTML back to EsHTML
'''


def get_extensions(reverse_mode_enabled: bool) -> tuple[str, str]:
    """
    Get (input extension, output extension).
    """
    if reverse_mode_enabled:
        return CANONICAL_FILE_EXTENSION, LOCALISED_FILE_EXTENSION

    return LOCALISED_FILE_EXTENSION, CANONICAL_FILE_EXTENSION


def is_input_file(file_name: str, input_extension: str) -> bool:
    return file_name.endswith(input_extension)


def extract_name(file_name_argument: str, input_extension: str) -> str:
    """
    Extract name-without-extension from a file name argument.

    Here, file name argument may be of the form `«name»«extension»`, `«name».`, or `«name»`.
    The path is normalised by resolving `./` and `../`.
    """
    file_name_argument = os.path.normpath(file_name_argument)
    extension_without_dot = re.escape(input_extension[1:])
    name = re.sub(pattern=fr'[.]({extension_without_dot})? \Z', repl='', string=file_name_argument, flags=re.VERBOSE)

    return name


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-s', '--strict',
        dest='strict_mode_enabled',
        action='store_true',
        help=STRICT_MODE_HELP,
    )
    argument_parser.add_argument(
        '-w', '--ignore-warnings',
        dest='warnings_ignored',
        action='store_true',
        help=IGNORE_WARNINGS_HELP,
    )
    argument_parser.add_argument(
        '-r', '--reverse',
        dest='reverse_mode_enabled',
        action='store_true',
        help=REVERSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'file_name_arguments',
        default=[],
        help=FILE_NAME_HELP,
        metavar='file.eshtml',
        nargs='*',
    )

    return argument_parser.parse_args()


def convert(transpiler: Transpiler, source: str, input_file_name: str, reverse_mode_enabled: bool,
            strict_mode_enabled: bool, warnings_ignored: bool) -> str:
    if reverse_mode_enabled:
        return transpiler.reverse_transpile(source)

    with warnings.catch_warnings(record=True) as caught_warnings:
        warnings.simplefilter('always', ValidationWarning)
        output = transpiler.transpile(source, strict_mode=strict_mode_enabled, ignore_warnings=warnings_ignored)

    for caught_warning in caught_warnings:
        if isinstance(caught_warning.message, ValidationWarning):
            for error in caught_warning.message.errors:
                print(f'warning: `{input_file_name}`, {error.format()}', file=sys.stderr)
        else:
            warnings.warn_explicit(caught_warning.message, caught_warning.category,
                                   caught_warning.filename, caught_warning.lineno)

    return output


def generate_output_file(transpiler: Transpiler, file_name_argument: str, reverse_mode_enabled: bool,
                         strict_mode_enabled: bool, warnings_ignored: bool, uses_command_line_argument: bool):
    input_extension, output_extension = get_extensions(reverse_mode_enabled)
    name = extract_name(file_name_argument, input_extension)
    input_file_name = f'{name}{input_extension}'
    try:
        with open(input_file_name, 'r', encoding='utf-8') as input_file:
            source = input_file.read()
    except FileNotFoundError as file_not_found_error:
        if uses_command_line_argument:
            print(f'error: argument `{file_name_argument}`: file `{input_file_name}` not found', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            error_message = f'file `{input_file_name}` not found for `{input_file_name}` in file_name_list'
            raise FileNotFoundError(error_message) from file_not_found_error

    try:
        output = convert(transpiler, source, input_file_name, reverse_mode_enabled,
                         strict_mode_enabled, warnings_ignored)
    except ValidationFailedException as validation_failed_exception:
        for error in validation_failed_exception.errors:
            print(f'error: `{input_file_name}`, {error.format()}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    output_file_name = f'{name}{output_extension}'
    try:
        with open(output_file_name, 'w', encoding='utf-8') as output_file:
            output_file.write(output)
        print(f'success: wrote to `{output_file_name}`')
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main():
    parsed_arguments = parse_command_line_arguments()
    file_name_arguments = parsed_arguments.file_name_arguments
    all_mode_enabled = parsed_arguments.all_mode_enabled
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled
    strict_mode_enabled = parsed_arguments.strict_mode_enabled
    warnings_ignored = parsed_arguments.warnings_ignored
    reverse_mode_enabled = parsed_arguments.reverse_mode_enabled

    transpiler = Transpiler(verbose_mode_enabled=verbose_mode_enabled)

    if all_mode_enabled:
        if len(file_name_arguments) > 0:
            print('error: option -a (or --all) cannot be used with positional argument', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        input_extension, _ = get_extensions(reverse_mode_enabled)
        input_file_names = [
            os.path.join(path, file_name)
            for path, _, file_names in os.walk(os.curdir)
            for file_name in file_names
            if is_input_file(file_name, input_extension)
        ]
        for input_file_name in sorted(input_file_names):
            generate_output_file(transpiler, input_file_name, reverse_mode_enabled,
                                 strict_mode_enabled, warnings_ignored, uses_command_line_argument=False)

    else:
        for file_name_argument in file_name_arguments:
            generate_output_file(transpiler, file_name_argument, reverse_mode_enabled,
                                 strict_mode_enabled, warnings_ignored, uses_command_line_argument=True)


if __name__ == '__main__':
    main()
