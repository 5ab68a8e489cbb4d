"""Teqc library module with utility functions for easier script development

Example:
from teqc.lib import util
file_path = util.parse_args('path')

Description:

This module provides the boilerplate code necessary for starting a
script. In particular handling of command line arguments and default
options including --help are done.

"""

# Standard library imports
from datetime import datetime
import functools
import os.path
import pathlib
import platform
import re
import sys

# Midgard imports
from midgard.collections import enums

# Teqc imports
import teqc
from teqc.lib import config
from teqc.lib import log


def check_help_and_version(doc_module=None):
    """Show help or version if asked for

    Show the help message parsed from the script's docstring if -h or
    --help option is given. Show the script's version if --version is
    given.

    Args:
        doc_module:   Module containing help text.
    """
    # Help message
    if check_options("-h", "--help"):
        _print_help_from_doc(doc_module)
        raise SystemExit

    # Version information
    if check_options("--version"):
        print(_get_program_version())
        raise SystemExit


def check_options(*options):
    """Check if any of a list of options is specified on the command line

    Returns the actual option that is specified. The first option specified on the command line is returned if there
    are several matches. Returns the empty string if no option is specified. This means that this method works fine
    also in a boolean context, for example

        if check_options('-T', '--showtb'):
            do_something()

    Args:
        options:   Strings specifying which options to check for, including '-'-prefix.

    Returns:
        String: Option that is specified, blank string if no option is specified

    """
    cmd_argv = [a.split("=")[0] for a in sys.argv[1:]]

    for option in cmd_argv:
        if option in options:
            return option

    return ""


def get_log_level(default):
    """Read log level from command line options like --debug or --warn

    Args:
        default (String):  Log level used if no log level option is given.

    Returns:
        String: Name of log level.
    """
    option = check_options(*[f"--{level.name}" for level in enums.get_enum("log_level")])
    return option[2:] if option else default


def get_program_name():
    """Get the name of the running program

    Returns:
        String trying to be similar to how the user called the program.
    """
    program_name = sys.argv[0]
    if not program_name.startswith("./"):
        program_name = os.path.basename(program_name)
    return program_name


def get_python_version():
    """Find python version used

    Returns:
        String:     Name of executable and version number
    """
    return f"{platform.python_implementation()} {platform.python_version()}"


def no_traceback(func):
    """Decorator for turning off traceback, instead printing a simple error message

    Use the option --showtb to show the traceback anyway.
    """
    if check_options("-T", "--showtb"):
        return func

    def no_traceback_hook(_not_used_1, value, _not_used_2):
        """Only prints the error message, no traceback."""
        log.error(str(value))

    @functools.wraps(func)
    def _no_traceback(*args, **kwargs):
        remember_excepthook = sys.excepthook
        sys.excepthook = no_traceback_hook
        values = func(*args, **kwargs)
        sys.excepthook = remember_excepthook
        return values

    return _no_traceback


def parse_args(*param_types, doc_module=None):
    """Parse command line arguments

    Log versions of python and the program, then parse arguments from the given parameter types.

    Args:
        param_types: Strings describing the expected parameter types.
                     Each string must be one of the keys in #_PARSERS.

    Returns:
        List of command line arguments parsed according to param_types.
    """
    log.info(f"Start {_get_program_version()} at {datetime.now().strftime(config.FMT_datetime)}")
    log.debug(f"Receive command line arguments [{', '.join(sys.argv[1:])}]")

    try:
        arguments = [_PARSERS[type]() for type in param_types]
    except Exception:
        _print_help_from_doc(doc_module)
        raise

    # Return arguments (scalar if only one element, None if list is empty)
    if len(arguments) > 1:
        return arguments
    elif arguments:
        return arguments[0]


def read_option_value(option, default=""):
    """Read the value of one command line option

    The option should be specified as a string with the necessary - or -- in front. If that option is not one of the
    command line arguments, default is returned. If there is a value following the option that value is returned as a
    string (separated by =). If there are several occurences of the option, the first one is returned.

    Args:
        option (String):    Option specified with the leading - or --.
        default (String):  Optional default value that is returned if the option is not specified.

    Returns:
        String: The option or the value of the option. The default value if the option is not specified.
    """
    for arg in sys.argv[1:]:
        if arg.startswith(f"{option}="):
            # Remove the part up to and including the first =-sign
            return arg.split("=", maxsplit=1)[-1]

    return default


#
# AUXILIARY FUNCTIONS
#
def _get_doc(doc_module=None):
    """Get the docstring of the running program

    Args:
        doc_module:  String, name of the module with docstring. Default is __main__.

    Returns:
        String, the docstring of the given module.
    """
    if doc_module is None:
        doc_module = "__main__"

    doc = sys.modules[doc_module].__doc__

    return "" if doc is None else doc


def _get_program_version():
    """Get program name and version as string

    Returns:
        String, information about the version of the given module (running script).
    """
    return "{} v{}".format(get_program_name(), teqc.__version__)


def _next_argument():
    """Return the next argument as a string

    The next argument is returned. Options (strings starting with -)
    are ignored. The argument is removed from the sys.argv-list.

    Returns:
        String with the next argument.
    """
    for idx in range(1, len(sys.argv)):
        if not sys.argv[idx].startswith("-"):
            return sys.argv.pop(idx)

    raise TypeError("Missing argument")


def _parse_path():
    """Return the next argument as a path

    Returns:
        Path-object with the next argument.
    """
    return pathlib.Path(_next_argument())


def _print_help_from_doc(doc_module=None):
    """Filter the docstring to make it a better help text and print it

    Removes @-directives in the docstring. Furthermore, we replace the
    Example-heading used by Doxygen with Usage as that makes more
    sense in a help text.
    """
    replace_vars = dict(
        maintainers="{maintainers}",  # Handled by teqc._update_doc
        version=teqc.__version__,
        exe=teqc.__executable__,
    )
    doc = teqc._update_doc(_get_doc(doc_module).format(**replace_vars))

    for line in doc.splitlines():
        if line.startswith("@"):
            continue
        line = re.sub(r"::", ":", line)
        print(line)


# Parsers for each parameter type
_PARSERS = {"path": _parse_path, "string": _next_argument}
