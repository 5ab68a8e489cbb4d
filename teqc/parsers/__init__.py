"""Framework for parsers

Description:
------------

To add a new parser, simply create a new .py-file which defines a class inheriting from teqc.parsers._parser.Parser.
The class needs to be decorated with the :func:`~midgard.dev.plugins.register` decorator as follows::

    from teqc.parsers._parser import Parser
    from midgard.dev import plugins

    @plugins.register
    class MyNewParser(Parser):
        ...

To use a parser, you will typically use the :func:`parse_file`-function defined below

    from teqc import parsers
    my_new_parser = parsers.parse_file('my_new_parser', 'file_name.txt', ...)
    my_data = my_new_parser.as_dict()

The name used in `parse_file` to call the parser is the name of the module (file) containing the parser.

"""

# Midgard imports
from midgard.dev import plugins


def names():
    """List the names of the available parsers

    Returns:
        List: Names of the available parsers
    """
    return plugins.names(package_name=__name__)


def parse_file(parser_name, file_path, encoding=None, **parser_args):
    """Use the given parser on a file and return parsed data

    Specify `parser_name` and `file_path` to the file that should be parsed. Use `names` to list available parsers.

    Data can be retrieved either as Dictionaries or Pandas DataFrames by using one of the methods `as_dict` or
    `as_dataframe`.

    Example:
        > df = parsers.parse_file('teqc_report', 'ons12130.sn1').as_dataframe()

    Args:
        parser_name (String):  Name of parser.
        file_path (String):    Path to file that should be parsed.
        encoding (String):     Encoding in file that is parsed.
        parser_args:           Input arguments to the parser.

    Returns:
        Parser:  Parser with the parsed data
    """
    parser = plugins.call(
        package_name=__name__, plugin_name=parser_name, file_path=file_path, encoding=encoding, **parser_args
    )
    return parser.parse()
