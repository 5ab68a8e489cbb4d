"""Teqc library module for handling of Teqc configuration settings

Example:
--------

    >>> from teqc.lib import config
    >>> config.teqc.decoder.default_system.str
    'G'

Description:
------------

This module is used to read Teqc configuration settings. We read configuration settings from Teqc's config directory,
from a `.teqc` directory in the home directory of the user and finally from the current working directory (see
`_CONFIG_DIRECTORIES`). Settings read later override settings read earlier. The main configuration file should be
called teqc.conf. Personal changes to the config can be done in a file called teqc_local.conf (see
`_CONFIG_FILENAMES`).

Each configuration is split into sections, and each section consists of `key=value`-pairs. To read a configuration
entry, use `config.teqc.section.key`, for instance `config.teqc.log.default_level` reads the key `default_level` in
the `log`-section. To actually use a configuration entry you should convert it to the required data type using one of
the properties `str`, `int`, `float`, `bool`, `list`, `tuple`, `dict`, `date`, `datetime` or `path`.

"""

# Standard library imports
import pathlib

# Midgard imports
from midgard.config.config import Configuration


# Base directory of the Teqc installation
TEQC_DIR = pathlib.Path(__file__).resolve().parent.parent.parent

# Prioritized list of possible names of Teqc config files
_CONFIG_FILENAMES = dict(teqc=("teqc_local.conf", "teqc.conf"))

# Prioritized list of possible locations for all Teqc config files
_CONFIG_DIRECTORIES = (pathlib.Path.cwd(), pathlib.Path.home() / ".teqc", TEQC_DIR / "config")

# Datetime format, defined here for consistency
FMT_datetime = "%Y-%m-%d %H:%M:%S"

# Default values used when a setting is not found in any config file
_DEFAULTS = dict(
    log=dict(default_level="info"),
    decoder=dict(max_satellites="300", default_system="G", initial_columns="99"),
)


def config_paths(cfg_name):
    """Yield all files that contain the given configuration, least important first"""
    for file_name in _CONFIG_FILENAMES.get(cfg_name, (f"{cfg_name}.conf",))[::-1]:
        for file_dir in _CONFIG_DIRECTORIES[::-1]:
            file_path = file_dir / file_name
            if file_path.exists():
                yield file_path


def read_teqc_config():
    """Read Teqc-configuration"""
    teqc.clear()
    for section, entries in _DEFAULTS.items():
        teqc.update_from_dict(entries, section=section, source="teqc.lib.config")
    for file_path in config_paths("teqc"):
        teqc.update_from_file(file_path)


def decoder_options():
    """Options passed on to the report decoder

    Returns:
        Dict: Keyword arguments accepted by `teqc.report.decode`.
    """
    return dict(
        max_satellites=teqc.decoder.max_satellites.int,
        default_system=teqc.decoder.default_system.str,
        initial_columns=teqc.decoder.initial_columns.int,
    )


# Add configuration as module variable
teqc = Configuration("teqc")
read_teqc_config()
