# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"""Utils for reading a user preference config files."""

import configparser
import os

from ._qasmgenerror import QasmGenUserConfigError

DEFAULT_FILENAME = os.path.join(os.path.expanduser("~"), ".qasmgen", "settings.conf")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class UserConfig:
    """Class representing a user config file

    The config file format should look like:

    [default]
    ccx_legacy_spacing = False
    log_level = INFO

    """

    def __init__(self, filename=None):
        """Create a UserConfig

        Args:
            filename (str): The path to the user config file. If one isn't
                specified, ~/.qasmgen/settings.conf is used.
        """
        if filename is None:
            self.filename = DEFAULT_FILENAME
        else:
            self.filename = filename
        self.settings = {}
        self.config_parser = configparser.ConfigParser()

    def read_config_file(self):
        """Read config file and parse the contents into the settings attr."""
        if not os.path.isfile(self.filename):
            return
        self.config_parser.read(self.filename)
        self.parse_settings()

    def parse_settings(self):
        """Validate the [default] section of config_parser into settings.

        Raises:
            QasmGenUserConfigError: if a value is not valid.
        """
        if "default" in self.config_parser.sections():
            # Parse ccx_legacy_spacing
            try:
                ccx_legacy_spacing = self.config_parser.getboolean(
                    "default", "ccx_legacy_spacing", fallback=None
                )
            except ValueError as err:
                raise QasmGenUserConfigError(
                    "Value assigned to ccx_legacy_spacing is not valid. %s" % str(err)
                )
            if ccx_legacy_spacing is not None:
                self.settings["ccx_legacy_spacing"] = ccx_legacy_spacing

            # Parse log_level
            log_level = self.config_parser.get("default", "log_level", fallback=None)
            if log_level:
                log_level = log_level.upper()
                if log_level not in VALID_LOG_LEVELS:
                    raise QasmGenUserConfigError(
                        "%s is not a valid log level. Must be one of %s."
                        % (log_level, ", ".join(VALID_LOG_LEVELS))
                    )
                self.settings["log_level"] = log_level


def set_config(key, value, section=None, file_path=None):
    """Adds or modifies a user configuration

    It will add configuration to the currently configured location
    or the value of file argument.

    Only valid user config can be set in 'default' section. Custom
    user config can be added in any other sections.

    Args:
        key (str): name of the config
        value (obj): value of the config
        section (str, optional): if not specified, adds it to the
            `default` section of the config file.
        file_path (str, optional): the file to which config is added.
            If not specified, adds it to the default config file or
            if set, the value of `QASMGEN_SETTINGS` env variable.

    Raises:
        QasmGenUserConfigError: if the config is invalid
    """
    filename = file_path or os.getenv("QASMGEN_SETTINGS", DEFAULT_FILENAME)
    section = "default" if section is None else section

    if not isinstance(key, str):
        raise QasmGenUserConfigError("Key must be string type")

    valid_config = {
        "ccx_legacy_spacing",
        "log_level",
    }

    if section in [None, "default"]:
        if key not in valid_config:
            raise QasmGenUserConfigError("%s is not a valid user config." % key)

    config = configparser.ConfigParser()
    config.read(filename)

    if section not in config.sections():
        config.add_section(section)

    config.set(section, key, str(value))

    # validates config before it reaches the file
    user_config = UserConfig(filename)
    user_config.config_parser = config
    user_config.parse_settings()

    try:
        dirname = os.path.dirname(filename)
        if dirname:
            os.makedirs(dirname, exist_ok=True)
        with open(filename, "w") as cfgfile:
            config.write(cfgfile)
    except OSError as ex:
        raise QasmGenUserConfigError(
            "Unable to load the config file %s. Error: '%s'" % (filename, str(ex))
        )


def get_config():
    """Read the config file from the default location or env var

    It will read a config file at either the default location
    ~/.qasmgen/settings.conf or if set the value of the QASMGEN_SETTINGS env var.

    It will return the parsed settings dict from the parsed config file.
    Returns:
        dict: The settings dict from the parsed config file.
    """
    filename = os.getenv("QASMGEN_SETTINGS", DEFAULT_FILENAME)
    if not os.path.isfile(filename):
        return {}
    user_config = UserConfig(filename)
    user_config.read_config_file()
    return user_config.settings
