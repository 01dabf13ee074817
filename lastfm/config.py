#!/usr/bin/env python
"""Loading of YAML configuration files for the package"""

__author__ = "Abhinav Sarkar <abhinav@abhinavsarkar.net>"
__version__ = "0.3"
__license__ = "GNU Lesser General Public License"
__package__ = "lastfm"

import logging
import os.path

import yaml

logger = logging.getLogger('lastfm.config')
# A sentinel object to make sure we don't accidently raise on None
SENTINEL = object()

DEFAULT_PATHS = ['./lastfm.yaml', '~/.config/python-lastfm/lastfm.yaml', '~/.lastfm.yaml']
"""Where L{load_configuration} looks when no paths are given"""

class AttributeDict(dict):
    """
    A dictionary with attribute access, nested dictionaries are wrapped too.
    So C{settings.lastfm.api_key} works like C{settings['lastfm']['api_key']}.
    """
    def __getattr__(self, key):
        value = super(AttributeDict, self).get(key, SENTINEL)
        if value is SENTINEL:
            raise AttributeError("No such key: {:s}".format(key))
        if isinstance(value, dict):
            return AttributeDict(value)
        return value

class Settings(AttributeDict):
    """
    The settings read from a YAML configuration file. The C{lastfm} section
    holds C{api_key}, C{secret}, C{session_key}, C{user_agent}, C{timeout},
    C{fetch_interval} and C{debug}, see L{Api.from_settings}.
    """
    filename = None

    def load(self, filename):
        """
        Loads a configuration file and tries parsing it, before exporting it
        as the active configuration.

        If this is called when another file is already loaded the previous
        file will be dumped in preference for the new file.

        raises: Any exceptions possible from :func:`open` and :func:`yaml.safe_load`
        return: None
        """
        filename = os.path.abspath(os.path.expanduser(filename))
        with open(filename, 'rb') as f:
            config = yaml.safe_load(f.read())

        self.clear()
        self.update(config or {})
        self.filename = filename
        logger.info("Loaded configuration from %s", filename)

    def reload(self):
        """
        A convenience function that reloads the currently loaded configuration
        file with the filename used last.

        raises: Any exceptions possible from :func:`open` and :func:`yaml.safe_load`.
        """
        self.load(self.filename)

settings = Settings()

def load_configuration(paths = None):
    """
    Load the first existing file of paths into the module settings.

    @param paths: candidate configuration files, L{DEFAULT_PATHS} if not given
    @type paths:  L{list} of L{str}
    @rtype:       L{Settings}

    @raise IOError: If none of the files exist.
    """
    if paths is None:
        paths = DEFAULT_PATHS
    for path in paths:
        if os.path.isfile(os.path.expanduser(path)):
            settings.load(path)
            return settings
        logger.debug("No configuration at %s", path)
    logger.error("No configuration file found in %s", ", ".join(paths))
    raise IOError("No configuration file found in: %s" % ", ".join(paths))
