import configparser
import logging

logger = logging.getLogger(__name__)


class FillSettings:
    """Flood fill defaults persisted in the ``[FloodFill]`` section of an ini file."""

    SECTION = 'FloodFill'

    DEFAULT_FILL_SETTINGS = {
        "connectivity": 4,
        "frontier_capacity": 400,
        "mask_value": 255.0,
    }

    def __init__(self, path='settings.ini'):
        self.path = path
        self.config = configparser.ConfigParser()
        self.config.read(path)
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)

        connectivity = self._get_int(
            'connectivity', self.DEFAULT_FILL_SETTINGS["connectivity"]
        )
        if connectivity not in (4, 8):
            logger.warning("Ignoring connectivity %s, using 4", connectivity)
            connectivity = self.DEFAULT_FILL_SETTINGS["connectivity"]
        self.connectivity = connectivity

        capacity = self._get_int(
            'frontier_capacity', self.DEFAULT_FILL_SETTINGS["frontier_capacity"]
        )
        if capacity < 1:
            capacity = self.DEFAULT_FILL_SETTINGS["frontier_capacity"]
        self.frontier_capacity = capacity

        try:
            mask_value = self.config.getfloat(self.SECTION, 'mask_value')
        except (configparser.NoOptionError, ValueError):
            mask_value = self.DEFAULT_FILL_SETTINGS["mask_value"]
        self.mask_value = mask_value
        self._sync_fill_settings_to_config()

    def _get_int(self, option, default):
        try:
            return self.config.getint(self.SECTION, option)
        except (configparser.NoOptionError, ValueError):
            return default

    def _sync_fill_settings_to_config(self):
        self.config.set(self.SECTION, 'connectivity', str(self.connectivity))
        self.config.set(self.SECTION, 'frontier_capacity', str(self.frontier_capacity))
        self.config.set(self.SECTION, 'mask_value', str(self.mask_value))

    def save_settings(self):
        """Persist settings to disk."""
        self._sync_fill_settings_to_config()
        with open(self.path, 'w') as configfile:
            self.config.write(configfile)
