import copy
import os
import yaml
import logging

DEFAULT_CONFIG = {
    "metrics": {
        "show": True,
        "ui": None,            # None = persistent screen when stdout is a TTY
        "refresh_time": None,  # None = 1s on a TTY, 600s otherwise
    },
    "mining": {
        "enabled": False,
        "solver": "default",
    },
    "node": {
        "name": "LitecoinZ",
    },
    "logging": {
        "file": "metrics.log",
        "level": "INFO",
    },
}

TTY_REFRESH_TIME = 1
ROLLING_REFRESH_TIME = 600


class Config:
    def __init__(self, config_path="config.yaml"):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        # (level, message) describing the last load; logged once logging is set up
        self.load_result = None
        self.load(config_path)

    def load(self, config_path="config.yaml"):
        if not os.path.exists(config_path):
            self.load_result = (logging.INFO, "No config file found, using defaults")
            return

        try:
            with open(config_path, 'r') as f:
                user_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self.load_result = (logging.ERROR, f"Failed to load config: {e}")
            return

        if user_config is not None and not isinstance(user_config, dict):
            self.load_result = (logging.ERROR,
                                f"Failed to load config: {config_path} does not contain a mapping")
            return
        if user_config:
            self._merge(self.data, user_config)
        self.load_result = (logging.INFO, f"Loaded configuration from {config_path}")

    def log_load_result(self):
        if self.load_result is not None:
            level, message = self.load_result
            logging.log(level, message)

    def _merge(self, default, user):
        for k, v in user.items():
            if isinstance(v, dict) and isinstance(default.get(k), dict):
                self._merge(default[k], v)
            else:
                default[k] = v

    def get(self, path, default=None):
        """Get config value using dot notation e.g. 'metrics.refresh_time'"""
        keys = path.split('.')
        val = self.data
        try:
            for k in keys:
                val = val[k]
            return val
        except (KeyError, TypeError):
            return default

    def display_mode(self, is_tty):
        """Resolve (persistent screen?, refresh seconds) for the given output."""
        is_screen = self.get("metrics.ui")
        if is_screen is None:
            is_screen = is_tty
        refresh = self.get("metrics.refresh_time")
        if refresh is None:
            refresh = TTY_REFRESH_TIME if is_tty else ROLLING_REFRESH_TIME
        return bool(is_screen), refresh
