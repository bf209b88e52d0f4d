"""Scripts bundled with pycaststatus."""

import argparse
import json
import logging

from pycaststatus import const
from pycaststatus.exceptions import SettingsError
from pycaststatus.settings import Settings
from pycaststatus.support import update_model_field

_LOGGER = logging.getLogger(__name__)


# pylint: disable=too-few-public-methods
class TransformOutput(argparse.Action):
    """Transform output format to function."""

    def __call__(self, parser, namespace, values, option_string=None):
        """Match output format and save formatter."""
        if values == "json":
            setattr(namespace, self.dest, json.dumps)
        else:
            raise argparse.ArgumentTypeError("Valid formats are: json")


# pylint: disable=too-few-public-methods
class TransformChannels(argparse.Action):
    """Transform comma separated channels into a set."""

    def __call__(self, parser, namespace, values, option_string=None):
        """Split channels and save as set."""
        setattr(namespace, self.dest, {ch for ch in values.split(",") if ch})


def create_common_parser() -> argparse.ArgumentParser:
    """Return a parser with common arguments used by all scripts."""
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        "--debug", help="print debug information", action="store_true", dest="debug"
    )

    settings_group = parser.add_argument_group("settings")
    settings_group.add_argument(
        "-s",
        "--setting",
        action="append",
        default=[],
        dest="settings",
        metavar="KEY=VALUE",
        help="change a setting, e.g. image.timeout=2.5 (lists are comma separated)",
    )

    return parser


def get_settings(args) -> Settings:
    """Create settings based on user configuration."""
    settings = Settings()
    for setting in args.settings:
        key, sep, value = setting.partition("=")
        if not sep:
            raise SettingsError(f"setting must be on form KEY=VALUE: {setting}")
        try:
            update_model_field(settings, key, value)
        except (AttributeError, ValueError) as ex:
            raise SettingsError(f"invalid setting {setting}: {ex}") from ex
    return settings


def log_current_version():
    """Log current version of pycaststatus."""
    _LOGGER.debug("Running with pycaststatus %s", const.__version__)
