#!/usr/bin/env python3
"""Tool mapping receiver messages to channel values, modelled for scripting.

Messages are read as newline delimited JSON, one decoded receiver message per line
(as sent on the receiver or media namespace), e.g.

    {"type": "RECEIVER_STATUS", "status": {"volume": {"level": 0.5, "muted": false}}}

Every resulting channel update is printed as one line of JSON.
"""

import argparse
import datetime
import json
import logging
import sys
import traceback
from typing import Iterable, Optional, TextIO

from pycaststatus import convert, create_updater
from pycaststatus.const import ALL_CHANNELS, ConnectivityDetail, ConnectivityStatus
from pycaststatus.core.updater import StatusUpdater
from pycaststatus.exceptions import InvalidMessageError, SettingsError
from pycaststatus.messages import TYPE_RECEIVER_STATUS, parse_message
from pycaststatus.scripts import (
    TransformChannels,
    TransformOutput,
    create_common_parser,
    get_settings,
    log_current_version,
)
from pycaststatus.sink import AbstractStateSink
from pycaststatus.state import State
from pycaststatus.support import stringify_model

_LOGGER = logging.getLogger(__name__)


def output(success: bool, error=None, exception=None, values=None):
    """Produce output in intermediate format before conversion."""
    now = datetime.datetime.now(datetime.timezone.utc).astimezone().isoformat()
    result = {"result": "success" if success else "failure", "datetime": str(now)}
    if error:
        result["error"] = error
    if exception:
        result["exception"] = str(exception)
        result["stacktrace"] = "".join(
            traceback.format_exception(
                type(exception), exception, exception.__traceback__
            )
        )
    if values:
        result.update(**values)
    return result


class PrintingSink(AbstractStateSink):
    """Sink printing every update."""

    def __init__(
        self,
        formatter,
        stream: TextIO,
        channels: Iterable[str],
        observed: Optional[Iterable[str]],
    ):
        """Initialize a new PrintingSink."""
        super().__init__(channels=channels, observed=observed)
        self.formatter = formatter
        self.stream = stream

    def set_connectivity(
        self,
        status: ConnectivityStatus,
        detail: ConnectivityDetail = ConnectivityDetail.NoDetail,
        description: Optional[str] = None,
    ) -> None:
        """Print new connectivity."""
        super().set_connectivity(status, detail, description)
        self._print(
            output(
                True,
                values={"connectivity": convert.connectivity_str(status).lower()},
            )
        )

    def publish(self, channel: str, state: State) -> None:
        """Print channel update."""
        self._print(
            output(True, values={"channel": channel, "value": convert.state_str(state)})
        )

    def _print(self, result) -> None:
        print(self.formatter(result), file=self.stream, flush=True)


def process_messages(
    updater: StatusUpdater, lines: Iterable[str], formatter, stream: TextIO
) -> int:
    """Feed messages to updater and return number of bad messages."""
    failures = 0
    for line in lines:
        line = line.strip()
        if not line:
            continue

        try:
            payload = json.loads(line)
            if not isinstance(payload, dict):
                raise InvalidMessageError("message is not an object")
            message_type, status = parse_message(payload)
        except (ValueError, InvalidMessageError) as ex:
            _LOGGER.debug("Bad message %s: %s", line, ex)
            print(formatter(output(False, error=str(ex))), file=stream, flush=True)
            failures += 1
            continue

        if message_type == TYPE_RECEIVER_STATUS:
            updater.process_status_update(status)  # type: ignore[arg-type]
        else:
            updater.update_media_status(status)  # type: ignore[arg-type]

    return failures


def _create_parser() -> argparse.ArgumentParser:
    parser = create_common_parser()
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="file with messages (stdin if omitted)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=json.dumps,
        action=TransformOutput,
        help="output format",
    )
    parser.add_argument(
        "--observe",
        default=None,
        action=TransformChannels,
        help="comma separated channels to observe (default: all)",
    )
    parser.add_argument(
        "--no-images",
        action="store_false",
        dest="fetch_images",
        help="do not download images",
    )
    parser.add_argument(
        "--list-channels",
        action="store_true",
        help="list all known channels and exit",
    )
    parser.add_argument(
        "--show-settings",
        action="store_true",
        help="print settings after applying --setting and exit",
    )
    return parser


def appstart(argv=None, stream: TextIO = sys.stdout) -> int:
    """Start the application."""
    args = _create_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(
            filename="castscript.log",
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    log_current_version()

    if args.list_channels:
        print(
            args.output(output(True, values={"channels": list(ALL_CHANNELS)})),
            file=stream,
        )
        return 0

    try:
        settings = get_settings(args)
    except SettingsError as ex:
        print(args.output(output(False, exception=ex)), file=stream)
        return 1

    if args.show_settings:
        print(
            args.output(
                output(True, values={"settings": list(stringify_model(settings))})
            ),
            file=stream,
        )
        return 0

    channels = ALL_CHANNELS + tuple(settings.metadata.extra_channels)
    sink = PrintingSink(args.output, stream, channels, args.observe)
    updater = create_updater(sink, settings=settings, fetch_images=args.fetch_images)

    with args.input as input_file:
        failures = process_messages(updater, input_file, args.output, stream)
    return 1 if failures else 0


def main():
    """Application start here."""
    try:
        return appstart()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
