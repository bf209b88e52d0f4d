"""Simulated environment for script testing."""

from io import StringIO
import json

import pytest

from pycaststatus.scripts import castscript


@pytest.fixture(name="scriptenv")
def scriptenv_fixture(tmp_path):
    def _run_script(*args, messages=""):
        message_file = tmp_path / "messages.jsonl"
        message_file.write_text(messages)

        stdout = StringIO()
        exit_code = castscript.appstart([str(message_file), *args], stream=stdout)
        lines = [json.loads(line) for line in stdout.getvalue().splitlines()]
        return lines, exit_code

    yield _run_script
