import textwrap

import pytest

from inistore import IniStore


SERVER_INI = """\
; comment
[server]
host=localhost
port=8080
[server]
port=9090
"""


def write_ini(tmp_path, text, name="settings.ini"):
    p = tmp_path / name
    p.write_text(textwrap.dedent(text), encoding="utf-8")
    return p


@pytest.fixture
def server_ini(tmp_path):
    return write_ini(tmp_path, SERVER_INI)


@pytest.fixture
def store():
    return IniStore()
