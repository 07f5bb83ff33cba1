import json

import pytest

REPO_MAP = {
    "df": "zerowidth/dotfiles",
    "foo": "baz/qux",
    "wp": "my/widgets",
}

USER_MAP = {
    "zw": "zerowidth",
}


@pytest.fixture
def repo_map():
    return dict(REPO_MAP)


@pytest.fixture
def user_map():
    return dict(USER_MAP)


@pytest.fixture
def config_file(tmp_path):
    """Write a config file and return its path."""

    def _write(**data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
