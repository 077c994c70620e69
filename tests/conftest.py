"""Test configuration and global fixtures for parseconfig tests."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
import pytest

SAMPLE_CONFIG = """\
# Sample config
admin_email = root@localhost
listen_ip = "127.0.0.1"
listen_port = '87345'

[group1]
user_name = johnny
group_name = daemons

[group2]
user_name = rita
group_name = daemons
"""


@pytest.fixture(autouse=True)
def no_log_level_env(monkeypatch):
    """Keep the caller's environment from changing log levels or default files."""
    monkeypatch.delenv("PARSECONFIG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PARSECONFIG_FILE", raising=False)


@pytest.fixture
def sample_config_content():
    """Common config text with top-level params and two groups."""
    return SAMPLE_CONFIG


@pytest.fixture
def create_config_file(tmp_path):
    """Create a temporary config file, defaulting to the sample config."""

    def _create_file(content=None, filename="app.conf", encoding="utf-8"):
        text = content if content is not None else SAMPLE_CONFIG
        config_file = tmp_path / filename
        config_file.write_text(text, encoding=encoding)
        return config_file

    return _create_file
