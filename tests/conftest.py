"""Shared test fixtures for the configfileform test suite.

Provides sample configuration files, request strings and renderers
used across the unit tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from configfileform.codecs.uri import parse_request
from configfileform.domain.models import RequestParameters
from configfileform.render.form import FormRenderer
from configfileform.render.request import RequestRenderer


# ---------------------------------------------------------------------------
# Config File Fixtures
# ---------------------------------------------------------------------------


SAMPLE_CONFIG = """\
# Network settings
# for the daemon
host=localhost
port=8080

# Greeting shown on the front page
#
# Quote it if it has spaces
motd='hello world'
"""


@pytest.fixture
def sample_config_text() -> str:
    """A small config file with comments, blanks and a quoted value."""
    return SAMPLE_CONFIG


@pytest.fixture
def sample_config_file(tmp_path: Path) -> Path:
    """SAMPLE_CONFIG written to a temporary file."""
    path = tmp_path / "daemon.conf"
    path.write_text(SAMPLE_CONFIG)
    return path


# ---------------------------------------------------------------------------
# Renderer Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def form_renderer() -> FormRenderer:
    """A render-mode renderer with default markup."""
    return FormRenderer()


@pytest.fixture
def sample_params() -> RequestParameters:
    """Request parameters overriding two keys of SAMPLE_CONFIG."""
    return parse_request("port=9090&motd=good+bye")


@pytest.fixture
def request_renderer(sample_params: RequestParameters) -> RequestRenderer:
    """A request-mode renderer over sample_params."""
    return RequestRenderer(sample_params)


# ---------------------------------------------------------------------------
# Environment Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep stray env vars and .env / YAML files out of the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("CONFIGFILEFORM_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
