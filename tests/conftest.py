"""Pytest fixtures for boxdoc tests."""

import pytest

from boxdoc import config
from boxdoc.formatting.styles import EmphasisStyle

ENV_VARS = (
    "LESS_TERMCAP_so",
    "LESS_TERMCAP_md",
    "LESS_TERMCAP_mb",
    "LESS_TERMCAP_us",
    "LESS_TERMCAP_me",
    "BOXDOC_WIDTH",
    "BOXDOC_INDENT",
    "BOXDOC_PAGER_STATUS",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep the user's terminal settings and .env out of every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "_settings", None)
    yield


@pytest.fixture
def tag_style() -> EmphasisStyle:
    """Readable stand-ins for the escape sequences."""
    return EmphasisStyle(
        italic="<i>",
        bold="<b>",
        bold_italic="<bi>",
        underline="<u>",
        reset="</>",
    )


@pytest.fixture
def sample_markup() -> str:
    """A help document using every markup feature."""
    return (
        "\n"
        "    Something *easy* to write here that can be indented however you like\n"
        "\t\tand wrapped and have each line indented and with <code>:\n"
        "\n"
        "        This will not be messed with.\n"
        "        Nor this.\n"
        "\n"
        "    So it's a lot like a **simple** version of Markdown that only supports\n"
        "    what is likely going to be used in stuff similar to man pages.\n"
        "\n"
        "    Let's try a hard  \n"
        "    return."
    )
