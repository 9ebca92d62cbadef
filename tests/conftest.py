# ABOUTME: Shared fixtures for extraction, pipeline and CLI tests
# ABOUTME: Builds Wiktionary-like page markup and isolates global configuration

import pytest

from lexicon_harvest.config import reload_config


def wiktionary_page(*definitions: str, etymology: str = "", extra: str = "") -> str:
    """Build markup shaped like a rendered es.wiktionary page."""
    dds = "".join(f"<dd>{definition}</dd>" for definition in definitions)
    return (
        '<div class="mw-parser-output">'
        "<style>.mw-parser-output .etim{color:red}</style>"
        '<h2 class="encabezado">Español</h2>'
        f"{etymology}"
        f"<dl>{dds}</dl>"
        f"{extra}"
        '<ol class="referencias"><li>Real Academia Española</li></ol>'
        "</div>"
    )


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Run every test against default settings, unaffected by a local .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("LEXICON_HARVEST_DELIVERY_ENDPOINT", "LEXICON_HARVEST_DELIVERY_TOKEN", "LEXICON_HARVEST_LOG_MODE"):
        monkeypatch.delenv(name, raising=False)
    reload_config()
    yield
    # Restore the environment before rebuilding the global config
    monkeypatch.undo()
    reload_config()


@pytest.fixture
def make_page():
    return wiktionary_page


@pytest.fixture
def gato_page() -> str:
    return wiktionary_page(
        "Mamífero doméstico.",
        etymology='<table class="etim"><tr><td><p>Del latín <i>cattus</i>, gato montés.</p></td></tr></table>',
    )
