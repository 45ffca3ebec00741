import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from pageutils.core.config import Config
from pageutils.core.context import (
    HostContext,
    Location,
    get_default_context,
    resolve_context,
    set_default_context,
)
from pageutils.core.document import SCRIPT_PENDING, Document


# --- Location ---
def test_location_from_url_splits_search_and_hash():
    location = Location.from_url("https://example.com/list?page=2#/detail?id=7")
    assert location == Location(search="?page=2", hash="#/detail?id=7")


def test_location_from_url_without_query_or_fragment():
    assert Location.from_url("https://example.com/") == Location(search="", hash="")
    assert Location.from_url("") == Location()


# --- HostContext ---
def test_from_config_uses_page_url_and_user_agent():
    with patch.object(Config, "PAGE_URL", "https://example.com/?a=1#top"), \
         patch.object(Config, "USER_AGENT", "TestAgent/1.0"):
        context = HostContext.from_config()

    assert context.location == Location(search="?a=1", hash="#top")
    assert context.user_agent == "TestAgent/1.0"
    assert context.document.head == []


def test_contexts_do_not_share_documents():
    assert HostContext().document is not HostContext().document


def test_set_default_context_returns_previous(restore_default_context):
    replacement = HostContext(user_agent="Replacement")
    previous = set_default_context(replacement)

    assert get_default_context() is replacement
    assert previous is not replacement


def test_resolve_context_prefers_explicit(restore_default_context):
    explicit = HostContext(user_agent="Explicit")
    assert resolve_context(explicit) is explicit
    assert resolve_context() is get_default_context()


# --- Document ---
def test_document_scripts_filters_by_src():
    document = Document()
    first = document.append_to_head(document.create_script())
    first.src = "a.js"
    second = document.append_to_head(document.create_script())
    second.src = "b.js"

    assert document.scripts() == [first, second]
    assert document.scripts("b.js") == [second]
    assert first.status == SCRIPT_PENDING


# --- Config ---
def test_config_validate_rejects_bad_log_level():
    with patch.object(Config, "LOG_LEVEL", "LOUD"):
        with pytest.raises(ValueError):
            Config.validate()


def test_config_validate_rejects_bad_port():
    with patch.object(Config, "PORT", "http"), patch.object(Config, "LOG_LEVEL", "INFO"):
        with pytest.raises(ValueError):
            Config.validate()


def test_allowed_origins_deduplicates():
    with patch.object(Config, "CORS_ALLOWED_ORIGINS_ENV", "http://a.test, http://b.test,http://a.test"):
        origins = Config.allowed_origins(["http://c.test", "http://b.test"])
    assert origins == ["http://a.test", "http://b.test", "http://c.test"]


def test_importing_helpers_does_not_load_fastapi():
    code = "import sys, pageutils; print('fastapi' in sys.modules)"
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True, cwd=Path(__file__).resolve().parents[1])
    assert result.stdout.strip() == "False"
