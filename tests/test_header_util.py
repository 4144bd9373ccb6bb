"""Tests for alert header builders."""

import logging
from unittest.mock import patch

from author_api.utils.header_util import (
    create_alert,
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)


def test_create_alert():
    assert create_alert("authorApp.custom", "x") == {
        "X-authorApp-alert": "authorApp.custom",
        "X-authorApp-params": "x",
    }


def test_entity_alerts():
    assert create_entity_creation_alert("author", "1") == {
        "X-authorApp-alert": "authorApp.author.created",
        "X-authorApp-params": "1",
    }
    assert create_entity_update_alert("author", "5")[
        "X-authorApp-alert"
    ] == "authorApp.author.updated"
    assert create_entity_deletion_alert("author", "9") == {
        "X-authorApp-alert": "authorApp.author.deleted",
        "X-authorApp-params": "9",
    }


def test_failure_alert(caplog):
    with caplog.at_level(logging.ERROR, logger="author_api"):
        headers = create_failure_alert(
            "author", "idexists", "A new author cannot already have an ID"
        )

    assert headers == {
        "X-authorApp-error": "error.idexists",
        "X-authorApp-params": "author",
    }
    assert "A new author cannot already have an ID" in caplog.text


def test_header_names_follow_app_name():
    with patch("author_api.utils.header_util.app_settings.APP_NAME", "books"):
        headers = create_entity_creation_alert("author", "2")

    assert headers == {
        "X-books-alert": "books.author.created",
        "X-books-params": "2",
    }
