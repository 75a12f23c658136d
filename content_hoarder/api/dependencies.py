"""Gateway dependencies: the dispatcher and the host collaborators it is given."""

from __future__ import annotations

from fastapi import Request

from content_hoarder.storage import ConfigContext, StorageProxy
from content_hoarder.trik import ContentHoarderTrik


def get_trik(request: Request) -> ContentHoarderTrik:
    return request.app.state.trik


def get_storage(request: Request) -> StorageProxy:
    return request.app.state.storage


def get_config(request: Request) -> ConfigContext | None:
    return request.app.state.config
