"""Artist routes for the HTTP app."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from catalog_api.artists.schemas import ArtistCreate, ArtistIdParams, ArtistListQuery, ArtistUpdate
from catalog_api.artists.service import ArtistService, default_artist_service
from catalog_api.context import RequestContext
from catalog_api.envelope import ok
from catalog_api.messages import ArtistMessages
from catalog_api.validation import validate_model
from catalog_api.web import json_body, render, request_context

router = APIRouter(prefix="/artists", tags=["artists"])


@router.get("")
def list_artists(
    request: Request,
    ctx: RequestContext = Depends(request_context),
    service: ArtistService = Depends(default_artist_service),
) -> Response:
    query = validate_model(ArtistListQuery, dict(request.query_params), ctx.locale)
    result = service.list_artists(ctx.tenant_id, query, ctx.locale)
    return render(ok(ArtistMessages.LIST_SUCCESS, ctx.locale, result.to_dict(), ctx.request_id))


@router.post("")
def create_artist(
    ctx: RequestContext = Depends(request_context),
    body: Any = Depends(json_body),
    service: ArtistService = Depends(default_artist_service),
) -> Response:
    payload = validate_model(ArtistCreate, body, ctx.locale)
    artist = service.create_artist(ctx.tenant_id, payload, ctx.locale)
    return render(ok(ArtistMessages.CREATED, ctx.locale, artist.to_dict(), ctx.request_id))


@router.get("/{artist_id}")
def get_artist(
    artist_id: str,
    ctx: RequestContext = Depends(request_context),
    service: ArtistService = Depends(default_artist_service),
) -> Response:
    params = validate_model(ArtistIdParams, {"id": artist_id}, ctx.locale)
    artist = service.get_artist(ctx.tenant_id, params.id, ctx.locale)
    return render(ok(ArtistMessages.GET_SUCCESS, ctx.locale, artist.to_dict(), ctx.request_id))


@router.api_route("/{artist_id}", methods=["PUT", "PATCH"])
def update_artist(
    artist_id: str,
    ctx: RequestContext = Depends(request_context),
    body: Any = Depends(json_body),
    service: ArtistService = Depends(default_artist_service),
) -> Response:
    params = validate_model(ArtistIdParams, {"id": artist_id}, ctx.locale)
    payload = validate_model(ArtistUpdate, body, ctx.locale)
    artist = service.update_artist(ctx.tenant_id, params.id, payload, ctx.locale)
    return render(ok(ArtistMessages.UPDATED, ctx.locale, artist.to_dict(), ctx.request_id))


@router.delete("/{artist_id}")
def delete_artist(
    artist_id: str,
    ctx: RequestContext = Depends(request_context),
    service: ArtistService = Depends(default_artist_service),
) -> Response:
    params = validate_model(ArtistIdParams, {"id": artist_id}, ctx.locale)
    service.delete_artist(ctx.tenant_id, params.id, ctx.locale)
    return render(ok(ArtistMessages.DELETED, ctx.locale, {"id": params.id}, ctx.request_id))
