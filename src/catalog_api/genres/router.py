"""Genre routes for the HTTP app."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from catalog_api.context import RequestContext
from catalog_api.envelope import ok
from catalog_api.genres.schemas import GenreCreate, GenreIdParams, GenreListQuery, GenreUpdate
from catalog_api.genres.service import GenreService, default_genre_service
from catalog_api.messages import GenreMessages
from catalog_api.validation import validate_model
from catalog_api.web import json_body, render, request_context

router = APIRouter(prefix="/genres", tags=["genres"])


@router.get("")
def list_genres(
    request: Request,
    ctx: RequestContext = Depends(request_context),
    service: GenreService = Depends(default_genre_service),
) -> Response:
    query = validate_model(GenreListQuery, dict(request.query_params), ctx.locale)
    result = service.list_genres(ctx.tenant_id, query, ctx.locale)
    return render(ok(GenreMessages.LIST_SUCCESS, ctx.locale, result.to_dict(), ctx.request_id))


@router.post("")
def create_genre(
    ctx: RequestContext = Depends(request_context),
    body: Any = Depends(json_body),
    service: GenreService = Depends(default_genre_service),
) -> Response:
    payload = validate_model(GenreCreate, body, ctx.locale)
    genre = service.create_genre(ctx.tenant_id, payload, ctx.locale)
    return render(ok(GenreMessages.CREATED, ctx.locale, genre.to_dict(), ctx.request_id))


@router.get("/{genre_id}")
def get_genre(
    genre_id: str,
    ctx: RequestContext = Depends(request_context),
    service: GenreService = Depends(default_genre_service),
) -> Response:
    params = validate_model(GenreIdParams, {"id": genre_id}, ctx.locale)
    genre = service.get_genre(ctx.tenant_id, params.id, ctx.locale)
    return render(ok(GenreMessages.GET_SUCCESS, ctx.locale, genre.to_dict(), ctx.request_id))


@router.api_route("/{genre_id}", methods=["PUT", "PATCH"])
def update_genre(
    genre_id: str,
    ctx: RequestContext = Depends(request_context),
    body: Any = Depends(json_body),
    service: GenreService = Depends(default_genre_service),
) -> Response:
    params = validate_model(GenreIdParams, {"id": genre_id}, ctx.locale)
    payload = validate_model(GenreUpdate, body, ctx.locale)
    genre = service.update_genre(ctx.tenant_id, params.id, payload, ctx.locale)
    return render(ok(GenreMessages.UPDATED, ctx.locale, genre.to_dict(), ctx.request_id))


@router.delete("/{genre_id}")
def delete_genre(
    genre_id: str,
    ctx: RequestContext = Depends(request_context),
    service: GenreService = Depends(default_genre_service),
) -> Response:
    params = validate_model(GenreIdParams, {"id": genre_id}, ctx.locale)
    service.delete_genre(ctx.tenant_id, params.id, ctx.locale)
    return render(ok(GenreMessages.DELETED, ctx.locale, {"id": params.id}, ctx.request_id))
