"""
artists.handler - Artist CRUD Lambda entry points.

One function per API Gateway route:
    GET    /artists          list_artists   (?limit, ?cursor, ?isActive)
    GET    /artists/{id}     get_artist
    POST   /artists          create_artist
    PUT    /artists/{id}     update_artist  (PATCH routes here too)
    DELETE /artists/{id}     delete_artist
"""

from __future__ import annotations

from aws_lambda_powertools import Logger

from catalog_api.artists.schemas import ArtistCreate, ArtistIdParams, ArtistListQuery, ArtistUpdate
from catalog_api.artists.service import ArtistService, default_artist_service
from catalog_api.envelope import ApiResponse, ok
from catalog_api.http import HandlerContext, create_handler, parse_json_body
from catalog_api.messages import ArtistMessages
from catalog_api.validation import validate_model

logger = Logger(service="artists-api")


def _service() -> ArtistService:
    return default_artist_service()


def _artist_id(ctx: HandlerContext) -> str:
    return validate_model(ArtistIdParams, {"id": ctx.path_id}, ctx.locale).id


@create_handler(logger)
def list_artists(ctx: HandlerContext) -> ApiResponse:
    query = validate_model(ArtistListQuery, ctx.query, ctx.locale)
    result = _service().list_artists(ctx.tenant_id, query, ctx.locale)
    return ok(ArtistMessages.LIST_SUCCESS, ctx.locale, result.to_dict(), ctx.request_id)


@create_handler(logger)
def get_artist(ctx: HandlerContext) -> ApiResponse:
    artist = _service().get_artist(ctx.tenant_id, _artist_id(ctx), ctx.locale)
    return ok(ArtistMessages.GET_SUCCESS, ctx.locale, artist.to_dict(), ctx.request_id)


@create_handler(logger)
def create_artist(ctx: HandlerContext) -> ApiResponse:
    payload = validate_model(ArtistCreate, parse_json_body(ctx.event, ctx.locale), ctx.locale)
    artist = _service().create_artist(ctx.tenant_id, payload, ctx.locale)
    logger.info("Artist created", artist_id=artist.artist_id)
    return ok(ArtistMessages.CREATED, ctx.locale, artist.to_dict(), ctx.request_id)


@create_handler(logger)
def update_artist(ctx: HandlerContext) -> ApiResponse:
    artist_id = _artist_id(ctx)
    payload = validate_model(ArtistUpdate, parse_json_body(ctx.event, ctx.locale), ctx.locale)
    artist = _service().update_artist(ctx.tenant_id, artist_id, payload, ctx.locale)
    return ok(ArtistMessages.UPDATED, ctx.locale, artist.to_dict(), ctx.request_id)


@create_handler(logger)
def delete_artist(ctx: HandlerContext) -> ApiResponse:
    artist_id = _artist_id(ctx)
    _service().delete_artist(ctx.tenant_id, artist_id, ctx.locale)
    logger.info("Artist deleted", artist_id=artist_id)
    return ok(ArtistMessages.DELETED, ctx.locale, {"id": artist_id}, ctx.request_id)
