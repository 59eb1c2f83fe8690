"""
genres.handler - Genre CRUD Lambda entry points.

One function per API Gateway route:
    GET    /genres          list_genres
    GET    /genres/{id}     get_genre
    POST   /genres          create_genre
    PUT    /genres/{id}     update_genre   (PATCH routes here too)
    DELETE /genres/{id}     delete_genre
"""

from __future__ import annotations

from aws_lambda_powertools import Logger

from catalog_api.envelope import ApiResponse, ok
from catalog_api.genres.schemas import GenreCreate, GenreIdParams, GenreListQuery, GenreUpdate
from catalog_api.genres.service import GenreService, default_genre_service
from catalog_api.http import HandlerContext, create_handler, parse_json_body
from catalog_api.messages import GenreMessages
from catalog_api.validation import validate_model

logger = Logger(service="genres-api")


def _service() -> GenreService:
    return default_genre_service()


def _genre_id(ctx: HandlerContext) -> str:
    return validate_model(GenreIdParams, {"id": ctx.path_id}, ctx.locale).id


@create_handler(logger)
def list_genres(ctx: HandlerContext) -> ApiResponse:
    query = validate_model(GenreListQuery, ctx.query, ctx.locale)
    result = _service().list_genres(ctx.tenant_id, query, ctx.locale)
    return ok(GenreMessages.LIST_SUCCESS, ctx.locale, result.to_dict(), ctx.request_id)


@create_handler(logger)
def get_genre(ctx: HandlerContext) -> ApiResponse:
    genre = _service().get_genre(ctx.tenant_id, _genre_id(ctx), ctx.locale)
    return ok(GenreMessages.GET_SUCCESS, ctx.locale, genre.to_dict(), ctx.request_id)


@create_handler(logger)
def create_genre(ctx: HandlerContext) -> ApiResponse:
    payload = validate_model(GenreCreate, parse_json_body(ctx.event, ctx.locale), ctx.locale)
    genre = _service().create_genre(ctx.tenant_id, payload, ctx.locale)
    logger.info("Genre created", genre_id=genre.genre_id)
    return ok(GenreMessages.CREATED, ctx.locale, genre.to_dict(), ctx.request_id)


@create_handler(logger)
def update_genre(ctx: HandlerContext) -> ApiResponse:
    genre_id = _genre_id(ctx)
    payload = validate_model(GenreUpdate, parse_json_body(ctx.event, ctx.locale), ctx.locale)
    genre = _service().update_genre(ctx.tenant_id, genre_id, payload, ctx.locale)
    return ok(GenreMessages.UPDATED, ctx.locale, genre.to_dict(), ctx.request_id)


@create_handler(logger)
def delete_genre(ctx: HandlerContext) -> ApiResponse:
    genre_id = _genre_id(ctx)
    _service().delete_genre(ctx.tenant_id, genre_id, ctx.locale)
    logger.info("Genre deleted", genre_id=genre_id)
    return ok(GenreMessages.DELETED, ctx.locale, {"id": genre_id}, ctx.request_id)
