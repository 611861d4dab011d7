"""Article listing, lookup, creation and owner-only updates."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from django.conf import settings
from django.db.models import Q
from rest_framework import status

from authentication.models import Account
from core.repository import Repository
from core.result import Failure, Result, success
from core.validation import run_validator

from .models import Article
from .serializers import ArticleDetailSerializer, ArticleSerializer
from .validators import (
    ArticleIdValidator,
    ArticleQueryValidator,
    CreateArticleValidator,
    UpdateArticleValidator,
)

logger = logging.getLogger(__name__)


class ArticleService:
    def __init__(
        self,
        articles: Repository[Article, int] | None = None,
        accounts: Repository[Account, int] | None = None,
    ):
        self.articles = articles if articles is not None else Repository(Article)
        self.accounts = (
            accounts if accounts is not None else Repository(Account, self.articles.unit_of_work)
        )

    def get_all_articles(self, search_key: Any) -> Result[list[dict[str, Any]]]:
        """Articles whose title or sub-heading contains ``search_key``."""
        try:
            outcome = run_validator(ArticleQueryValidator, {"search_key": search_key})
            if not outcome.is_valid:
                return Failure.validation(outcome.errors)

            key = outcome.data["search_key"]
            lookup = "contains" if settings.ARTICLE_SEARCH_CASE_SENSITIVE else "icontains"
            query = (
                self.articles.get_all()
                .select_related("owner")
                .filter(Q(**{f"title__{lookup}": key}) | Q(**{f"sub_heading__{lookup}": key}))
                .order_by("id")
            )
            return success(ArticleSerializer(list(query), many=True).data)

        except Exception:
            logger.exception("An error occurred while fetching all articles.")
            return Failure.unexpected()

    def get_article(self, article_id: Any) -> Result[dict[str, Any]]:
        try:
            outcome = run_validator(ArticleIdValidator, {"article_id": article_id})
            if not outcome.is_valid:
                return Failure.validation(outcome.errors)

            article = self.articles.get_by_id(outcome.data["article_id"])
            if article is None:
                return Failure.not_found("Article not found")

            return success(ArticleDetailSerializer(article).data)

        except Exception:
            logger.exception("An error occurred while fetching article %s.", article_id)
            return Failure.unexpected()

    def create_article(self, data: Mapping[str, Any]) -> Result[dict[str, Any]]:
        try:
            outcome = run_validator(CreateArticleValidator, data)
            if not outcome.is_valid:
                return Failure.validation(outcome.errors)

            payload = outcome.data
            owner = self.accounts.get_by_id(payload["user_id"])
            if owner is None:
                return Failure.validation("User not found")

            article = Article(
                title=payload["title"],
                sub_heading=payload["sub_heading"],
                content=payload["content"],
                owner=owner,
            )
            if not self.articles.add(article):
                return Failure.storage("Error occurred while creating article")

            return success(ArticleDetailSerializer(article).data, status.HTTP_201_CREATED)

        except Exception:
            logger.exception("An error occurred while creating an article.")
            return Failure.unexpected("Error occurred while creating article")

    def update_article(self, data: Mapping[str, Any]) -> Result[dict[str, Any]]:
        """Apply an update when ``user_id`` matches the stored owner.

        Answers 404 before 403: a missing article is reported as missing
        regardless of who asks.
        """
        try:
            outcome = run_validator(UpdateArticleValidator, data)
            if not outcome.is_valid:
                return Failure.validation(outcome.errors)

            payload = outcome.data
            article = self.articles.get_by_id(payload["article_id"])
            if article is None:
                return Failure.not_found("Article not found")

            if article.owner_id != payload["user_id"]:
                return Failure.forbidden("You are not allowed to update this article")

            article.title = payload["title"]
            article.sub_heading = payload["sub_heading"]
            article.content = payload["content"]
            if not self.articles.update(article):
                return Failure.storage("Error occurred while updating article")

            return success(ArticleDetailSerializer(article).data)

        except Exception:
            logger.exception("An error occurred while updating an article.")
            return Failure.unexpected("Error occurred while updating article")


__all__ = ["ArticleService"]
