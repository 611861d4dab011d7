"""Article endpoints: filtered list, detail, create, and update."""

from django.conf import settings
from rest_framework import status

from core.response import BaseAPIView, error_response, result_response
from .services import ArticleService


def _with_acting_owner(request):
    """Return the request payload with ``user_id`` resolved for this request.

    By default the body's ``user_id`` is trusted as-is. With
    ``ARTICLE_OWNER_FROM_TOKEN`` enabled the verified token subject replaces
    it, and anonymous requests get ``None``.
    """
    if not settings.ARTICLE_OWNER_FROM_TOKEN:
        return request.data
    if not getattr(request.user, "is_authenticated", False):
        return None
    if not isinstance(request.data, dict):
        # Left for the validator to reject.
        return request.data
    data = request.data.copy()
    data["user_id"] = request.user.pk
    return data


def _authentication_required():
    return error_response(["Authentication credentials were not provided."], status.HTTP_401_UNAUTHORIZED)


class ArticleListView(BaseAPIView):
    # noinspection PyMethodMayBeStatic
    def get(self, request):
        """List articles whose title or sub-heading contains ``searchKey``."""
        search_key = request.query_params.get("searchKey", request.query_params.get("search_key"))
        return result_response(ArticleService().get_all_articles(search_key))


class ArticleDetailView(BaseAPIView):
    # noinspection PyMethodMayBeStatic
    def get(self, request, article_id: str):
        return result_response(ArticleService().get_article(article_id))


class CreateArticleView(BaseAPIView):
    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Create an article for the acting owner."""
        data = _with_acting_owner(request)
        if data is None:
            return _authentication_required()
        return result_response(ArticleService().create_article(data))


class UpdateArticleView(BaseAPIView):
    # noinspection PyMethodMayBeStatic
    def put(self, request):
        """Replace an article's text; only its owner may do so."""
        data = _with_acting_owner(request)
        if data is None:
            return _authentication_required()
        return result_response(ArticleService().update_article(data))
