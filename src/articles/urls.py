"""Routing for article endpoints."""

from django.urls import path

from .views import ArticleDetailView, ArticleListView, CreateArticleView, UpdateArticleView

urlpatterns = [
    path("all", ArticleListView.as_view(), name="article-all"),
    path("create", CreateArticleView.as_view(), name="article-create"),
    path("update", UpdateArticleView.as_view(), name="article-update"),
    path("<str:article_id>", ArticleDetailView.as_view(), name="article-detail"),
]
