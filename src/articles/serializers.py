"""Output shapes for article endpoints."""

from rest_framework import serializers

from .models import Article


class ArticleSerializer(serializers.ModelSerializer):
    """List entry: everything but the body."""

    article_id = serializers.IntegerField(source="id", read_only=True)
    author_name = serializers.CharField(source="owner.username", read_only=True)

    class Meta:
        model = Article
        fields = ["article_id", "title", "sub_heading", "author_name", "created_at", "updated_at"]
        read_only_fields = fields


class ArticleDetailSerializer(ArticleSerializer):
    """Single article including its content."""

    class Meta(ArticleSerializer.Meta):
        fields = ["article_id", "title", "sub_heading", "content", "author_name", "created_at", "updated_at"]
        read_only_fields = fields


__all__ = ["ArticleDetailSerializer", "ArticleSerializer"]
