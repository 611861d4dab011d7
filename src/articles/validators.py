"""Rule sets for article queries and payloads.

Create and update deliberately allow different lengths for ``title`` and
``sub_heading``; each rule set is applied only to its own payload.
"""

from rest_framework import serializers


def _positive_id(message: str, **kwargs) -> serializers.IntegerField:
    return serializers.IntegerField(
        min_value=1,
        error_messages={
            "required": message,
            "null": message,
            "invalid": message,
            "min_value": message,
        },
        **kwargs,
    )


def _required_text(label: str, max_length: int | None = None) -> serializers.CharField:
    messages = {
        "required": f"{label} is required",
        "blank": f"{label} is required",
        "null": f"{label} is required",
    }
    if max_length is not None:
        messages["max_length"] = f"{label} cannot exceed {max_length} characters"
    return serializers.CharField(max_length=max_length, error_messages=messages)


class ArticleQueryValidator(serializers.Serializer):
    search_key = _required_text("Search key")


class ArticleIdValidator(serializers.Serializer):
    article_id = _positive_id("Article ID must be greater than 0")


class CreateArticleValidator(serializers.Serializer):
    title = _required_text("Title", max_length=200)
    sub_heading = _required_text("SubHeading", max_length=500)
    content = _required_text("Content")
    user_id = _positive_id("UserId must be greater than 0")


class UpdateArticleValidator(serializers.Serializer):
    article_id = _positive_id("Article ID must be greater than 0")
    title = _required_text("Title", max_length=100)
    sub_heading = _required_text("SubHeading", max_length=200)
    content = _required_text("Content")
    user_id = _positive_id("User ID must be greater than 0")


__all__ = [
    "ArticleIdValidator",
    "ArticleQueryValidator",
    "CreateArticleValidator",
    "UpdateArticleValidator",
]
