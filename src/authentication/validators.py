"""Rule sets for registration and login payloads."""

from rest_framework import serializers

# bcrypt only reads the first 72 bytes of a password.
PASSWORD_MAX_BYTES = 72


def _require_non_whitespace(value: str) -> str:
    # Passwords are not trimmed, so whitespace-only input needs its own check.
    if not value.strip():
        raise serializers.ValidationError("Password is required")
    return value


class RegisterValidator(serializers.Serializer):
    username = serializers.CharField(
        min_length=3,
        max_length=50,
        error_messages={
            "required": "Username is required",
            "blank": "Username is required",
            "null": "Username is required",
            "min_length": "Username must be at least 3 characters",
            "max_length": "Username must not exceed 50 characters",
        },
    )
    email = serializers.EmailField(
        error_messages={
            "required": "Email is required",
            "blank": "Email is required",
            "null": "Email is required",
            "invalid": "Email is not valid",
        },
    )
    password = serializers.CharField(
        min_length=6,
        trim_whitespace=False,
        error_messages={
            "required": "Password is required",
            "blank": "Password is required",
            "null": "Password is required",
            "min_length": "Password must be at least 6 characters",
        },
    )

    def validate_password(self, value: str) -> str:
        value = _require_non_whitespace(value)
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise serializers.ValidationError(f"Password must not exceed {PASSWORD_MAX_BYTES} bytes")
        return value


class LoginValidator(serializers.Serializer):
    email = serializers.EmailField(
        error_messages={
            "required": "Email is required",
            "blank": "Email is required",
            "null": "Email is required",
            "invalid": "Email is not valid",
        },
    )
    password = serializers.CharField(
        trim_whitespace=False,
        error_messages={
            "required": "Password is required",
            "blank": "Password is required",
            "null": "Password is required",
        },
    )

    def validate_password(self, value: str) -> str:
        return _require_non_whitespace(value)


__all__ = ["LoginValidator", "RegisterValidator"]
