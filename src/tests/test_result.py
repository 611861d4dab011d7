"""Tests for the success/failure result envelope."""

from django.test import SimpleTestCase

from core.result import DEFAULT_ERROR_MESSAGE, ErrorKind, Failure, failure, success


class ResultTests(SimpleTestCase):
    def test_success_defaults_to_200_without_payload(self):
        """A bare success is a 200 carrying no value."""
        result = success()

        self.assertTrue(result.is_success)
        self.assertEqual(result.status_code, 200)
        self.assertIsNone(result.value)

    def test_success_carries_payload_and_status(self):
        """Payload and status code are kept as given."""
        result = success({"id": 1}, 201)

        self.assertEqual(result.status_code, 201)
        self.assertEqual(result.value, {"id": 1})

    def test_failure_joins_many_messages(self):
        """Several messages are kept in order and joined with commas."""
        result = failure(400, ["Email is required", "Password is required"])

        self.assertFalse(result.is_success)
        self.assertEqual(result.errors, ("Email is required", "Password is required"))
        self.assertEqual(result.error, "Email is required,Password is required")

    def test_failure_without_message_uses_generic_text(self):
        """Missing or empty messages fall back to the generic text."""
        self.assertEqual(failure(500).error, DEFAULT_ERROR_MESSAGE)
        self.assertEqual(failure(500, []).error, DEFAULT_ERROR_MESSAGE)
        self.assertEqual(failure(500, "").error, DEFAULT_ERROR_MESSAGE)

    def test_failure_exposes_no_payload(self):
        """A failure has no value attribute to read by mistake."""
        result = Failure.not_found("User not found")

        self.assertFalse(hasattr(result, "value"))

    def test_kind_constructors_map_to_status_codes(self):
        """Each failure kind carries its fixed HTTP status."""
        cases = [
            (Failure.validation(["x"]), 400, ErrorKind.VALIDATION),
            (Failure.conflict("x"), 400, ErrorKind.CONFLICT),
            (Failure.not_found("x"), 404, ErrorKind.NOT_FOUND),
            (Failure.forbidden("x"), 403, ErrorKind.FORBIDDEN),
            (Failure.storage("x"), 500, ErrorKind.STORAGE),
            (Failure.unexpected(), 500, ErrorKind.UNEXPECTED),
        ]
        for result, status_code, kind in cases:
            with self.subTest(kind=kind):
                self.assertEqual(result.status_code, status_code)
                self.assertEqual(result.kind, kind)
