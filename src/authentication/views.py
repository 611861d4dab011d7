"""Account endpoints: list, register, login, and delete."""

from core.response import BaseAPIView, result_response
from .services import AuthService


class AccountListView(BaseAPIView):
    # noinspection PyMethodMayBeStatic
    def get(self, request):
        """List every registered account."""
        return result_response(AuthService().get_all_accounts())


class RegisterView(BaseAPIView):
    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Register a new account holding the default role."""
        return result_response(AuthService().register(request.data))


class LoginView(BaseAPIView):
    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Verify credentials and return a signed access token."""
        return result_response(AuthService().login(request.data))


class DeleteAccountView(BaseAPIView):
    # noinspection PyMethodMayBeStatic
    def delete(self, request, account_id: str):
        """Delete an account together with its articles."""
        return result_response(AuthService().delete_account(account_id))
