"""Register an account and grant it the Admin role."""

from django.core.management.base import BaseCommand, CommandError

from authentication.models import Account, RoleType
from authentication.services import AuthService


class Command(BaseCommand):
    """Management command creating (or promoting) an administrator."""

    help = (
        "Register an account through the normal registration rules and grant it "
        "the Admin role. Use --promote to grant the role to an existing account."
    )

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True)
        parser.add_argument("--username", help="Required unless --promote is given.")
        parser.add_argument("--password", help="Required unless --promote is given.")
        parser.add_argument(
            "--promote",
            action="store_true",
            help="Grant Admin to an already registered account instead of creating one.",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        service = AuthService()
        email = options["email"]

        if not options.get("promote"):
            result = service.register(
                {
                    "username": options.get("username") or "",
                    "email": email,
                    "password": options.get("password") or "",
                }
            )
            if not result.is_success:
                raise CommandError(result.error)
            self.stdout.write(f"Registered {email}.")

        account = Account.objects.find_by_email(email)
        if account is None:
            raise CommandError(f"No account registered under {email}")

        result = service.assign_role(account, RoleType.ADMIN)
        if not result.is_success:
            raise CommandError(result.error)
        self.stdout.write(self.style.SUCCESS(f"{email} now holds roles: {', '.join(account.role_names())}"))
