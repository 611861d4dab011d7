from django.db import migrations

ROLES = [
    (1, "Admin"),
    (2, "User"),
]


def seed_roles(apps, schema_editor):
    Role = apps.get_model("authentication", "Role")
    for role_id, name in ROLES:
        Role.objects.get_or_create(id=role_id, defaults={"name": name})


def unseed_roles(apps, schema_editor):
    Role = apps.get_model("authentication", "Role")
    Role.objects.filter(id__in=[role_id for role_id, _ in ROLES]).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("authentication", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_roles, unseed_roles),
    ]
