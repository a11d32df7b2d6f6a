from django.contrib.auth.models import User
from django.core.management.base import BaseCommand, CommandError


class Command(BaseCommand):
    help = "Create an admin user for the content dashboard, or promote an existing one."

    def add_arguments(self, parser):
        parser.add_argument('--username', required=True)
        parser.add_argument('--password', help='Required when the user does not exist yet')
        parser.add_argument('--email', default='')
        parser.add_argument('--superuser', action='store_true', help='Also grant Django superuser rights')

    def handle(self, *args, **options):
        username = options['username']
        password = options['password']

        try:
            user = User.objects.get(username=username)
            created = False
        except User.DoesNotExist:
            if not password:
                raise CommandError("--password is required to create a new admin user")
            if len(password) < 6:
                raise CommandError("Password must be at least 6 characters long")
            user = User.objects.create_user(username=username, email=options['email'], password=password)
            created = True

        user.is_staff = True
        if options['superuser']:
            user.is_superuser = True
        if password and not created:
            user.set_password(password)
        if options['email']:
            user.email = options['email']
        user.save()

        if created:
            self.stdout.write(self.style.SUCCESS(f"Admin user '{username}' created"))
        else:
            self.stdout.write(self.style.SUCCESS(f"User '{username}' is now an admin"))
