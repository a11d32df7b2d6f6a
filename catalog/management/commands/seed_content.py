import json

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from catalog.models import MenuItem
from catalog.sample_data import MENU, SAMPLE_CONTENT
from catalog.serializers import SERIALIZERS
from catalog.store import CONTENT_KINDS, COLLECTIONS, get_store, normalize_payload


class Command(BaseCommand):
    help = "Load starter scholarships, countries, universities, articles, news and the navigation menu."

    def add_arguments(self, parser):
        parser.add_argument('--reset', action='store_true', help='Delete existing content and menu before loading')
        parser.add_argument('--dry-run', action='store_true', help='Validate and report without writing to the database')
        parser.add_argument(
            '--from-file',
            dest='from_file',
            help='JSON export shaped like {"scholarships": [...], ...}; records may carry a legacy "_id"',
        )

    def load_content(self, path):
        if not path:
            return SAMPLE_CONTENT
        try:
            with open(path, encoding='utf-8') as handle:
                content = json.load(handle)
        except (OSError, ValueError) as exc:
            raise CommandError(f"Could not read {path}: {exc}")
        if not isinstance(content, dict):
            raise CommandError(f"{path} must contain a JSON object keyed by collection")
        for key in (*CONTENT_KINDS, 'menu'):
            records = content.get(key, [])
            if not isinstance(records, list):
                raise CommandError(f"{path}: \"{key}\" must be a list of records, got {type(records).__name__}")
            if not all(isinstance(record, dict) for record in records):
                raise CommandError(f"{path}: every entry of \"{key}\" must be a JSON object")
        return content

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        content = self.load_content(options['from_file'])

        summary = {}

        with transaction.atomic():
            if options['reset']:
                for model in COLLECTIONS.values():
                    model.objects.all().delete()

            for kind in CONTENT_KINDS:
                store = get_store(kind)
                serializer_class = SERIALIZERS[kind]
                created = skipped = invalid = 0

                for record in content.get(kind, []):
                    data = normalize_payload(record)
                    # ids from another database are not kept
                    data.pop('id', None)
                    if data.get('slug') and store.model.objects.filter(slug=data['slug']).exists():
                        skipped += 1
                        continue
                    serializer = serializer_class(data=data)
                    if not serializer.is_valid():
                        invalid += 1
                        self.stderr.write(self.style.WARNING(f"Skipping {kind} record {data.get('slug') or data}: {serializer.errors}"))
                        continue
                    store.insert(serializer.validated_data)
                    created += 1

                summary[f'{kind}_created'] = created
                summary[f'{kind}_skipped'] = skipped
                summary[f'{kind}_invalid'] = invalid

            menu_created = 0
            for entry in content.get('menu', MENU):
                if MenuItem.objects.filter(title=entry['title']).exists():
                    continue
                serializer = SERIALIZERS['menu'](data=normalize_payload(entry))
                if serializer.is_valid():
                    MenuItem.objects.create(**serializer.validated_data)
                    menu_created += 1
                else:
                    self.stderr.write(self.style.WARNING(f"Skipping menu item {entry.get('title')}: {serializer.errors}"))
            summary['menu_created'] = menu_created

            if dry_run:
                transaction.set_rollback(True)

        for key, value in summary.items():
            self.stdout.write(f"{key}: {value}")
        if dry_run:
            self.stdout.write(self.style.WARNING("Dry run: no changes were saved"))
        else:
            self.stdout.write(self.style.SUCCESS("Content seeded successfully"))
