"""Management command to report files on disk without a database record."""

import logging
from pathlib import Path
from typing import Any, final, override

from django.core.management.base import BaseCommand

from server.apps.files.infrastructure.storage import get_storage_service
from server.apps.files.models import StoredFile

logger = logging.getLogger(__name__)


@final
class Command(BaseCommand):
    """List (and optionally delete) files no StoredFile points to.

    Such files are left behind when the database insert fails after a
    successful disk write. Database rows are never touched.
    """

    help = 'Report files in FILE_DIRECTORY that have no database record'

    @override
    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--delete',
            action='store_true',
            help='Delete orphaned files instead of only listing them',
        )

    @override
    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the orphan scan.

        Args:
            args: Positional arguments (unused).
            options: Command options.
        """
        delete = options['delete']
        directory = Path(get_storage_service().get_file_directory())

        if not directory.is_dir():
            self.stderr.write(f'File directory does not exist: {directory}')
            return

        known_paths = {
            Path(path).resolve()
            for path in StoredFile.objects.values_list('path', flat=True)
        }
        orphans = sorted(
            candidate
            for candidate in directory.iterdir()
            if candidate.is_file() and candidate.resolve() not in known_paths
        )

        failed = 0
        for orphan in orphans:
            if not delete:
                self.stdout.write(f'Orphaned: {orphan}')
                continue

            try:
                orphan.unlink()
                self.stdout.write(f'Deleted: {orphan}')
                logger.info('Deleted orphaned file: %s', orphan)
            except OSError as exc:
                self.stderr.write(f'Failed to delete {orphan}: {exc}')
                logger.exception('Failed to delete orphaned file: %s', orphan)
                failed += 1

        logger.info('Orphan scan of %s found %d files', directory, len(orphans))
        if delete:
            self.stdout.write(
                self.style.SUCCESS(
                    f'Deleted {len(orphans) - failed} orphaned files, '
                    f'{failed} failed',
                ),
            )
        else:
            self.stdout.write(
                self.style.SUCCESS(f'Found {len(orphans)} orphaned files'),
            )
