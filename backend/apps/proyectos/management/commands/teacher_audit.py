from django.core.management.base import BaseCommand

from apps.proyectos import audit
from apps.proyectos.enums import AuditKind


class Command(BaseCommand):
    help = 'Prints the teacher audit trail, newest first'

    def add_arguments(self, parser):
        parser.add_argument('--kind', choices=['updates', 'deletes', 'all'], default='all')
        parser.add_argument('--teacher', type=int, default=None,
                            help='Only records for this teacher id')

    def handle(self, *args, **options):
        if options['teacher'] is not None:
            records = audit.history_for(options['teacher'])
            if options['kind'] != 'all':
                wanted = AuditKind.UPDATED if options['kind'] == 'updates' else AuditKind.DELETED
                records = [r for r in records if r.kind == wanted]
        elif options['kind'] == 'updates':
            records = audit.list_updates()
        elif options['kind'] == 'deletes':
            records = audit.list_deletes()
        else:
            records = sorted(audit.list_updates() + audit.list_deletes(),
                             key=lambda r: r.pk, reverse=True)

        if not records:
            self.stdout.write(self.style.WARNING("No audit records found."))
            return

        for rec in records:
            self.stdout.write(
                f"#{rec.pk} {rec.kind} teacher={rec.teacher_id} "
                f"doc={rec.document_number} name={rec.full_name!r} "
                f"years={rec.years_experience} type={rec.employment_type or '-'} "
                f"at={rec.recorded_at.isoformat()} by={rec.principal}"
            )

        self.stdout.write(self.style.SUCCESS(f"{len(records)} audit record(s)."))
