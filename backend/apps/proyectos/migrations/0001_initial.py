# Initial schema: teacher, project and the teacher audit trail.

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Teacher",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("document_number", models.CharField(help_text="Cédula, pasaporte, etc.", max_length=20)),
                ("full_name", models.CharField(max_length=120)),
                ("title", models.CharField(blank=True, help_text="Título académico", max_length=120, null=True)),
                ("years_experience", models.IntegerField(default=0)),
                ("address", models.CharField(blank=True, max_length=180, null=True)),
                ("employment_type", models.CharField(blank=True, help_text="e.g. Tiempo completo, Cátedra", max_length=40, null=True)),
            ],
            options={
                "verbose_name": "Teacher",
                "verbose_name_plural": "Teachers",
                "ordering": ["id"],
                "constraints": [
                    models.UniqueConstraint(fields=("document_number",), name="uq_teacher_document"),
                    models.CheckConstraint(condition=models.Q(("years_experience__gte", 0)), name="ck_teacher_years"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=120)),
                ("description", models.CharField(blank=True, max_length=400, null=True)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField(blank=True, help_text="null while the project is open-ended", null=True)),
                ("budget", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("hours", models.IntegerField(default=0)),
                (
                    "lead_teacher",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="led_projects",
                        to="proyectos.teacher",
                    ),
                ),
            ],
            options={
                "verbose_name": "Project",
                "verbose_name_plural": "Projects",
                "ordering": ["id"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("hours__gte", 0)), name="ck_project_hours"),
                    models.CheckConstraint(condition=models.Q(("budget__gte", 0)), name="ck_project_budget"),
                    models.CheckConstraint(
                        condition=models.Q(("end_date__isnull", True), ("end_date__gte", models.F("start_date")), _connector="OR"),
                        name="ck_project_dates",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="TeacherAuditRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("kind", models.CharField(choices=[("UPDATED", "Updated"), ("DELETED", "Deleted")], max_length=10)),
                ("teacher_id", models.BigIntegerField(db_index=True)),
                ("document_number", models.CharField(max_length=20)),
                ("full_name", models.CharField(max_length=120)),
                ("title", models.CharField(blank=True, max_length=120, null=True)),
                ("years_experience", models.IntegerField()),
                ("address", models.CharField(blank=True, max_length=180, null=True)),
                ("employment_type", models.CharField(blank=True, max_length=40, null=True)),
                ("recorded_at", models.DateTimeField(help_text="UTC, captured at write time")),
                ("principal", models.CharField(help_text="username or system principal", max_length=128)),
            ],
            options={
                "verbose_name": "Teacher Audit Record",
                "verbose_name_plural": "Teacher Audit Records",
                "ordering": ["-id"],
                "indexes": [models.Index(fields=["kind"], name="idx_audit_kind")],
            },
        ),
    ]
