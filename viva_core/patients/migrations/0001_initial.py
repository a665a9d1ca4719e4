from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "document_type",
                    models.CharField(
                        choices=[
                            ("CC", "Cédula de ciudadanía"),
                            ("TI", "Tarjeta de identidad"),
                            ("CE", "Cédula de extranjería"),
                            ("PP", "Pasaporte"),
                            ("NIT", "Número de identificación tributaria"),
                            ("DNI", "Documento nacional de identidad"),
                        ],
                        max_length=10,
                    ),
                ),
                ("document_number", models.CharField(max_length=20)),
                ("first_name", models.CharField(max_length=80)),
                ("last_name", models.CharField(max_length=80)),
                ("birth_date", models.DateField()),
                ("phone_number", models.CharField(blank=True, max_length=20, null=True)),
                ("email", models.EmailField(blank=True, max_length=120, null=True)),
                ("created_at", models.DateTimeField(db_index=True, editable=False)),
            ],
            options={
                "db_table": "patients_patient",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["last_name", "first_name"], name="patients_last_first_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("document_number",), name="uq_patient_document_number"),
                ],
            },
        ),
    ]
