from django.db import migrations

CREATE_FUNCTION = """
CREATE OR REPLACE FUNCTION get_patients_created_after(created_after timestamptz)
RETURNS SETOF patients_patient
LANGUAGE sql
STABLE
AS $$
    SELECT *
    FROM patients_patient
    WHERE created_at > $1
    ORDER BY id;
$$;
"""

DROP_FUNCTION = "DROP FUNCTION IF EXISTS get_patients_created_after(timestamptz);"


def create_function(apps, schema_editor):
    # Other vendors run the inline query registered in viva_core.patients.store.
    if schema_editor.connection.vendor != "postgresql":
        return
    schema_editor.execute(CREATE_FUNCTION)


def drop_function(apps, schema_editor):
    if schema_editor.connection.vendor != "postgresql":
        return
    schema_editor.execute(DROP_FUNCTION)


class Migration(migrations.Migration):

    dependencies = [
        ("patients", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_function, drop_function),
    ]
