from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("rooms", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="room",
            name="room_id",
            field=models.TextField(
                blank=True,
                db_index=True,
                help_text="Caller-supplied room identifier. Not unique.",
                null=True,
            ),
        ),
        migrations.AlterField(
            model_name="room",
            name="name",
            field=models.TextField(blank=True, null=True),
        ),
    ]
