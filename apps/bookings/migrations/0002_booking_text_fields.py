from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("bookings", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="booking",
            name="room_id",
            field=models.TextField(
                blank=True,
                help_text="roomId of the booked room. Not a foreign key.",
                null=True,
            ),
        ),
        migrations.AlterField(
            model_name="booking",
            name="date",
            field=models.TextField(blank=True, null=True),
        ),
        migrations.AlterField(
            model_name="booking",
            name="customer_name",
            field=models.TextField(blank=True, null=True),
        ),
        migrations.AlterField(
            model_name="booking",
            name="status",
            field=models.TextField(blank=True, null=True),
        ),
        migrations.AlterField(
            model_name="bookingslotlock",
            name="room_id",
            field=models.TextField(),
        ),
        migrations.AlterField(
            model_name="bookingslotlock",
            name="date",
            field=models.TextField(),
        ),
    ]
