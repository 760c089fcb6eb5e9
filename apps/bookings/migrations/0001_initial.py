import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("booking_id", models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                (
                    "room_id",
                    models.CharField(
                        blank=True,
                        help_text="roomId of the booked room. Not a foreign key.",
                        max_length=255,
                        null=True,
                    ),
                ),
                ("date", models.CharField(blank=True, max_length=64, null=True)),
                ("start", models.JSONField(blank=True, help_text="Opaque orderable time value.", null=True)),
                ("end", models.JSONField(blank=True, help_text="Opaque orderable time value.", null=True)),
                ("customer_name", models.CharField(blank=True, max_length=255, null=True)),
                ("status", models.CharField(blank=True, max_length=64, null=True)),
                (
                    "attributes",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Any other fields supplied with the booking request.",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Booking",
                "verbose_name_plural": "Bookings",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["room_id", "date"], name="bookings_bo_room_id_5c1a2e_idx"),
                    models.Index(fields=["customer_name"], name="bookings_bo_custome_8d7f3b_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="BookingSlotLock",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("room_id", models.CharField(max_length=255)),
                ("date", models.CharField(max_length=64)),
            ],
            options={
                "verbose_name": "Booking slot lock",
                "verbose_name_plural": "Booking slot locks",
                "constraints": [
                    models.UniqueConstraint(fields=("room_id", "date"), name="booking_slot_lock_unique"),
                ],
            },
        ),
    ]
