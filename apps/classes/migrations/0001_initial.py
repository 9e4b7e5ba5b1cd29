import django.db.models.deletion
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='LearningClass',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('host_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('title', models.CharField(max_length=200)),
                ('image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('level', models.CharField(choices=[('Beginner', 'Beginner'), ('Intermediate', 'Intermediate'), ('Advanced', 'Advanced')], max_length=20)),
                ('weeks', models.PositiveIntegerField()),
                ('total_spots', models.PositiveIntegerField()),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('start_time', models.TimeField()),
                ('end_time', models.TimeField()),
                ('meeting_days', models.CharField(max_length=100)),
                ('schedule_summary', models.CharField(max_length=200)),
                ('location_tag', models.CharField(choices=[('DTLA', 'Downtown LA')], default='DTLA', max_length=20)),
                ('location_details', models.CharField(max_length=255)),
                ('requirements', models.TextField(blank=True, null=True)),
                ('host_blurb', models.TextField(blank=True, null=True)),
                ('description', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Class',
                'verbose_name_plural': 'Classes',
                'db_table': 'classes',
                'ordering': ['start_date', 'start_time'],
            },
        ),
        migrations.CreateModel(
            name='ClassRegistration',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('user_id', models.UUIDField(db_index=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('learning_class', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='registrations', to='classes.learningclass')),
            ],
            options={
                'db_table': 'class_registrations',
                'ordering': ['created_at'],
                'unique_together': {('learning_class', 'user_id')},
            },
        ),
    ]
