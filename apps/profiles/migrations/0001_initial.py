from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Profile',
            fields=[
                ('id', models.UUIDField(editable=False, primary_key=True, serialize=False)),
                ('first_name', models.CharField(blank=True, max_length=150)),
                ('last_name', models.CharField(blank=True, max_length=150)),
                ('username', models.CharField(blank=True, max_length=50, null=True, unique=True)),
                ('knowledge', models.JSONField(blank=True, default=list, help_text='Topics the member can teach')),
                ('curious_about', models.JSONField(blank=True, default=list, help_text='Topics the member wants to learn')),
                ('personality_answers', models.JSONField(blank=True, default=list, help_text='Option index per personality question')),
                ('want_to_learn_role', models.CharField(blank=True, max_length=50, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['first_name', 'last_name'],
            },
        ),
    ]
