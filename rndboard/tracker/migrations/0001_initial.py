import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


STAGE_CHOICES = [
    ('Product Concept', 'Product Concept'),
    ('Screen Test', 'Screen Test'),
    ('Testing Validation', 'Testing Validation'),
    ('First Batch', 'First Batch'),
    ('Post Launch', 'Post Launch'),
    ('Project Close', 'Project Close'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Member',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('email', models.EmailField(max_length=255, unique=True)),
                ('department', models.CharField(blank=True, max_length=100, null=True)),
                ('role', models.CharField(blank=True, max_length=100, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'members',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Requirement',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=100)),
                ('description', models.TextField()),
                ('stage', models.CharField(choices=STAGE_CHOICES, max_length=32)),
                ('priority', models.CharField(choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High')], default='medium', max_length=10)),
                ('assignee', models.CharField(max_length=100)),
                ('due_date', models.DateField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'requirements',
                'ordering': ['-updated_at'],
                'indexes': [
                    models.Index(fields=['stage'], name='requirements_stage_idx'),
                    models.Index(fields=['-created_at'], name='requirements_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='RequirementComment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('author_name', models.CharField(max_length=100)),
                ('content', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('requirement', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='tracker.requirement')),
            ],
            options={
                'db_table': 'requirement_comments',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['requirement', 'created_at'], name='comments_req_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ProjectStageHistory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('stage', models.CharField(choices=STAGE_CHOICES, max_length=32)),
                ('changed_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('requirement', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='stage_history', to='tracker.requirement')),
            ],
            options={
                'db_table': 'project_stage_history',
                'ordering': ['changed_at'],
                'verbose_name_plural': 'project stage history',
                'indexes': [
                    models.Index(fields=['requirement', 'changed_at'], name='history_req_changed_idx'),
                ],
            },
        ),
    ]
