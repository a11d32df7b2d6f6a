from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Article',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=255)),
                ('content', models.TextField()),
                ('summary', models.TextField()),
                ('slug', models.SlugField(max_length=255, unique=True)),
                ('publish_date', models.DateField()),
                ('author', models.CharField(max_length=100)),
                ('author_title', models.CharField(blank=True, max_length=150)),
                ('author_image', models.URLField(blank=True)),
                ('image', models.URLField(blank=True)),
                ('category', models.CharField(max_length=100)),
            ],
            options={'ordering': ['-publish_date', '-id']},
        ),
        migrations.CreateModel(
            name='Country',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=100)),
                ('description', models.TextField()),
                ('universities', models.PositiveIntegerField()),
                ('acceptance_rate', models.CharField(max_length=50)),
                ('image', models.URLField(blank=True)),
                ('slug', models.SlugField(max_length=255, unique=True)),
            ],
            options={'ordering': ['name', 'id'], 'verbose_name_plural': 'countries'},
        ),
        migrations.CreateModel(
            name='MenuItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=100)),
                ('url', models.CharField(max_length=255)),
                ('position', models.PositiveIntegerField(default=0)),
                ('children', models.JSONField(blank=True, default=list)),
            ],
            options={'ordering': ['position', 'id']},
        ),
        migrations.CreateModel(
            name='News',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=255)),
                ('content', models.TextField()),
                ('summary', models.TextField()),
                ('publish_date', models.DateField()),
                ('image', models.URLField(blank=True)),
                ('category', models.CharField(max_length=100)),
                ('is_featured', models.BooleanField(default=False)),
                ('slug', models.SlugField(max_length=255, unique=True)),
            ],
            options={'ordering': ['-publish_date', '-id'], 'verbose_name_plural': 'news'},
        ),
        migrations.CreateModel(
            name='Scholarship',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField()),
                ('amount', models.CharField(max_length=100)),
                ('deadline', models.DateField()),
                ('country', models.CharField(max_length=100)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('slug', models.SlugField(max_length=255, unique=True)),
                ('link', models.URLField(blank=True)),
            ],
            options={'ordering': ['deadline', 'id']},
        ),
        migrations.CreateModel(
            name='University',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField()),
                ('country', models.CharField(max_length=100)),
                ('ranking', models.PositiveIntegerField(blank=True, null=True)),
                ('image', models.URLField(blank=True)),
                ('slug', models.SlugField(max_length=255, unique=True)),
                ('features', models.JSONField(blank=True, default=list)),
            ],
            options={'ordering': [models.OrderBy(models.F('ranking'), nulls_last=True), 'name'], 'verbose_name_plural': 'universities'},
        ),
    ]
