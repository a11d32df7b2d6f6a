from django.db import models
from django.db.models import F


class TimestampedContent(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Scholarship(TimestampedContent):
    title = models.CharField(max_length=255)
    description = models.TextField()
    amount = models.CharField(max_length=100)
    deadline = models.DateField()
    country = models.CharField(max_length=100)
    tags = models.JSONField(default=list, blank=True)
    slug = models.SlugField(max_length=255, unique=True)
    link = models.URLField(blank=True)

    class Meta:
        ordering = ["deadline", "id"]

    def __str__(self):
        return self.title


class Article(TimestampedContent):
    title = models.CharField(max_length=255)
    content = models.TextField()
    summary = models.TextField()
    slug = models.SlugField(max_length=255, unique=True)
    publish_date = models.DateField()
    author = models.CharField(max_length=100)
    author_title = models.CharField(max_length=150, blank=True)
    author_image = models.URLField(blank=True)
    image = models.URLField(blank=True)
    category = models.CharField(max_length=100)

    class Meta:
        ordering = ["-publish_date", "-id"]

    def __str__(self):
        return self.title


class Country(TimestampedContent):
    name = models.CharField(max_length=100)
    description = models.TextField()
    universities = models.PositiveIntegerField()
    acceptance_rate = models.CharField(max_length=50)
    image = models.URLField(blank=True)
    slug = models.SlugField(max_length=255, unique=True)

    class Meta:
        ordering = ["name", "id"]
        verbose_name_plural = "countries"

    def __str__(self):
        return self.name


class University(TimestampedContent):
    name = models.CharField(max_length=255)
    description = models.TextField()
    country = models.CharField(max_length=100)
    ranking = models.PositiveIntegerField(null=True, blank=True)
    image = models.URLField(blank=True)
    slug = models.SlugField(max_length=255, unique=True)
    features = models.JSONField(default=list, blank=True)

    class Meta:
        # unranked universities go last
        ordering = [F("ranking").asc(nulls_last=True), "name"]
        verbose_name_plural = "universities"

    def __str__(self):
        return self.name


class News(TimestampedContent):
    title = models.CharField(max_length=255)
    content = models.TextField()
    summary = models.TextField()
    publish_date = models.DateField()
    image = models.URLField(blank=True)
    category = models.CharField(max_length=100)
    is_featured = models.BooleanField(default=False)
    slug = models.SlugField(max_length=255, unique=True)

    class Meta:
        ordering = ["-publish_date", "-id"]
        verbose_name_plural = "news"

    def __str__(self):
        return self.title


class MenuItem(TimestampedContent):
    """Top-level navigation entry; ``children`` holds ``{id, title, url}`` links."""

    title = models.CharField(max_length=100)
    url = models.CharField(max_length=255)
    position = models.PositiveIntegerField(default=0)
    children = models.JSONField(default=list, blank=True)

    class Meta:
        ordering = ["position", "id"]

    def __str__(self):
        return self.title
