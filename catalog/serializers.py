from django.utils import timezone
from django.utils.text import slugify
from rest_framework import serializers

from .models import Article, Country, MenuItem, News, Scholarship, University

# path segments routed before `<kind>/<slug>/`, so records could never be fetched by them
RESERVED_SLUGS = ("facets", "featured")


def check_slug_not_reserved(slug):
    if slug in RESERVED_SLUGS:
        raise serializers.ValidationError({"slug": [f"\"{slug}\" is reserved, please choose another slug."]})


class SlugFromTitleMixin:
    """
    Fill in ``slug`` from the title (or name) when the payload leaves it out.

    On update the slug is only regenerated when the title changes, and a
    generated slug must not clash with another record in the collection.
    Slugs that collide with fixed routes (`facets`, `featured`) are refused.
    """
    slug_source = "title"

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if attrs.get("slug"):
            check_slug_not_reserved(attrs["slug"])
            return attrs

        title = attrs.get(self.slug_source)
        if self.instance is not None and (title is None or title == getattr(self.instance, self.slug_source)):
            return attrs

        slug = slugify(title or "")
        if not slug:
            raise serializers.ValidationError({"slug": ["Could not derive a slug, please provide one."]})
        check_slug_not_reserved(slug)

        model = self.Meta.model
        clashes = model.objects.filter(slug=slug)
        if self.instance is not None:
            clashes = clashes.exclude(pk=self.instance.pk)
        if clashes.exists():
            raise serializers.ValidationError(
                {"slug": [f"A {model._meta.verbose_name} with this {self.slug_source} already exists"]}
            )
        attrs["slug"] = slug
        return attrs


class DefaultPublishDateMixin:
    def validate(self, attrs):
        attrs = super().validate(attrs)
        if self.instance is None and not attrs.get("publish_date"):
            attrs["publish_date"] = timezone.localdate()
        return attrs


class ScholarshipSerializer(SlugFromTitleMixin, serializers.ModelSerializer):
    tags = serializers.ListField(child=serializers.CharField(max_length=100), required=False)

    class Meta:
        model = Scholarship
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')
        extra_kwargs = {'slug': {'required': False}}


class ArticleSerializer(SlugFromTitleMixin, DefaultPublishDateMixin, serializers.ModelSerializer):
    class Meta:
        model = Article
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')
        extra_kwargs = {
            'slug': {'required': False},
            'publish_date': {'required': False},
        }


class CountrySerializer(SlugFromTitleMixin, serializers.ModelSerializer):
    slug_source = "name"

    class Meta:
        model = Country
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')
        extra_kwargs = {'slug': {'required': False}}


class UniversitySerializer(SlugFromTitleMixin, serializers.ModelSerializer):
    slug_source = "name"
    features = serializers.ListField(child=serializers.CharField(max_length=255), required=False)

    class Meta:
        model = University
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')
        extra_kwargs = {'slug': {'required': False}}


class NewsSerializer(SlugFromTitleMixin, DefaultPublishDateMixin, serializers.ModelSerializer):
    class Meta:
        model = News
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')
        extra_kwargs = {
            'slug': {'required': False},
            'publish_date': {'required': False},
        }


class MenuChildSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField(max_length=100)
    url = serializers.CharField(max_length=255)


class MenuItemSerializer(serializers.ModelSerializer):
    children = MenuChildSerializer(many=True, required=False)

    class Meta:
        model = MenuItem
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')

    def validate_children(self, value):
        return [dict(child) for child in value]


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()


SERIALIZERS = {
    "scholarships": ScholarshipSerializer,
    "articles": ArticleSerializer,
    "countries": CountrySerializer,
    "universities": UniversitySerializer,
    "news": NewsSerializer,
    "menu": MenuItemSerializer,
}
