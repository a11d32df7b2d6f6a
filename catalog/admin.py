from django.contrib import admin
from .models import Article, Country, MenuItem, News, Scholarship, University

@admin.register(Scholarship)
class ScholarshipAdmin(admin.ModelAdmin):
    list_display = ('title', 'country', 'amount', 'deadline', 'created_at')
    list_filter = ('country', 'deadline')
    search_fields = ('title', 'description', 'country')
    prepopulated_fields = {'slug': ('title',)}
    ordering = ('deadline',)

@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ('title', 'category', 'author', 'publish_date')
    list_filter = ('category', 'publish_date')
    search_fields = ('title', 'summary', 'content', 'author')
    prepopulated_fields = {'slug': ('title',)}
    ordering = ('-publish_date',)

@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ('name', 'universities', 'acceptance_rate')
    search_fields = ('name', 'description')
    prepopulated_fields = {'slug': ('name',)}

@admin.register(University)
class UniversityAdmin(admin.ModelAdmin):
    list_display = ('name', 'country', 'ranking')
    list_filter = ('country',)
    search_fields = ('name', 'description', 'country')
    prepopulated_fields = {'slug': ('name',)}

@admin.register(News)
class NewsAdmin(admin.ModelAdmin):
    list_display = ('title', 'category', 'publish_date', 'is_featured')
    list_filter = ('category', 'is_featured', 'publish_date')
    search_fields = ('title', 'summary', 'content')
    list_editable = ('is_featured',)
    prepopulated_fields = {'slug': ('title',)}
    ordering = ('-publish_date',)

@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ('title', 'url', 'position')
    list_editable = ('position',)
    ordering = ('position',)
