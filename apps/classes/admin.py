from django.contrib import admin
from .models import LearningClass, ClassRegistration


class ClassRegistrationInline(admin.TabularInline):
    model = ClassRegistration
    extra = 0
    readonly_fields = ['user_id', 'created_at']


@admin.register(LearningClass)
class LearningClassAdmin(admin.ModelAdmin):
    list_display = ['title', 'level', 'start_date', 'end_date', 'weeks', 'total_spots', 'location_tag']
    list_filter = ['level', 'location_tag']
    search_fields = ['title', 'description']
    date_hierarchy = 'start_date'
    inlines = [ClassRegistrationInline]


@admin.register(ClassRegistration)
class ClassRegistrationAdmin(admin.ModelAdmin):
    list_display = ['learning_class', 'user_id', 'created_at']
    search_fields = ['learning_class__title']
