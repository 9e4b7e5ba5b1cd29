from django.contrib import admin
from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ['id', 'first_name', 'last_name', 'username', 'want_to_learn_role']
    list_filter = ['want_to_learn_role']
    search_fields = ['first_name', 'last_name', 'username']
