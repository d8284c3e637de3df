from django.contrib import admin

from .models import StoredDocument


@admin.register(StoredDocument)
class StoredDocumentAdmin(admin.ModelAdmin):
    list_display = ("id", "key", "updated_at")
    search_fields = ("key",)
    readonly_fields = ("created_at", "updated_at")
