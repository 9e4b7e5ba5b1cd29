"""
URL configuration for the Two Cents Club project.
"""
from django.contrib import admin
from django.urls import path
from django.conf import settings
from django.conf.urls.static import static
from ninja import NinjaAPI

from apps.core.api_errors import setup_exception_handlers

api = NinjaAPI(
    title="Two Cents Club API",
    version="1.0.0",
    description="Community learning club: sign in, browse, join and host classes",
    docs_url="/docs",
)
setup_exception_handlers(api)

from apps.identity.api import router as identity_router
from apps.profiles.api import router as profiles_router
from apps.classes.api import router as classes_router

api.add_router("/identity/", identity_router)
api.add_router("/profiles/", profiles_router)
api.add_router("/classes/", classes_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
]

# Serve media files in development
if settings.DEBUG:
    urlpatterns += static(
        getattr(settings, 'MEDIA_URL', '/media/'),
        document_root=getattr(settings, 'MEDIA_ROOT', settings.BASE_DIR / 'media')
    )
