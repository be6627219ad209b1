from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.conf.urls.i18n import i18n_patterns

# Main URL configuration
urlpatterns = [
    path('i18n/', include('django.conf.urls.i18n')),  # Language switcher
]

# App URLs (language prefix only for non-default languages)
urlpatterns += i18n_patterns(
    path('', include('store.urls')),
    prefix_default_language=False,
)

# Static during debug
if settings.DEBUG:
    urlpatterns += [
        path("__reload__/", include("django_browser_reload.urls")),
    ]
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
