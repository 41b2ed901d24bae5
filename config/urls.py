from django.urls import include, path


urlpatterns = [
    path('api/v1/giftcards/', include('giftcards.urls')),
    path('api/v1/admin/', include('superadmin.urls')),
]
