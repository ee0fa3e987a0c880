from django.urls import path
from . import views

app_name = 'staff'

urlpatterns = [
    path('api/pages/<int:pk>/members/', views.api_members, name='api_members'),
    path('api/categories/<int:pk>/members/', views.api_category_members, name='api_category_members'),
]
